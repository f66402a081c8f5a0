"""Grouped-metrics view of a style comparison.

A second formatting layer over the same TextAnalysis and alignment
primitives: metrics are clustered into named groups and each carries
its percent variation from the target.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from stylealign.analysis.comparison import (
    contraction_change,
    generate_change_description,
    get_alignment,
    target_readability,
    transition_change,
    transitions_relevant,
    yes_no,
)
from stylealign.analysis.sample_style import SampleStyle
from stylealign.analysis.scoring import calculate_alignment_score
from stylealign.analysis.style_config import TOLERANCES
from stylealign.analysis.text_metrics import TextAnalysis
from stylealign.constants import Alignment

# (min score, summary) checked top-down
_SUMMARY_BANDS: tuple[tuple[float, str], ...] = (
    (
        0.85,
        "The rewrite closely mirrors your writing style across "
        "nearly every measured dimension.",
    ),
    (
        0.70,
        "The rewrite matches your style well, with a few "
        "dimensions still drifting from your usual patterns.",
    ),
    (
        0.55,
        "The rewrite partially reflects your style; several "
        "dimensions differ noticeably from your sample.",
    ),
    (
        0.0,
        "The rewrite diverges from your style on most measured "
        "dimensions.",
    ),
)


class StructuredMetric(BaseModel):
    """A single metric with target, before, and after values."""

    name: str
    target: str | float
    original: str | float
    paraphrased: str | float
    percent_difference: float | None = None
    alignment: Alignment
    explanation: str


class MetricGroup(BaseModel):
    """Named cluster of related metrics."""

    group_name: str
    description: str
    metrics: list[StructuredMetric] = Field(
        default_factory=lambda: list[StructuredMetric]()
    )


class StructuredStyleComparison(BaseModel):
    """Grouped comparison consumed by the detailed report view."""

    overall_similarity: float
    summary: str
    metric_groups: list[MetricGroup] = Field(
        default_factory=lambda: list[MetricGroup]()
    )


def percent_difference(value: float, target: float) -> float | None:
    """Variation of ``value`` from ``target`` in percent, 1 decimal.

    None when the target is zero (no meaningful percentage).
    """
    if target == 0:
        return None
    return round(abs(value - target) / abs(target) * 100, 1)


def summarize(score: float) -> str:
    for floor, text in _SUMMARY_BANDS:
        if score >= floor:
            return text
    return _SUMMARY_BANDS[-1][1]


def _numeric_metric(
    name: str,
    key: str,
    target: float,
    original: float,
    paraphrased: float,
    descriptor: str,
) -> StructuredMetric:
    return StructuredMetric(
        name=name,
        target=round(target, 2),
        original=round(original, 2),
        paraphrased=round(paraphrased, 2),
        percent_difference=percent_difference(paraphrased, target),
        alignment=get_alignment(paraphrased, target, TOLERANCES[key]),
        explanation=generate_change_description(
            original, paraphrased, target, descriptor
        ),
    )


def _sentence_group(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> MetricGroup:
    metrics = [
        _numeric_metric(
            "Average Sentence Length",
            "avg_sentence_length",
            style.avg_sentence_length,
            original.avg_sentence_length,
            paraphrased.avg_sentence_length,
            "sentence length",
        ),
        _numeric_metric(
            "Question Usage",
            "question_ratio",
            style.question_ratio,
            original.question_ratio,
            paraphrased.question_ratio,
            "question usage",
        ),
    ]
    return MetricGroup(
        group_name="Sentence Structure",
        description=(
            "How long your sentences run and how often you ask "
            "questions."
        ),
        metrics=metrics,
    )


def _vocabulary_group(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> MetricGroup:
    return MetricGroup(
        group_name="Vocabulary",
        description="Word length and the share of long, complex words.",
        metrics=[
            _numeric_metric(
                "Average Word Length",
                "avg_word_length",
                style.avg_word_length,
                original.avg_word_length,
                paraphrased.avg_word_length,
                "word length",
            ),
            _numeric_metric(
                "Vocabulary Complexity",
                "vocabulary_complexity",
                style.vocabulary_complexity,
                original.vocabulary_complexity,
                paraphrased.vocabulary_complexity,
                "vocabulary complexity",
            ),
        ],
    )


def _tone_group(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> MetricGroup:
    matched = style.uses_contractions == paraphrased.uses_contractions
    return MetricGroup(
        group_name="Tone & Formality",
        description="Whether the writing leans casual or formal.",
        metrics=[
            StructuredMetric(
                name="Uses Contractions",
                target=yes_no(style.uses_contractions),
                original=yes_no(original.uses_contractions),
                paraphrased=yes_no(paraphrased.uses_contractions),
                percent_difference=0.0 if matched else 100.0,
                alignment=(
                    Alignment.EXCELLENT if matched else Alignment.POOR
                ),
                explanation=contraction_change(original, paraphrased),
            )
        ],
    )


def _readability_group(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> MetricGroup:
    return MetricGroup(
        group_name="Readability",
        description="Estimated reading ease on a 0-100 scale.",
        metrics=[
            _numeric_metric(
                "Reading Ease Score",
                "readability_score",
                target_readability(style),
                original.readability_score,
                paraphrased.readability_score,
                "readability",
            )
        ],
    )


def _flow_group(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> MetricGroup | None:
    if not transitions_relevant(style, original, paraphrased):
        return None
    return MetricGroup(
        group_name="Flow & Coherence",
        description="Transition words that connect ideas.",
        metrics=[
            StructuredMetric(
                name="Transition Words",
                target=", ".join(style.preferred_transitions) or "None",
                original=original.transition_word_count,
                paraphrased=paraphrased.transition_word_count,
                alignment=Alignment.GOOD,
                explanation=transition_change(original, paraphrased),
            )
        ],
    )


def build_structured_comparison(
    style: SampleStyle,
    original: TextAnalysis,
    paraphrased: TextAnalysis,
) -> StructuredStyleComparison:
    score = calculate_alignment_score(style, paraphrased)
    groups = [
        _sentence_group(style, original, paraphrased),
        _vocabulary_group(style, original, paraphrased),
        _tone_group(style, original, paraphrased),
        _readability_group(style, original, paraphrased),
    ]
    flow = _flow_group(style, original, paraphrased)
    if flow is not None:
        groups.append(flow)
    return StructuredStyleComparison(
        overall_similarity=score,
        summary=summarize(score),
        metric_groups=groups,
    )
