"""Reduce a rewrite to one alignment score in [0, 1]."""

from __future__ import annotations

from stylealign.analysis.comparison import target_readability
from stylealign.analysis.sample_style import SampleStyle
from stylealign.analysis.style_config import SCORE_FACTORS
from stylealign.analysis.text_metrics import TextAnalysis


def closeness(value: float, target: float, normalization: float) -> float:
    """1.0 at the target, falling linearly to 0 at ``normalization``."""
    return max(0.0, 1.0 - abs(value - target) / normalization)


def factor_scores(
    style: SampleStyle, paraphrased: TextAnalysis
) -> dict[str, float]:
    """Unweighted [0, 1] closeness for each scoring factor."""
    observed_target: dict[str, tuple[float, float]] = {
        "avg_sentence_length": (
            paraphrased.avg_sentence_length,
            style.avg_sentence_length,
        ),
        "vocabulary_complexity": (
            paraphrased.vocabulary_complexity,
            style.vocabulary_complexity,
        ),
        "question_ratio": (
            paraphrased.question_ratio,
            style.question_ratio,
        ),
        "readability_score": (
            paraphrased.readability_score,
            target_readability(style),
        ),
    }

    scores: dict[str, float] = {}
    for name, factor in SCORE_FACTORS.items():
        if factor.normalization is None:
            # Binary factor: only contraction usage today
            scores[name] = (
                1.0
                if style.uses_contractions == paraphrased.uses_contractions
                else 0.0
            )
            continue
        value, target = observed_target[name]
        scores[name] = closeness(value, target, factor.normalization)
    return scores


def calculate_alignment_score(
    style: SampleStyle, paraphrased: TextAnalysis
) -> float:
    """Weighted mean of factor closeness.

    Weights: sentence length 0.30, vocabulary 0.25, contractions
    0.20, questions 0.15, readability 0.10. Not rounded.
    """
    scores = factor_scores(style, paraphrased)
    total = 0.0
    applied = 0.0
    for name, factor in SCORE_FACTORS.items():
        total += scores[name] * factor.weight
        applied += factor.weight
    return total / applied
