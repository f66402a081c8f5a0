"""Compose extraction, comparison, insights, and scoring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from stylealign.analysis.comparison import (
    ComparisonDetail,
    generate_detailed_comparison,
)
from stylealign.analysis.insights import (
    TransformationInsights,
    generate_transformation_insights,
)
from stylealign.analysis.sample_style import (
    SampleStyle,
    analyze_sample_style,
)
from stylealign.analysis.scoring import calculate_alignment_score
from stylealign.analysis.text_metrics import TextAnalysis, analyze_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleTransformation:
    """Everything known about how a rewrite relates to a target style."""

    user_style: SampleStyle
    original_analysis: TextAnalysis
    paraphrased_analysis: TextAnalysis
    transformation_insights: TransformationInsights
    alignment_score: float
    detailed_comparison: tuple[ComparisonDetail, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_style": self.user_style.to_dict(),
            "original_analysis": self.original_analysis.to_dict(),
            "paraphrased_analysis": self.paraphrased_analysis.to_dict(),
            "transformation_insights": (
                self.transformation_insights.to_dict()
            ),
            "alignment_score": self.alignment_score,
            "detailed_comparison": [
                d.to_dict() for d in self.detailed_comparison
            ],
        }


def build_style_transformation(
    style: SampleStyle,
    original_text: str,
    paraphrased_text: str,
) -> StyleTransformation:
    """Compare a rewrite against an already-derived target style."""
    original = analyze_text(original_text)
    paraphrased = analyze_text(paraphrased_text)

    transformation = StyleTransformation(
        user_style=style,
        original_analysis=original,
        paraphrased_analysis=paraphrased,
        transformation_insights=generate_transformation_insights(
            style, original, paraphrased
        ),
        alignment_score=calculate_alignment_score(style, paraphrased),
        detailed_comparison=tuple(
            generate_detailed_comparison(style, original, paraphrased)
        ),
    )
    logger.debug(
        "event=style_transformation original_words=%d"
        " paraphrased_words=%d alignment=%.3f rows=%d",
        original.word_count,
        paraphrased.word_count,
        transformation.alignment_score,
        len(transformation.detailed_comparison),
    )
    return transformation


def compare_style_transformation(
    user_sample_text: str,
    original_text: str,
    paraphrased_text: str,
) -> StyleTransformation:
    """Full pipeline: sample text -> target style -> comparison."""
    style = analyze_sample_style(user_sample_text)
    return build_style_transformation(
        style, original_text, paraphrased_text
    )
