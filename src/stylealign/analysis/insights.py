"""Short natural-language observations about a style rewrite.

Each dimension only speaks up when its shift clears a threshold;
an empty list means "nothing notable changed".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stylealign.analysis.sample_style import SampleStyle
from stylealign.analysis.style_config import INSIGHT_THRESHOLDS
from stylealign.analysis.text_metrics import TextAnalysis
from stylealign.constants import PersonalVoice


@dataclass(frozen=True)
class TransformationInsights:
    """Insight strings grouped by style dimension."""

    sentence_structure: tuple[str, ...] = field(default=())
    vocabulary_changes: tuple[str, ...] = field(default=())
    formality_shifts: tuple[str, ...] = field(default=())
    personality_adjustments: tuple[str, ...] = field(default=())
    technical_modifications: tuple[str, ...] = field(default=())
    readability_improvements: tuple[str, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "sentence_structure": list(self.sentence_structure),
            "vocabulary_changes": list(self.vocabulary_changes),
            "formality_shifts": list(self.formality_shifts),
            "personality_adjustments": list(
                self.personality_adjustments
            ),
            "technical_modifications": list(
                self.technical_modifications
            ),
            "readability_improvements": list(
                self.readability_improvements
            ),
        }


def _sentence_structure(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> list[str]:
    diff = paraphrased.avg_sentence_length - original.avg_sentence_length
    if abs(diff) <= INSIGHT_THRESHOLDS["avg_sentence_length"]:
        return []
    target = style.avg_sentence_length
    if diff > 0:
        return [
            f"Extended sentences by average of {diff:.1f} words to "
            f"match user's preference for {target:.1f}-word sentences"
        ]
    return [
        f"Shortened sentences by average of {abs(diff):.1f} words to "
        f"match user's concise {target:.1f}-word style"
    ]


def _vocabulary(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> list[str]:
    diff = (
        paraphrased.vocabulary_complexity - original.vocabulary_complexity
    )
    if abs(diff) <= INSIGHT_THRESHOLDS["vocabulary_complexity"]:
        return []
    target = style.vocabulary_complexity * 100
    if diff > 0:
        return [
            f"Increased vocabulary complexity by {diff * 100:.1f}% to "
            f"match user's sophisticated writing style ({target:.1f}%)"
        ]
    return [
        f"Simplified vocabulary by {abs(diff) * 100:.1f}% to match "
        f"user's accessible style ({target:.1f}%)"
    ]


def _formality(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> list[str]:
    if (
        style.uses_contractions
        and not original.uses_contractions
        and paraphrased.uses_contractions
    ):
        return [
            "Added contractions to create a more casual, "
            "conversational tone matching user style"
        ]
    if (
        not style.uses_contractions
        and original.uses_contractions
        and not paraphrased.uses_contractions
    ):
        return [
            "Removed contractions to maintain formal tone "
            "consistent with user writing"
        ]
    return []


def _personality(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> list[str]:
    if (
        style.personal_voice == PersonalVoice.FIRST_PERSON
        and paraphrased.first_person_usage > original.first_person_usage
    ):
        return [
            "Shifted to more first-person perspective to match "
            "user's personal writing style"
        ]
    if (
        style.personal_voice == PersonalVoice.THIRD_PERSON
        and paraphrased.third_person_usage > original.third_person_usage
    ):
        return [
            "Adopted third-person perspective to match user's "
            "objective writing style"
        ]
    return []


def _technical(
    original: TextAnalysis, paraphrased: TextAnalysis
) -> list[str]:
    reduction = original.passive_voice_ratio - paraphrased.passive_voice_ratio
    if reduction <= 0:
        return []
    return [
        f"Reduced passive voice by {reduction * 100:.1f}% for more "
        f"direct, active writing"
    ]


def _readability(
    original: TextAnalysis, paraphrased: TextAnalysis
) -> list[str]:
    diff = paraphrased.readability_score - original.readability_score
    threshold = INSIGHT_THRESHOLDS["readability_score"]
    if diff > threshold:
        return [
            f"Improved readability score by {diff:.1f} points through "
            f"better sentence structure and word choice"
        ]
    if diff < -threshold:
        return [
            f"Increased complexity by {abs(diff):.1f} points to match "
            f"user's sophisticated writing style"
        ]
    return []


def generate_transformation_insights(
    style: SampleStyle,
    original: TextAnalysis,
    paraphrased: TextAnalysis,
) -> TransformationInsights:
    return TransformationInsights(
        sentence_structure=tuple(
            _sentence_structure(style, original, paraphrased)
        ),
        vocabulary_changes=tuple(_vocabulary(style, original, paraphrased)),
        formality_shifts=tuple(_formality(style, original, paraphrased)),
        personality_adjustments=tuple(
            _personality(style, original, paraphrased)
        ),
        technical_modifications=tuple(_technical(original, paraphrased)),
        readability_improvements=tuple(
            _readability(original, paraphrased)
        ),
    )
