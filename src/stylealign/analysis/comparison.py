"""Per-metric comparison of target style, original, and rewrite."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

from stylealign.analysis.sample_style import SampleStyle
from stylealign.analysis.style_config import (
    DEFAULT_PASSIVE_VOICE_TARGET,
    SIGNIFICANT_CHANGE,
    TOLERANCES,
)
from stylealign.analysis.text_metrics import (
    TextAnalysis,
    calculate_readability,
)
from stylealign.constants import Alignment, Impact

DisplayValue = str | int | float


@dataclass(frozen=True)
class ComparisonDetail:
    """One row of the side-by-side style comparison."""

    category: str
    metric: str
    user_value: DisplayValue
    original_value: DisplayValue
    paraphrased_value: DisplayValue
    change_description: str
    alignment: Alignment
    impact: Impact

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["alignment"] = str(self.alignment)
        data["impact"] = str(self.impact)
        return data


def get_alignment(
    value: float, target: float, tolerance: float
) -> Alignment:
    """Bucket |value - target| into tolerance bands of 1x, 2x, 4x."""
    distance = abs(value - target)
    if distance <= tolerance:
        return Alignment.EXCELLENT
    if distance <= tolerance * 2:
        return Alignment.GOOD
    if distance <= tolerance * 4:
        return Alignment.FAIR
    return Alignment.POOR


def round_half_up(value: float) -> int:
    """Round halves upward (12.5 -> 13); built-in round() goes to even."""
    return math.floor(value + 0.5)


def _words(length: float) -> str:
    return f"{round_half_up(length)} words"


def no_change(descriptor: str) -> str:
    return f"No significant change in {descriptor}"


def generate_change_description(
    original_value: float,
    paraphrased_value: float,
    target_value: float,
    descriptor: str,
) -> str:
    """Describe how a metric moved, and whether it moved toward target."""
    change = paraphrased_value - original_value
    if abs(change) < SIGNIFICANT_CHANGE:
        return no_change(descriptor)

    direction = "increased" if change > 0 else "decreased"
    closer = abs(paraphrased_value - target_value) < abs(
        original_value - target_value
    )
    suffix = " (better alignment with user style)" if closer else ""
    return f"{descriptor} {direction} by {abs(change):.2f}{suffix}"


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def contraction_change(
    original: TextAnalysis, paraphrased: TextAnalysis
) -> str:
    if original.uses_contractions == paraphrased.uses_contractions:
        return no_change("contraction usage")
    if paraphrased.uses_contractions:
        return "Added contractions for casual tone"
    return "Removed contractions for formal tone"


def _directional_change(
    original: float,
    paraphrased: float,
    *,
    up: str,
    down: str,
    descriptor: str,
) -> str:
    if abs(paraphrased - original) < SIGNIFICANT_CHANGE:
        return no_change(descriptor)
    return up if paraphrased > original else down


def transition_change(
    original: TextAnalysis, paraphrased: TextAnalysis
) -> str:
    return _directional_change(
        original.transition_word_count,
        paraphrased.transition_word_count,
        up="Added more transition words for better flow",
        down="Reduced transition words for directness",
        descriptor="transition word usage",
    )


def transitions_relevant(
    style: SampleStyle, original: TextAnalysis, paraphrased: TextAnalysis
) -> bool:
    return bool(
        style.preferred_transitions
        or original.transition_word_count > 0
        or paraphrased.transition_word_count > 0
    )


def target_readability(style: SampleStyle) -> float:
    """Reading ease implied by the target style's lengths."""
    return calculate_readability(
        style.avg_sentence_length, style.avg_word_length
    )


def generate_detailed_comparison(
    style: SampleStyle,
    original: TextAnalysis,
    paraphrased: TextAnalysis,
) -> list[ComparisonDetail]:
    """Build the ordered comparison rows.

    Question and transition rows are omitted when every value they
    would show is zero or empty.
    """
    rows: list[ComparisonDetail] = []

    rows.append(
        ComparisonDetail(
            category="Sentence Structure",
            metric="Average Sentence Length",
            user_value=_words(style.avg_sentence_length),
            original_value=_words(original.avg_sentence_length),
            paraphrased_value=_words(paraphrased.avg_sentence_length),
            change_description=generate_change_description(
                original.avg_sentence_length,
                paraphrased.avg_sentence_length,
                style.avg_sentence_length,
                "sentence length",
            ),
            alignment=get_alignment(
                paraphrased.avg_sentence_length,
                style.avg_sentence_length,
                TOLERANCES["avg_sentence_length"],
            ),
            impact=Impact.MAJOR,
        )
    )

    rows.append(
        ComparisonDetail(
            category="Vocabulary",
            metric="Vocabulary Complexity",
            user_value=_percent(style.vocabulary_complexity),
            original_value=_percent(original.vocabulary_complexity),
            paraphrased_value=_percent(paraphrased.vocabulary_complexity),
            change_description=generate_change_description(
                original.vocabulary_complexity,
                paraphrased.vocabulary_complexity,
                style.vocabulary_complexity,
                "vocabulary complexity",
            ),
            alignment=get_alignment(
                paraphrased.vocabulary_complexity,
                style.vocabulary_complexity,
                TOLERANCES["vocabulary_complexity"],
            ),
            impact=Impact.MAJOR,
        )
    )

    rows.append(
        ComparisonDetail(
            category="Formality",
            metric="Uses Contractions",
            user_value=yes_no(style.uses_contractions),
            original_value=yes_no(original.uses_contractions),
            paraphrased_value=yes_no(paraphrased.uses_contractions),
            change_description=contraction_change(original, paraphrased),
            alignment=(
                Alignment.EXCELLENT
                if style.uses_contractions == paraphrased.uses_contractions
                else Alignment.POOR
            ),
            impact=Impact.MODERATE,
        )
    )

    if (
        style.question_ratio > 0
        or original.question_ratio > 0
        or paraphrased.question_ratio > 0
    ):
        rows.append(
            ComparisonDetail(
                category="Engagement",
                metric="Question Usage",
                user_value=_percent(style.question_ratio),
                original_value=_percent(original.question_ratio),
                paraphrased_value=_percent(paraphrased.question_ratio),
                change_description=generate_change_description(
                    original.question_ratio,
                    paraphrased.question_ratio,
                    style.question_ratio,
                    "question usage",
                ),
                alignment=get_alignment(
                    paraphrased.question_ratio,
                    style.question_ratio,
                    TOLERANCES["question_ratio"],
                ),
                impact=Impact.MODERATE,
            )
        )

    rows.append(
        ComparisonDetail(
            category="Voice & Clarity",
            metric="Passive Voice Usage",
            user_value="N/A",
            original_value=_percent(original.passive_voice_ratio),
            paraphrased_value=_percent(paraphrased.passive_voice_ratio),
            change_description=generate_change_description(
                original.passive_voice_ratio,
                paraphrased.passive_voice_ratio,
                DEFAULT_PASSIVE_VOICE_TARGET,
                "passive voice",
            ),
            alignment=get_alignment(
                paraphrased.passive_voice_ratio,
                DEFAULT_PASSIVE_VOICE_TARGET,
                TOLERANCES["passive_voice_ratio"],
            ),
            impact=Impact.MODERATE,
        )
    )

    readability_target = target_readability(style)
    rows.append(
        ComparisonDetail(
            category="Readability",
            metric="Reading Ease Score",
            user_value=round_half_up(readability_target),
            original_value=round_half_up(original.readability_score),
            paraphrased_value=round_half_up(
                paraphrased.readability_score
            ),
            change_description=_directional_change(
                original.readability_score,
                paraphrased.readability_score,
                up="Improved readability",
                down="Reduced readability",
                descriptor="readability",
            ),
            alignment=get_alignment(
                paraphrased.readability_score,
                readability_target,
                TOLERANCES["readability_score"],
            ),
            impact=Impact.MAJOR,
        )
    )

    if transitions_relevant(style, original, paraphrased):
        rows.append(
            ComparisonDetail(
                category="Flow & Coherence",
                metric="Transition Words",
                user_value=", ".join(style.preferred_transitions) or "None",
                original_value=original.transition_word_count,
                paraphrased_value=paraphrased.transition_word_count,
                change_description=transition_change(original, paraphrased),
                # No numeric transition target exists to band against
                alignment=Alignment.GOOD,
                impact=Impact.MINOR,
            )
        )

    return rows
