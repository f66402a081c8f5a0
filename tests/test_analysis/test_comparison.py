"""Tests for the per-metric comparator."""

from __future__ import annotations

import pytest

from stylealign.analysis.comparison import (
    generate_change_description,
    generate_detailed_comparison,
    get_alignment,
    round_half_up,
)
from stylealign.analysis.sample_style import SampleStyle
from stylealign.analysis.text_metrics import analyze_text
from stylealign.constants import Alignment, Impact

_TIER_ORDER = [
    Alignment.EXCELLENT,
    Alignment.GOOD,
    Alignment.FAIR,
    Alignment.POOR,
]


# ── get_alignment ────────────────────────────────────────


@pytest.mark.parametrize("tolerance", [0.05, 0.1, 5, 10])
def test_zero_distance_is_excellent(tolerance: float) -> None:
    assert get_alignment(3.7, 3.7, tolerance) == Alignment.EXCELLENT


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5, Alignment.EXCELLENT),
        (10, Alignment.GOOD),
        (20, Alignment.FAIR),
        (21, Alignment.POOR),
        (-21, Alignment.POOR),
    ],
)
def test_alignment_bands(value: float, expected: Alignment) -> None:
    assert get_alignment(value, 0, 5) == expected


def test_alignment_is_monotonic_in_distance() -> None:
    previous = 0
    for step in range(0, 300):
        tier = get_alignment(10 + step * 0.1, 10, 2)
        index = _TIER_ORDER.index(tier)
        assert index >= previous
        previous = index


# ── generate_change_description ──────────────────────────


def test_tiny_change_is_not_significant() -> None:
    assert (
        generate_change_description(10, 10.005, 5, "sentence length")
        == "No significant change in sentence length"
    )


def test_change_toward_target_is_flagged() -> None:
    assert generate_change_description(
        10, 20, 18, "sentence length"
    ) == (
        "sentence length increased by 10.00 "
        "(better alignment with user style)"
    )


def test_change_away_from_target_has_no_suffix() -> None:
    assert (
        generate_change_description(10, 5, 20, "question usage")
        == "question usage decreased by 5.00"
    )


def test_equal_distance_is_not_better_alignment() -> None:
    # 4 -> 6 around a target of 5: same distance either side
    assert "better alignment" not in generate_change_description(
        4, 6, 5, "x"
    )


# ── generate_detailed_comparison ─────────────────────────


def test_rows_in_order_without_optional_rows() -> None:
    style = SampleStyle(avg_sentence_length=6, avg_word_length=4)
    rows = generate_detailed_comparison(
        style,
        analyze_text("The cat sat on the mat."),
        analyze_text("A dog ran in the park."),
    )
    assert [r.metric for r in rows] == [
        "Average Sentence Length",
        "Vocabulary Complexity",
        "Uses Contractions",
        "Passive Voice Usage",
        "Reading Ease Score",
    ]


def test_optional_rows_appear_when_relevant() -> None:
    style = SampleStyle(
        question_ratio=0.2, preferred_transitions=("However",)
    )
    rows = generate_detailed_comparison(
        style,
        analyze_text("Is this fine? It is."),
        analyze_text("However, it is fine."),
    )
    assert [r.category for r in rows] == [
        "Sentence Structure",
        "Vocabulary",
        "Formality",
        "Engagement",
        "Voice & Clarity",
        "Readability",
        "Flow & Coherence",
    ]
    flow = rows[-1]
    assert flow.user_value == "However"
    assert flow.original_value == 0
    assert flow.paraphrased_value == 1
    assert flow.alignment == Alignment.GOOD
    assert flow.impact == Impact.MINOR


def test_row_display_values() -> None:
    style = SampleStyle(
        avg_sentence_length=4.6,
        vocabulary_complexity=0.25,
        uses_contractions=False,
    )
    rows = {
        r.metric: r
        for r in generate_detailed_comparison(
            style,
            analyze_text("We can't stop now."),
            analyze_text("We cannot stop now."),
        )
    }
    length = rows["Average Sentence Length"]
    assert length.user_value == "5 words"
    assert length.impact == Impact.MAJOR

    assert rows["Vocabulary Complexity"].user_value == "25.0%"

    contractions = rows["Uses Contractions"]
    assert contractions.original_value == "Yes"
    assert contractions.paraphrased_value == "No"
    assert contractions.alignment == Alignment.EXCELLENT
    assert (
        contractions.change_description
        == "Removed contractions for formal tone"
    )

    assert rows["Passive Voice Usage"].user_value == "N/A"
    assert isinstance(rows["Reading Ease Score"].user_value, int)


def test_contraction_mismatch_is_poor() -> None:
    rows = generate_detailed_comparison(
        SampleStyle(uses_contractions=True),
        analyze_text("It is late."),
        analyze_text("It is very late."),
    )
    row = next(r for r in rows if r.metric == "Uses Contractions")
    assert row.alignment == Alignment.POOR


def test_to_dict_serializes_enums_as_strings() -> None:
    row = generate_detailed_comparison(
        SampleStyle(), analyze_text("Hi."), analyze_text("Hello.")
    )[0]
    data = row.to_dict()
    assert data["alignment"] in {"excellent", "good", "fair", "poor"}
    assert data["impact"] == "major"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(12.5, 13), (2.5, 3), (0.5, 1), (2.4, 2), (99.5, 100)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


def test_half_word_sentence_length_rounds_up() -> None:
    text = ("word " * 12).strip() + ". " + ("word " * 13).strip() + "."
    analysis = analyze_text(text)
    assert analysis.avg_sentence_length == 12.5
    row = generate_detailed_comparison(
        SampleStyle(avg_sentence_length=2.5), analysis, analysis
    )[0]
    assert row.user_value == "3 words"
    assert row.original_value == "13 words"
    assert row.paraphrased_value == "13 words"
