"""Tests for the grouped comparison view."""

from __future__ import annotations

import pytest

from stylealign.analysis.sample_style import SampleStyle
from stylealign.analysis.scoring import calculate_alignment_score
from stylealign.analysis.structured import (
    build_structured_comparison,
    percent_difference,
    summarize,
)
from stylealign.analysis.text_metrics import analyze_text


@pytest.mark.parametrize(
    ("value", "target", "expected"),
    [
        (12, 10, 20.0),
        (8, 10, 20.0),
        (10, 10, 0.0),
        (1, 3, 66.7),
    ],
)
def test_percent_difference(
    value: float, target: float, expected: float
) -> None:
    assert percent_difference(value, target) == expected


def test_percent_difference_without_target_is_none() -> None:
    assert percent_difference(5, 0) is None


@pytest.mark.parametrize(
    ("score", "opening"),
    [
        (0.95, "The rewrite closely mirrors"),
        (0.85, "The rewrite closely mirrors"),
        (0.7, "The rewrite matches your style well"),
        (0.6, "The rewrite partially reflects"),
        (0.1, "The rewrite diverges"),
    ],
)
def test_summary_bands(score: float, opening: str) -> None:
    assert summarize(score).startswith(opening)


def test_groups_without_transitions() -> None:
    result = build_structured_comparison(
        SampleStyle(),
        analyze_text("The cat sat on the mat."),
        analyze_text("A dog ran in the park."),
    )
    assert [g.group_name for g in result.metric_groups] == [
        "Sentence Structure",
        "Vocabulary",
        "Tone & Formality",
        "Readability",
    ]
    sentence = result.metric_groups[0]
    assert [m.name for m in sentence.metrics] == [
        "Average Sentence Length",
        "Question Usage",
    ]
    # question target is zero, so no percentage
    assert sentence.metrics[1].percent_difference is None


def test_flow_group_when_transitions_present() -> None:
    result = build_structured_comparison(
        SampleStyle(preferred_transitions=("However", "Thus")),
        analyze_text("It works."),
        analyze_text("However, it works."),
    )
    flow = result.metric_groups[-1]
    assert flow.group_name == "Flow & Coherence"
    metric = flow.metrics[0]
    assert metric.target == "However, Thus"
    assert metric.paraphrased == 1
    assert metric.explanation == (
        "Added more transition words for better flow"
    )


def test_contraction_metric_percent() -> None:
    original = analyze_text("I do not know.")
    paraphrased = analyze_text("I don't know.")
    matched = build_structured_comparison(
        SampleStyle(uses_contractions=True), original, paraphrased
    )
    tone = matched.metric_groups[2].metrics[0]
    assert tone.percent_difference == 0.0
    assert tone.target == "Yes"

    missed = build_structured_comparison(
        SampleStyle(uses_contractions=False), original, paraphrased
    )
    assert missed.metric_groups[2].metrics[0].percent_difference == 100.0


def test_overall_similarity_matches_alignment_score() -> None:
    style = SampleStyle(avg_sentence_length=8, vocabulary_complexity=0.1)
    paraphrased = analyze_text("We finished the work early today.")
    result = build_structured_comparison(
        style, analyze_text("The work was finished."), paraphrased
    )
    assert result.overall_similarity == pytest.approx(
        calculate_alignment_score(style, paraphrased)
    )
    assert result.summary == summarize(result.overall_similarity)


def test_numeric_values_are_rounded() -> None:
    result = build_structured_comparison(
        SampleStyle(avg_sentence_length=10 / 3),
        analyze_text("One two. Three four five."),
        analyze_text("One two three. Four five six seven."),
    )
    metric = result.metric_groups[0].metrics[0]
    assert metric.target == 3.33
    assert metric.paraphrased == 3.5


def test_dump_is_json_ready() -> None:
    data = build_structured_comparison(
        SampleStyle(),
        analyze_text("Hello there."),
        analyze_text("Hi there."),
    ).model_dump(mode="json")
    assert set(data) == {
        "overall_similarity",
        "summary",
        "metric_groups",
    }
    alignment = data["metric_groups"][0]["metrics"][0]["alignment"]
    assert alignment in {"excellent", "good", "fair", "poor"}
