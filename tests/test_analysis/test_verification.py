"""Tests for the pass/fail style verification."""

from __future__ import annotations

from stylealign.analysis.sample_style import SampleStyle
from stylealign.analysis.verification import verify_style_match

CASUAL = SampleStyle(
    avg_sentence_length=5,
    uses_contractions=True,
    preferred_transitions=("However",),
)


def test_no_style_passes_everything() -> None:
    report = verify_style_match("Anything at all.", None)
    assert report.overall_match == 100
    assert report.contraction_match
    assert report.sentence_length_match
    assert report.transition_match
    assert report.details == ("No style profile to match against",)


def test_all_checks_pass() -> None:
    report = verify_style_match(
        "However, it's fine to go. We can't stop now ok.", CASUAL
    )
    assert report.overall_match == 100
    assert report.details[0] == (
        "✓ Contraction style matches (uses contractions)"
    )
    assert report.details[1] == "✓ Sentence length matches (~5 words)"
    assert report.details[2] == "✓ Transition words match user's style"


def test_two_of_three_rounds_to_67() -> None:
    report = verify_style_match("However, it's fine. We go now.", CASUAL)
    assert report.contraction_match is True
    assert report.sentence_length_match is False
    assert report.transition_match is True
    assert report.overall_match == 67
    assert report.details[1] == (
        "✗ Sentence length differs - user avg: 5, output: 3"
    )


def test_formal_style_mismatch() -> None:
    formal = SampleStyle(avg_sentence_length=3, uses_contractions=False)
    report = verify_style_match("It's really fine.", formal)
    assert report.contraction_match is False
    assert report.details[0] == (
        "✗ Contraction mismatch - user avoids contractions"
    )


def test_formal_style_match() -> None:
    formal = SampleStyle(avg_sentence_length=3, uses_contractions=False)
    report = verify_style_match("It is fine.", formal)
    assert report.details[0] == (
        "✓ Contraction style matches (formal language)"
    )
    assert report.overall_match == 100


def test_missing_transitions_lists_first_three() -> None:
    style = SampleStyle(
        avg_sentence_length=3,
        uses_contractions=False,
        preferred_transitions=("Moreover", "Thus", "Still", "Instead"),
    )
    report = verify_style_match("It is fine.", style)
    assert report.transition_match is False
    assert report.details[2] == (
        "✗ Missing user's preferred transitions: Moreover, Thus, Still"
    )
    assert report.overall_match == 67


def test_transition_check_ignores_case() -> None:
    report = verify_style_match("it's ok. however, we go.", CASUAL)
    assert report.transition_match is True


def test_to_dict() -> None:
    data = verify_style_match("Hi.", None).to_dict()
    assert data["details"] == ["No style profile to match against"]
    assert data["overall_match"] == 100


def test_half_word_target_rounds_up() -> None:
    report = verify_style_match("x", SampleStyle(avg_sentence_length=2.5))
    assert report.details[1] == (
        "✗ Sentence length differs - user avg: 3, output: 1"
    )
