"""Quick pass/fail checks of a finished rewrite against a style."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from stylealign.analysis.comparison import round_half_up
from stylealign.analysis.sample_style import (
    SampleStyle,
    analyze_sample_style,
)
from stylealign.analysis.style_config import (
    SENTENCE_LENGTH_MATCH_FRACTION,
)

_PREVIEW_TRANSITIONS = 3


@dataclass(frozen=True)
class StyleMatchReport:
    """Outcome of the three style checks."""

    overall_match: int  # percent of checks passed
    contraction_match: bool
    sentence_length_match: bool
    transition_match: bool
    details: tuple[str, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_match": self.overall_match,
            "contraction_match": self.contraction_match,
            "sentence_length_match": self.sentence_length_match,
            "transition_match": self.transition_match,
            "details": list(self.details),
        }


def verify_style_match(
    output: str, style: SampleStyle | None
) -> StyleMatchReport:
    """Check contractions, sentence length, and transition usage.

    Sentence length passes within 30% of the target. The transition
    check passes when the style prefers none, or the output uses at
    least one of them.
    """
    if style is None:
        return StyleMatchReport(
            overall_match=100,
            contraction_match=True,
            sentence_length_match=True,
            transition_match=True,
            details=("No style profile to match against",),
        )

    observed = analyze_sample_style(output)
    details: list[str] = []

    contraction_match = (
        style.uses_contractions == observed.uses_contractions
    )
    if contraction_match:
        label = (
            "uses contractions"
            if style.uses_contractions
            else "formal language"
        )
        details.append(f"✓ Contraction style matches ({label})")
    else:
        verb = "uses" if style.uses_contractions else "avoids"
        details.append(
            f"✗ Contraction mismatch - user {verb} contractions"
        )

    target_length = style.avg_sentence_length
    shown_target = round_half_up(target_length)
    sentence_length_match = (
        abs(observed.avg_sentence_length - target_length)
        <= target_length * SENTENCE_LENGTH_MATCH_FRACTION
    )
    if sentence_length_match:
        details.append(
            f"✓ Sentence length matches (~{shown_target} words)"
        )
    else:
        details.append(
            f"✗ Sentence length differs - user avg: "
            f"{shown_target}, output: "
            f"{round_half_up(observed.avg_sentence_length)}"
        )

    uses_preferred = any(
        re.search(rf"\b{re.escape(t)}\b", output, re.IGNORECASE)
        for t in style.preferred_transitions
    )
    transition_match = not style.preferred_transitions or uses_preferred
    if transition_match:
        details.append("✓ Transition words match user's style")
    else:
        preview = ", ".join(
            style.preferred_transitions[:_PREVIEW_TRANSITIONS]
        )
        details.append(
            f"✗ Missing user's preferred transitions: {preview}"
        )

    checks = (contraction_match, sentence_length_match, transition_match)
    overall = round_half_up(sum(checks) / len(checks) * 100)

    return StyleMatchReport(
        overall_match=overall,
        contraction_match=contraction_match,
        sentence_length_match=sentence_length_match,
        transition_match=transition_match,
        details=tuple(details),
    )
