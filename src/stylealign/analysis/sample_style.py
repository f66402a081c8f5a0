"""Target style profile derived from a user's writing sample."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any

from stylealign.analysis.style_config import (
    CONTRACTED_FORMS,
    DEFAULT_SENTENCE_LENGTH,
    EXPANDED_FORMS,
    MAX_PREFERRED_TRANSITIONS,
    SAMPLE_FIRST_PERSON,
    SAMPLE_SECOND_PERSON,
    SAMPLE_TRANSITIONS,
    VOICE_MIN_SHARE,
)
from stylealign.analysis.text_metrics import analyze_text, split_sentences
from stylealign.constants import PersonalVoice

_IFLAGS = re.ASCII | re.IGNORECASE


def _alternation(words: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(
        r"\b(" + "|".join(re.escape(w) for w in words) + r")\b",
        _IFLAGS,
    )


_CONTRACTED_RE = _alternation(CONTRACTED_FORMS)
_EXPANDED_RE = _alternation(EXPANDED_FORMS)
_FIRST_PERSON_RE = _alternation(SAMPLE_FIRST_PERSON)
_SECOND_PERSON_RE = _alternation(SAMPLE_SECOND_PERSON)
_TRANSITION_RES: dict[str, re.Pattern[str]] = {
    t: re.compile(rf"\b{t}\b", _IFLAGS) for t in SAMPLE_TRANSITIONS
}


@dataclass(frozen=True)
class SampleStyle:
    """Writing characteristics the rewrite should move toward.

    Read-only input to the comparison layer.
    """

    avg_sentence_length: float = DEFAULT_SENTENCE_LENGTH
    uses_contractions: bool = True
    preferred_transitions: tuple[str, ...] = ()
    transition_start_ratio: float = 0.0
    personal_voice: PersonalVoice = PersonalVoice.THIRD_PERSON
    avg_word_length: float = 0.0
    vocabulary_complexity: float = 0.0
    question_ratio: float = 0.0
    exclamatory_ratio: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["preferred_transitions"] = list(self.preferred_transitions)
        data["personal_voice"] = str(self.personal_voice)
        return data


def default_style() -> SampleStyle:
    """Style used when no sample text is available."""
    return SampleStyle()


def _preferred_transitions(sample: str) -> tuple[str, ...]:
    counts = {
        word: len(pattern.findall(sample))
        for word, pattern in _TRANSITION_RES.items()
    }
    ranked = sorted(
        (w for w, c in counts.items() if c > 0),
        key=lambda w: counts[w],
        reverse=True,
    )
    return tuple(ranked[:MAX_PREFERRED_TRANSITIONS])


def _transition_start_ratio(sentences: list[str]) -> float:
    if not sentences:
        return 0.0
    lowered = tuple(t.lower() for t in SAMPLE_TRANSITIONS)
    starting = sum(
        1 for s in sentences if s.strip().lower().startswith(lowered)
    )
    return starting / len(sentences)


def _personal_voice(sample: str, token_count: int) -> PersonalVoice:
    first = len(_FIRST_PERSON_RE.findall(sample))
    second = len(_SECOND_PERSON_RE.findall(sample))
    min_count = token_count * VOICE_MIN_SHARE
    if first > second and first > min_count:
        return PersonalVoice.FIRST_PERSON
    if second > first and second > min_count:
        return PersonalVoice.SECOND_PERSON
    return PersonalVoice.THIRD_PERSON


def analyze_sample_style(sample: str) -> SampleStyle:
    """Derive a SampleStyle from free-form writing.

    Word-level targets (word length, vocabulary complexity, question
    ratio) reuse analyze_text so they are measured the same way as
    the texts they are compared against.
    """
    if not sample.strip():
        return default_style()

    sentences = split_sentences(sample)
    tokens = sample.split()

    if sentences:
        avg_sentence_length = sum(
            len(s.split()) for s in sentences
        ) / len(sentences)
    else:
        avg_sentence_length = DEFAULT_SENTENCE_LENGTH

    contracted = len(_CONTRACTED_RE.findall(sample))
    expanded = len(_EXPANDED_RE.findall(sample))

    metrics = analyze_text(sample)

    return SampleStyle(
        avg_sentence_length=avg_sentence_length,
        uses_contractions=contracted > expanded,
        preferred_transitions=_preferred_transitions(sample),
        transition_start_ratio=_transition_start_ratio(sentences),
        personal_voice=_personal_voice(sample, len(tokens)),
        avg_word_length=metrics.avg_word_length,
        vocabulary_complexity=metrics.vocabulary_complexity,
        question_ratio=metrics.question_ratio,
        exclamatory_ratio=metrics.exclamatory_ratio,
    )
