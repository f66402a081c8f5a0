"""Turn raw text into a fixed-shape bag of style metrics.

Every metric is a shallow regex/lexical heuristic. The formulas are
kept exactly as the comparison tolerances expect them; a ratio whose
denominator is zero resolves to 0 instead of raising.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any

from stylealign.analysis.style_config import (
    ADJECTIVE_SCALE,
    ADJECTIVE_SUFFIXES,
    AVG_SYLLABLE_CHARS,
    COMMON_ADJECTIVES,
    COMPLEX_WORD_MIN_CHARS,
    CONJUNCTIONS,
    COORDINATING_CONJUNCTIONS,
    FIRST_PERSON_PRONOUNS,
    FLESCH_BASE,
    FLESCH_SENTENCE_WEIGHT,
    FLESCH_WORD_WEIGHT,
    FORMAL_CONNECTIVES,
    FORMALITY_BASELINE,
    FORMALITY_COMPLEXITY_WEIGHT,
    FORMALITY_CONNECTIVE_WEIGHT,
    FORMALITY_CONTRACTION_PENALTY,
    FORMALITY_NO_CONTRACTION_BONUS,
    SECOND_PERSON_PRONOUNS,
    THIRD_PERSON_PRONOUNS,
    TRANSITION_WORDS,
)

_FLAGS = re.ASCII
_IFLAGS = re.ASCII | re.IGNORECASE


def _word_set(words: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(r"\b(" + "|".join(words) + r")\b", _IFLAGS)


SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_ALPHA_WORD_RE = re.compile(r"\b[a-z]+\b", _FLAGS)
_TOKEN_RE = re.compile(r"\b\w+\b", _FLAGS)
_CONTRACTION_RE = re.compile(r"\b\w+'\w+\b", _FLAGS)
_PASSIVE_RE = re.compile(
    r"\b(was|were|is|are|been|being)\s+\w+ed\b", _IFLAGS
)
_ADVERB_RE = re.compile(r"\b\w+ly\b", _FLAGS)
_DASH_RE = re.compile(r"—|--")
_WHITESPACE_RE = re.compile(r"\s+")
_COORDINATING_RE = _word_set(COORDINATING_CONJUNCTIONS)
_CONJUNCTION_RE = _word_set(CONJUNCTIONS)
_TRANSITION_RE = _word_set(TRANSITION_WORDS)
_FORMAL_RE = _word_set(FORMAL_CONNECTIVES)
_FIRST_PERSON_RE = _word_set(FIRST_PERSON_PRONOUNS)
_SECOND_PERSON_RE = _word_set(SECOND_PERSON_PRONOUNS)
_THIRD_PERSON_RE = _word_set(THIRD_PERSON_PRONOUNS)
_ADJECTIVE_PATTERNS: tuple[re.Pattern[str], ...] = (
    _word_set(COMMON_ADJECTIVES),
    *(
        re.compile(rf"\b\w+{suffix}\b", _IFLAGS)
        for suffix in ADJECTIVE_SUFFIXES
    ),
)


@dataclass(frozen=True)
class TextAnalysis:
    """Style metrics for a single text. Equal texts give equal values."""

    # Basic metrics
    word_count: int = 0
    sentence_count: int = 0
    avg_sentence_length: float = 0.0
    avg_word_length: float = 0.0

    # Vocabulary
    vocabulary_complexity: float = 0.0
    unique_words: int = 0
    lexical_diversity: float = 0.0

    # Structure
    question_ratio: float = 0.0
    exclamatory_ratio: float = 0.0
    compound_sentence_ratio: float = 0.0

    # Style markers
    uses_contractions: bool = False
    passive_voice_ratio: float = 0.0
    adverb_density: float = 0.0
    adjective_density: float = 0.0

    # Punctuation (commas per sentence, the rest raw counts)
    comma_usage: float = 0.0
    semicolon_usage: int = 0
    colon_usage: int = 0
    dash_usage: int = 0

    # Readability
    readability_score: float = 0.0
    formality_score: float = FORMALITY_BASELINE

    # Flow
    transition_word_count: int = 0
    conjunction_density: float = 0.0

    # Personal voice (share of all tokens)
    first_person_usage: float = 0.0
    second_person_usage: float = 0.0
    third_person_usage: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _sentences_with_terminators(text: str) -> list[tuple[str, str]]:
    pieces = SENTENCE_SPLIT_RE.split(text)
    terminators = [*SENTENCE_SPLIT_RE.findall(text), ""]
    return [
        (piece, end)
        for piece, end in zip(pieces, terminators, strict=True)
        if piece.strip()
    ]


def split_sentences(text: str) -> list[str]:
    """Split on runs of ``.``, ``!`` and ``?``; drop blank pieces."""
    return [s for s, _ in _sentences_with_terminators(text)]


def _ratio(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0.0
    return numerator / denominator


def calculate_readability(
    avg_sentence_length: float, avg_word_length: float
) -> float:
    """Simplified Flesch Reading Ease, clamped to [0, 100].

    Word length stands in for syllables (4.7 chars ~ 1.5 syllables).
    """
    score = (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * avg_sentence_length
        - FLESCH_WORD_WEIGHT * (avg_word_length / AVG_SYLLABLE_CHARS)
    )
    return max(0.0, min(100.0, score))


def calculate_formality(
    text: str,
    uses_contractions: bool,
    vocabulary_complexity: float,
) -> float:
    """Formality in [0, 1], starting from a neutral 0.5."""
    score = FORMALITY_BASELINE
    if uses_contractions:
        score -= FORMALITY_CONTRACTION_PENALTY
    else:
        score += FORMALITY_NO_CONTRACTION_BONUS

    score += vocabulary_complexity * FORMALITY_COMPLEXITY_WEIGHT

    formal_words = len(_FORMAL_RE.findall(text))
    # Edge whitespace yields empty pieces that still count
    pieces = len(_WHITESPACE_RE.split(text))
    score += (
        _ratio(formal_words, pieces)
        * FORMALITY_CONNECTIVE_WEIGHT
    )
    return max(0.0, min(1.0, score))


def count_adjectives(text: str) -> float:
    """Heuristic adjective count, scaled for overlapping patterns."""
    raw = sum(
        len(pattern.findall(text)) for pattern in _ADJECTIVE_PATTERNS
    )
    return raw * ADJECTIVE_SCALE


def _is_compound(sentence: str) -> bool:
    return (
        _COORDINATING_RE.search(sentence) is not None
        and len(_COORDINATING_RE.split(sentence)) > 2
    )


def analyze_text(text: str) -> TextAnalysis:
    """Compute the full metrics bag for ``text``.

    Empty or whitespace-only input yields all zeros and the neutral
    0.5 formality score.
    """
    if not text.strip():
        return TextAnalysis()

    terminated = _sentences_with_terminators(text)
    sentences = [s for s, _ in terminated]
    words = _ALPHA_WORD_RE.findall(text.lower())
    word_count = len(_TOKEN_RE.findall(text))
    sentence_count = len(sentences)

    avg_sentence_length = _ratio(word_count, sentence_count)
    avg_word_length = _ratio(
        sum(len(w) for w in words), len(words)
    )

    unique_words = len(set(words))
    complex_words = sum(
        1 for w in words if len(w) >= COMPLEX_WORD_MIN_CHARS
    )
    vocabulary_complexity = _ratio(complex_words, word_count)

    # A sentence counts by the terminator run that closes it
    question_sentences = sum(
        1 for s, end in terminated if "?" in s or "?" in end
    )
    exclamatory_sentences = sum(
        1 for s, end in terminated if "!" in s or "!" in end
    )
    compound_sentences = sum(1 for s in sentences if _is_compound(s))

    uses_contractions = _CONTRACTION_RE.search(text) is not None

    return TextAnalysis(
        word_count=word_count,
        sentence_count=sentence_count,
        avg_sentence_length=avg_sentence_length,
        avg_word_length=avg_word_length,
        vocabulary_complexity=vocabulary_complexity,
        unique_words=unique_words,
        lexical_diversity=_ratio(unique_words, word_count),
        question_ratio=_ratio(question_sentences, sentence_count),
        exclamatory_ratio=_ratio(exclamatory_sentences, sentence_count),
        compound_sentence_ratio=_ratio(
            compound_sentences, sentence_count
        ),
        uses_contractions=uses_contractions,
        passive_voice_ratio=_ratio(
            len(_PASSIVE_RE.findall(text)), sentence_count
        ),
        adverb_density=_ratio(
            len(_ADVERB_RE.findall(text)), word_count
        ),
        adjective_density=_ratio(count_adjectives(text), word_count),
        comma_usage=_ratio(text.count(","), sentence_count),
        semicolon_usage=text.count(";"),
        colon_usage=text.count(":"),
        dash_usage=len(_DASH_RE.findall(text)),
        readability_score=calculate_readability(
            avg_sentence_length, avg_word_length
        ),
        formality_score=calculate_formality(
            text, uses_contractions, vocabulary_complexity
        ),
        transition_word_count=len(_TRANSITION_RE.findall(text)),
        conjunction_density=_ratio(
            len(_CONJUNCTION_RE.findall(text)), sentence_count
        ),
        first_person_usage=_ratio(
            len(_FIRST_PERSON_RE.findall(text)), word_count
        ),
        second_person_usage=_ratio(
            len(_SECOND_PERSON_RE.findall(text)), word_count
        ),
        third_person_usage=_ratio(
            len(_THIRD_PERSON_RE.findall(text)), word_count
        ),
    )
