"""Static style tables: tolerances, score weights and word lists.

Loaded once at import time. Downstream tolerance bands were tuned
against these exact values, so bump STYLE_CONFIG_VERSION whenever a
table changes.
"""

from __future__ import annotations

from dataclasses import dataclass

STYLE_CONFIG_VERSION = "2024.1"


@dataclass(frozen=True)
class ScoreFactor:
    """One weighted factor of the alignment score."""

    weight: float
    normalization: float | None = None  # None = binary match


# ── Alignment tolerances (distance bands per metric) ─────

TOLERANCES: dict[str, float] = {
    "avg_sentence_length": 5.0,
    "avg_word_length": 0.5,
    "vocabulary_complexity": 0.1,
    "question_ratio": 0.05,
    "passive_voice_ratio": 0.05,
    "readability_score": 10.0,
}

# SampleStyle carries no passive-voice target
DEFAULT_PASSIVE_VOICE_TARGET = 0.1

# ── Alignment score factors ──────────────────────────────

SCORE_FACTORS: dict[str, ScoreFactor] = {
    "avg_sentence_length": ScoreFactor(weight=0.30, normalization=20.0),
    "vocabulary_complexity": ScoreFactor(weight=0.25, normalization=0.5),
    "uses_contractions": ScoreFactor(weight=0.20),
    "question_ratio": ScoreFactor(weight=0.15, normalization=0.3),
    "readability_score": ScoreFactor(weight=0.10, normalization=30.0),
}

# ── Insight thresholds (minimum delta to report) ─────────

INSIGHT_THRESHOLDS: dict[str, float] = {
    "avg_sentence_length": 2.0,
    "vocabulary_complexity": 0.05,
    "readability_score": 5.0,
}

# Below this absolute delta a change is "no significant change"
SIGNIFICANT_CHANGE = 0.01

# ── Readability / formality constants ────────────────────

FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_WORD_WEIGHT = 84.6
AVG_SYLLABLE_CHARS = 4.7

FORMALITY_BASELINE = 0.5
FORMALITY_CONTRACTION_PENALTY = 0.2
FORMALITY_NO_CONTRACTION_BONUS = 0.1
FORMALITY_COMPLEXITY_WEIGHT = 0.3
FORMALITY_CONNECTIVE_WEIGHT = 0.2

# Pattern matches overlap (e.g. "-ed" and word list), so the raw
# total is scaled down.
ADJECTIVE_SCALE = 0.3

COMPLEX_WORD_MIN_CHARS = 8

# ── Word lists ───────────────────────────────────────────

TRANSITION_WORDS: tuple[str, ...] = (
    "however",
    "moreover",
    "furthermore",
    "additionally",
    "meanwhile",
    "therefore",
    "consequently",
    "nevertheless",
    "nonetheless",
    "thus",
    "hence",
)

FORMAL_CONNECTIVES: tuple[str, ...] = (
    "therefore",
    "however",
    "consequently",
    "furthermore",
    "moreover",
    "nevertheless",
    "nonetheless",
    "thus",
    "hence",
    "accordingly",
    "subsequently",
    "additionally",
    "specifically",
    "particularly",
    "essentially",
    "fundamentally",
    "significantly",
    "substantially",
    "considerably",
    "respectively",
    "alternatively",
    "comparatively",
    "definitively",
)

COORDINATING_CONJUNCTIONS: tuple[str, ...] = (
    "and",
    "but",
    "or",
    "so",
    "yet",
)

CONJUNCTIONS: tuple[str, ...] = (
    *COORDINATING_CONJUNCTIONS,
    "for",
    "nor",
    "because",
    "although",
    "while",
    "since",
    "if",
    "unless",
    "until",
    "before",
    "after",
    "when",
    "where",
    "whereas",
)

FIRST_PERSON_PRONOUNS: tuple[str, ...] = (
    "i", "me", "my", "mine", "myself",
    "we", "us", "our", "ours", "ourselves",
)

SECOND_PERSON_PRONOUNS: tuple[str, ...] = (
    "you", "your", "yours", "yourself", "yourselves",
)

THIRD_PERSON_PRONOUNS: tuple[str, ...] = (
    "he", "him", "his", "himself",
    "she", "her", "hers", "herself",
    "they", "them", "their", "theirs", "themselves",
    "it", "its", "itself",
)

COMMON_ADJECTIVES: tuple[str, ...] = (
    "good", "bad", "big", "small", "new", "old", "high", "low",
    "long", "short", "easy", "hard", "important", "special",
    "certain", "large", "great", "little", "early", "young",
    "different", "right", "social", "local", "sure", "clear",
    "white", "black", "red", "blue", "green", "yellow", "orange",
    "purple", "brown", "pink", "gray", "grey",
)

ADJECTIVE_SUFFIXES: tuple[str, ...] = (
    "ful",
    "less",
    "able",
    "ible",
    "ous",
    "ive",
    "ed",
    "ing",
)

# ── Sample-style tables ──────────────────────────────────

SAMPLE_TRANSITIONS: tuple[str, ...] = (
    "However",
    "Moreover",
    "Additionally",
    "Furthermore",
    "Meanwhile",
    "Instead",
    "Still",
    "Thus",
    "Therefore",
    "Consequently",
    "Nevertheless",
    "Otherwise",
    "Similarly",
    "Likewise",
)

MAX_PREFERRED_TRANSITIONS = 5

CONTRACTED_FORMS: tuple[str, ...] = (
    "don't", "won't", "can't", "isn't", "aren't", "wasn't",
    "weren't", "hasn't", "haven't", "hadn't", "couldn't",
    "wouldn't", "shouldn't", "it's", "that's", "there's",
    "here's", "what's", "who's", "let's", "I'm", "you're",
    "we're", "they're", "he's", "she's",
)

EXPANDED_FORMS: tuple[str, ...] = (
    "do not", "will not", "cannot", "is not", "are not",
    "was not", "were not", "has not", "have not", "had not",
    "could not", "would not", "should not", "it is", "that is",
    "there is", "here is", "what is", "who is", "let us", "I am",
    "you are", "we are", "they are", "he is", "she is",
)

SAMPLE_FIRST_PERSON: tuple[str, ...] = (
    "I", "me", "my", "mine", "we", "us", "our", "ours",
)

SAMPLE_SECOND_PERSON: tuple[str, ...] = ("you", "your", "yours")

# Pronoun share of all tokens needed before a voice is "preferred"
VOICE_MIN_SHARE = 0.02

DEFAULT_SENTENCE_LENGTH = 15.0

# Sentence-length match window for verification (fraction of target)
SENTENCE_LENGTH_MATCH_FRACTION = 0.3
