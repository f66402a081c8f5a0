"""Shared constants: single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so downstream code (JSON
payloads, CLI output) works unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class Alignment(StrEnum):
    """Qualitative tier for distance between observed and target."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class Impact(StrEnum):
    """Informational weight of a comparison row.

    Not used by the alignment score.
    """

    MAJOR = "major"
    MODERATE = "moderate"
    MINOR = "minor"


class PersonalVoice(StrEnum):
    """Dominant grammatical person of a writing sample."""

    FIRST_PERSON = "first-person"
    SECOND_PERSON = "second-person"
    THIRD_PERSON = "third-person"


# ── Versioning ───────────────────────────────────────────

APP_VERSION = "0.1.0"

# ── Misc ─────────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 200

# ── Auth ─────────────────────────────────────────────────

API_KEY_HEADER = "X-API-Key"

# Only the style endpoints are guarded; health and docs stay open
PROTECTED_PATH_PREFIX = "/api/style-"

# ── ID Generation ───────────────────────────────────────

ID_HEX_LENGTH = 12
