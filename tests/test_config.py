"""Tests for Settings validators."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from stylealign.config import Settings


class TestCorsOrigins:
    def test_comma_separated_string_parsed_to_list(self) -> None:
        s = Settings(cors_origins="http://a.test,http://b.test")  # type: ignore[arg-type]
        assert s.cors_origins == ["http://a.test", "http://b.test"]

    def test_spaces_and_empty_entries_dropped(self) -> None:
        s = Settings(cors_origins=" http://a.test , ,")  # type: ignore[arg-type]
        assert s.cors_origins == ["http://a.test"]

    def test_list_passthrough(self) -> None:
        s = Settings(cors_origins=["http://a.test"])
        assert s.cors_origins == ["http://a.test"]

    def test_env_var_parsed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ORIGINS", "http://x.test,http://y.test")
        assert Settings().cors_origins == [
            "http://x.test",
            "http://y.test",
        ]


class TestApiKeys:
    def test_default_is_empty(self) -> None:
        assert Settings(_env_file=None).api_keys == []  # type: ignore[call-arg]

    def test_env_var_parsed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_KEYS", "old-key, new-key")
        assert Settings().api_keys == ["old-key", "new-key"]


class TestMaxTextChars:
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_raises(self, value: int) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            Settings(max_text_chars=value)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_TEXT_CHARS", "123")
        assert Settings().max_text_chars == 123


class TestLogLevel:
    def test_lowercase_normalized(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_level_falls_back(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="stylealign.config"):
            s = Settings(log_level="chatty")
        assert s.log_level == "INFO"
        assert "Unknown LOG_LEVEL" in caplog.text


class TestEffectiveLogLevel:
    def test_follows_log_level(self) -> None:
        s = Settings(log_level="warning", debug_mode=False)
        assert s.effective_log_level == "WARNING"

    def test_debug_mode_forces_debug(self) -> None:
        s = Settings(log_level="ERROR", debug_mode=True)
        assert s.effective_log_level == "DEBUG"


def test_defaults() -> None:
    s = Settings(_env_file=None)  # type: ignore[call-arg]
    assert s.log_dir == Path("logs")
    assert s.max_text_chars == 50_000
    assert s.debug_mode is False
