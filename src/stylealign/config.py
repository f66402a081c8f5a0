"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Directories
    log_dir: Path = Path("logs")

    # Logging (debug_mode forces DEBUG regardless of log_level)
    log_level: str = "INFO"
    debug_mode: bool = False

    # API
    api_keys: Annotated[list[str], NoDecode] = []
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:3000",
    ]

    # Analysis
    max_text_chars: int = 50_000

    @field_validator("cors_origins", "api_keys", mode="before")
    @classmethod
    def _split_commas(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("max_text_chars")
    @classmethod
    def _validate_max_chars(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_text_chars must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            logger.warning(
                "Unknown LOG_LEVEL %r, falling back to INFO", v
            )
            return "INFO"
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug_mode else self.log_level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
