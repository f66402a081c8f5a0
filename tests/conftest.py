"""Shared test fixtures: app state and an httpx client."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from stylealign.config import Settings
from stylealign.logger import ComparisonLogger
from stylealign.main import app


def setup_test_app(tmp_path: Path, **overrides: Any) -> Settings:
    """Common app-state setup for API test fixtures.

    ASGITransport does not run the lifespan, so settings and the
    request logger are placed on ``app.state`` directly. Keyword
    arguments override individual Settings fields.
    """
    settings = Settings(log_dir=tmp_path / "logs", **overrides)
    app.state.settings = settings
    app.state.logger = ComparisonLogger(
        log_dir=settings.log_dir, level="WARNING"
    )
    return settings


@pytest.fixture
async def client(tmp_path: Path) -> AsyncIterator[AsyncClient]:
    """Test client with default settings (no API key)."""
    setup_test_app(tmp_path, api_keys=[])

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as c:
        yield c
