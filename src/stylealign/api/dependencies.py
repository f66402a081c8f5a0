"""FastAPI dependency injection for app-scoped services."""

from __future__ import annotations

from fastapi import Request

from stylealign.config import Settings
from stylealign.logger import ComparisonLogger


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_request_logger(request: Request) -> ComparisonLogger:
    return request.app.state.logger
