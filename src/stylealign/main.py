"""FastAPI application with lifespan startup."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stylealign.analysis.style_config import STYLE_CONFIG_VERSION
from stylealign.api.middleware.auth import ApiKeyMiddleware
from stylealign.api.routes import health, style
from stylealign.config import Settings
from stylealign.constants import API_KEY_HEADER, APP_VERSION
from stylealign.logger import ComparisonLogger
from stylealign.logging_config import setup_logging

_settings = Settings()

setup_logging(_settings.effective_log_level)

_logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = _settings

    app.state.settings = settings
    app.state.logger = ComparisonLogger(
        log_dir=settings.log_dir, level=settings.effective_log_level
    )

    _logger.info(
        "event=startup version=%s style_config=%s",
        APP_VERSION,
        STYLE_CONFIG_VERSION,
    )
    if not settings.api_keys:
        _logger.warning(
            "event=no_api_keys action=style_endpoints_public"
        )

    yield


app = FastAPI(
    title="StyleAlign",
    description=(
        "Style analysis engine --"
        " measures how closely a rewrite matches a personal style"
    ),
    version=APP_VERSION,
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

# Middleware stack (Starlette LIFO: last added = outermost = runs first)
#
# CORS must be outermost so OPTIONS preflight is answered before
# ApiKeyMiddleware rejects for missing X-API-Key.
app.add_middleware(ApiKeyMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", API_KEY_HEADER],
    allow_credentials=False,
)

app.include_router(health.router)
app.include_router(style.router)
