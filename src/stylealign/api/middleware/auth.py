"""API key check for the style endpoints."""

from __future__ import annotations

import hmac
import logging

from fastapi import Request, Response
from starlette.middleware.base import (
    BaseHTTPMiddleware,
    RequestResponseEndpoint,
)
from starlette.responses import JSONResponse

from stylealign.api.schemas import APIResponse
from stylealign.constants import API_KEY_HEADER, PROTECTED_PATH_PREFIX

logger = logging.getLogger(__name__)


def _key_matches(provided: str, accepted: list[str]) -> bool:
    # Compare against every key so timing does not reveal which matched
    matched = False
    for key in accepted:
        matched |= hmac.compare_digest(provided, key)
    return matched


def _reject(path: str, reason: str, message: str) -> JSONResponse:
    logger.warning("event=auth_rejected path=%s reason=%s", path, reason)
    body = APIResponse(
        success=False, error=message, metadata={"reason": reason}
    )
    return JSONResponse(status_code=401, content=body.model_dump())


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Require a configured key on ``/api/style-*`` requests.

    ``Settings.api_keys`` holds every key currently accepted, so a
    key can be rotated by listing old and new together. With no keys
    configured the style endpoints are public. Health and docs are
    never guarded.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        accepted = request.app.state.settings.api_keys

        if not accepted or not path.startswith(PROTECTED_PATH_PREFIX):
            return await call_next(request)

        provided = request.headers.get(API_KEY_HEADER, "")
        if not provided:
            return _reject(path, "missing", "Missing API key")
        if not _key_matches(provided, accepted):
            return _reject(path, "invalid", "Invalid API key")

        return await call_next(request)
