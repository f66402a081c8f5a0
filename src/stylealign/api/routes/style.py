"""Style comparison, analysis, and verification routes.

The analysis functions are fast and synchronous, so they run inline
in the handler rather than in a background task.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import APIRouter, Depends, Response

from stylealign.analysis.sample_style import analyze_sample_style
from stylealign.analysis.structured import build_structured_comparison
from stylealign.analysis.text_metrics import analyze_text
from stylealign.analysis.transformation import (
    compare_style_transformation,
)
from stylealign.analysis.verification import verify_style_match
from stylealign.api.dependencies import get_request_logger, get_settings
from stylealign.api.schemas import (
    APIResponse,
    StyleComparisonRequest,
    StyleVerificationRequest,
    TextAnalysisRequest,
)
from stylealign.config import Settings
from stylealign.constants import ERROR_TRUNCATION_CHARS, ID_HEX_LENGTH
from stylealign.logger import ComparisonLogger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["style"])


def _new_request_id() -> str:
    return uuid.uuid4().hex[:ID_HEX_LENGTH]


def _too_long(
    lengths: dict[str, int], settings: Settings, response: Response
) -> APIResponse | None:
    over = [
        name
        for name, size in lengths.items()
        if size > settings.max_text_chars
    ]
    if not over:
        return None
    response.status_code = 413
    return APIResponse(
        success=False,
        error=(
            f"Text exceeds {settings.max_text_chars} characters: "
            f"{', '.join(over)}"
        ),
    )


def _failure(
    request_id: str,
    component: str,
    exc: Exception,
    request_logger: ComparisonLogger,
    response: Response,
) -> APIResponse:
    logger.exception(
        "event=%s_failed request_id=%s", component, request_id
    )
    request_logger.log_error(request_id, component, str(exc))
    response.status_code = 500
    return APIResponse(
        success=False,
        error=(
            str(exc)[:ERROR_TRUNCATION_CHARS]
            or "Failed to analyze style transformation"
        ),
        metadata={"request_id": request_id},
    )


@router.post("/style-comparison")
async def style_comparison(
    body: StyleComparisonRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    request_logger: ComparisonLogger = Depends(get_request_logger),
) -> APIResponse:
    """Compare a rewrite against the style of a user's sample.

    ``structured=true`` returns the grouped-metrics view instead of
    the row-by-row transformation.
    """
    lengths = body.text_lengths()
    rejected = _too_long(lengths, settings, response)
    if rejected is not None:
        return rejected

    request_id = _new_request_id()
    start = time.monotonic()
    try:
        transformation = compare_style_transformation(
            body.user_sample_text,
            body.original_text,
            body.paraphrased_text,
        )
        if body.structured:
            structured = build_structured_comparison(
                transformation.user_style,
                transformation.original_analysis,
                transformation.paraphrased_analysis,
            )
            data = {"structured": structured.model_dump(mode="json")}
        else:
            data = {"transformation": transformation.to_dict()}
    except Exception as exc:
        return _failure(
            request_id, "style_comparison", exc, request_logger, response
        )

    duration_ms = (time.monotonic() - start) * 1000
    logger.info(
        "event=style_comparison request_id=%s alignment=%.3f"
        " structured=%s duration_ms=%.1f",
        request_id,
        transformation.alignment_score,
        body.structured,
        duration_ms,
    )
    request_logger.log_request(
        request_id,
        "style-comparison",
        lengths,
        duration_ms,
        alignment_score=transformation.alignment_score,
    )
    return APIResponse(
        success=True,
        data=data,
        metadata={"request_id": request_id},
    )


@router.post("/style-analysis")
async def style_analysis(
    body: TextAnalysisRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    request_logger: ComparisonLogger = Depends(get_request_logger),
) -> APIResponse:
    """Metrics for a single text plus the style profile it implies."""
    lengths = {"text": len(body.text)}
    rejected = _too_long(lengths, settings, response)
    if rejected is not None:
        return rejected

    request_id = _new_request_id()
    start = time.monotonic()
    try:
        data = {
            "analysis": analyze_text(body.text).to_dict(),
            "style": analyze_sample_style(body.text).to_dict(),
        }
    except Exception as exc:
        return _failure(
            request_id, "style_analysis", exc, request_logger, response
        )

    request_logger.log_request(
        request_id,
        "style-analysis",
        lengths,
        (time.monotonic() - start) * 1000,
    )
    return APIResponse(
        success=True,
        data=data,
        metadata={"request_id": request_id},
    )


@router.post("/style-verification")
async def style_verification(
    body: StyleVerificationRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    request_logger: ComparisonLogger = Depends(get_request_logger),
) -> APIResponse:
    """Pass/fail style checks of an output against a sample."""
    lengths = {"output_text": len(body.output_text)}
    if body.user_sample_text:
        lengths["user_sample_text"] = len(body.user_sample_text)
    rejected = _too_long(lengths, settings, response)
    if rejected is not None:
        return rejected

    request_id = _new_request_id()
    start = time.monotonic()
    try:
        style = (
            analyze_sample_style(body.user_sample_text)
            if body.user_sample_text and body.user_sample_text.strip()
            else None
        )
        report = verify_style_match(body.output_text, style)
    except Exception as exc:
        return _failure(
            request_id,
            "style_verification",
            exc,
            request_logger,
            response,
        )

    request_logger.log_request(
        request_id,
        "style-verification",
        lengths,
        (time.monotonic() - start) * 1000,
    )
    return APIResponse(
        success=True,
        data=report.to_dict(),
        metadata={"request_id": request_id},
    )
