"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from stylealign.analysis.style_config import STYLE_CONFIG_VERSION
from stylealign.constants import APP_VERSION

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Basic health check for load balancers."""
    return {
        "status": "healthy",
        "version": APP_VERSION,
        "style_config_version": STYLE_CONFIG_VERSION,
        "timestamp": datetime.now(UTC).isoformat(),
    }
