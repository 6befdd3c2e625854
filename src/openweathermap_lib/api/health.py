"""Liveness and readiness endpoints for the bridge host."""

from fastapi import APIRouter
from loguru import logger
from pydantic import BaseModel

from ..core.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model.

    Example:
        >>> HealthResponse(status="ok").status
        'ok'
    """

    status: str


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Check that the bridge host process is running",
)
async def health_check() -> HealthResponse:
    """Always report the process as alive."""
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness probe",
    description="Check that the bridge host is ready to serve requests",
)
async def readiness_check() -> HealthResponse:
    """Report readiness; settings are validated when the module is imported.

    OpenWeatherMap itself is not probed: every lookup needs a caller supplied
    API key, which the host does not hold.
    """
    logger.debug("Readiness probe", environment=settings.ENVIRONMENT)
    return HealthResponse(status="ok")
