"""
Health check endpoints.

Provides health check endpoints for monitoring service status.
"""

from fastapi import APIRouter

from campus import __version__
from campus.api.v1.health.models import HealthResponse
from campus.di import SettingsDep

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Service status, version and document store provider
    """
    return HealthResponse(
        status="ok", version=__version__, provider=settings.infrastructure_provider
    )
