"""Health check endpoint.

The service has no external dependencies, so liveness is the only probe.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_converter.core.config import Settings, get_settings
from recipe_converter.schemas.enums import HealthStatus
from recipe_converter.schemas.root import HealthResponse
from recipe_converter.services.units.registry import UNITS


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check if the service is alive and the unit registry is loaded."""
    return HealthResponse(
        status=HealthStatus.HEALTHY if UNITS else HealthStatus.UNHEALTHY,
        version=settings.app.version,
        environment=settings.APP_ENV,
        unit_count=len(UNITS),
    )
