"""Root and health endpoint response schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from recipe_converter.schemas.base import APIResponse
from recipe_converter.schemas.enums import HealthStatus


class RootResponse(APIResponse):
    """Basic service information with links to docs and health."""

    service: str = Field(
        ...,
        description="Service name",
        examples=["Recipe Converter Service"],
    )
    version: str = Field(..., description="Service version", examples=["0.1.0"])
    status: str = Field(
        ...,
        description="Service operational status",
        examples=["operational"],
    )
    docs: str = Field(
        ...,
        description="API documentation URL or status",
        examples=["/api/v1/recipe-converter/docs"],
    )
    health: str = Field(
        ...,
        description="Health check endpoint URL",
        examples=["/api/v1/recipe-converter/health"],
    )


class HealthResponse(APIResponse):
    """Liveness probe response."""

    status: HealthStatus = Field(..., description="Health status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    unit_count: int = Field(..., description="Units loaded in the registry")
