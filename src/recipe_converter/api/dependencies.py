"""FastAPI dependencies for service access.

Services are created by the application factory and stored in app.state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status


if TYPE_CHECKING:
    from recipe_converter.services.recipe_transform.service import (
        RecipeTransformService,
    )


async def get_transform_service(request: Request) -> RecipeTransformService:
    """Get the recipe transform service from app state.

    Args:
        request: The incoming request.

    Returns:
        Configured RecipeTransformService.

    Raises:
        HTTPException: 503 if service is not initialized.
    """
    service: RecipeTransformService | None = getattr(
        request.app.state, "transform_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe transform service not available",
        )
    return service
