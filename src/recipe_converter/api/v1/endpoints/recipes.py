"""Recipe endpoints.

Provides:
- POST /recipes/scale for scaling ingredients and nutrition to new servings
- POST /recipes/transform for rendering a recipe for servings and a unit system
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_converter.api.dependencies import get_transform_service
from recipe_converter.core.exceptions import BadRequestException
from recipe_converter.mappers import (
    build_scale_response,
    build_transform_response,
    to_ingredients,
    to_nutrition_info,
)
from recipe_converter.observability.logging import get_logger
from recipe_converter.schemas import (
    ScaleRecipeRequest,
    ScaleRecipeResponse,
    TransformRecipeRequest,
    TransformRecipeResponse,
)
from recipe_converter.schemas.enums import UnitSystem
from recipe_converter.services.recipe_transform.exceptions import (
    IncompleteServingsError,
)
from recipe_converter.services.recipe_transform.service import (
    RecipeTransformService,  # noqa: TC001
)


logger = get_logger(__name__)

router = APIRouter(tags=["Recipes"])


@router.post(
    "/recipes/scale",
    response_model=ScaleRecipeResponse,
    summary="Scale a recipe",
    description=(
        "Scales ingredient amounts and nutrition totals from the recipe's "
        "original serving count to the requested one. Amounts that are not "
        "numeric (such as 'to taste') are returned unscaled."
    ),
    responses={
        422: {"description": "Request validation error"},
        503: {"description": "Service unavailable"},
    },
)
async def scale_recipe(
    request_body: ScaleRecipeRequest,
    service: Annotated[RecipeTransformService, Depends(get_transform_service)],
) -> ScaleRecipeResponse:
    """Scale a recipe to a new serving count."""
    scale_factor, ingredients, nutrition = service.scale(
        to_ingredients(request_body.ingredients),
        original_servings=request_body.original_servings,
        servings=request_body.servings,
        nutrition=to_nutrition_info(request_body.nutrition),
    )
    return build_scale_response(scale_factor, ingredients, nutrition)


@router.post(
    "/recipes/transform",
    response_model=TransformRecipeResponse,
    summary="Transform a recipe",
    description=(
        "Scales a recipe to the requested servings, converts the scaled "
        "amounts into the target unit system and rewrites oven temperatures "
        "in the instructions. Original amounts and units are preserved on "
        "every ingredient."
    ),
    responses={
        400: {
            "description": "Only one of the servings counts was provided",
            "content": {
                "application/json": {
                    "example": {
                        "error": "BAD_REQUEST",
                        "message": (
                            "Both 'originalServings' and 'servings' must be "
                            "provided together, or neither"
                        ),
                    }
                }
            },
        },
        422: {"description": "Request validation error"},
        503: {"description": "Service unavailable"},
    },
)
async def transform_recipe(
    request_body: TransformRecipeRequest,
    service: Annotated[RecipeTransformService, Depends(get_transform_service)],
) -> TransformRecipeResponse:
    """Render a recipe for a serving count and unit system."""
    target_system = (
        UnitSystem(request_body.target_system) if request_body.target_system else None
    )

    try:
        result = service.transform(
            to_ingredients(request_body.ingredients),
            original_servings=request_body.original_servings,
            servings=request_body.servings,
            target_system=target_system,
            nutrition=to_nutrition_info(request_body.nutrition),
            instructions=request_body.instructions,
        )
    except IncompleteServingsError as e:
        logger.warning(
            "Rejected transform with incomplete servings",
            original_servings=e.original_servings,
            servings=e.servings,
        )
        raise BadRequestException(str(e)) from e

    return build_transform_response(result)
