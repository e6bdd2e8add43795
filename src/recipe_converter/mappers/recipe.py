"""Recipe-related data mappers.

Transforms request payloads into engine records and engine results back
into API responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_converter.schemas import (
    NutritionResponse,
    ScaledIngredientResponse,
    ScaleRecipeResponse,
    TransformedIngredientResponse,
    TransformRecipeResponse,
)
from recipe_converter.schemas.enums import NutritionConfidence
from recipe_converter.services.units.models import Ingredient, NutritionInfo


if TYPE_CHECKING:
    from collections.abc import Iterable

    from recipe_converter.schemas import IngredientPayload, NutritionPayload
    from recipe_converter.services.units.models import (
        RecipeTransformResult,
        ScaledIngredient,
    )


def to_ingredients(payloads: Iterable[IngredientPayload]) -> list[Ingredient]:
    """Build engine ingredients from request payloads."""
    return [
        Ingredient(
            id=payload.id,
            text=payload.text,
            amount=payload.amount,
            unit=payload.unit,
        )
        for payload in payloads
    ]


def to_nutrition_info(payload: NutritionPayload | None) -> NutritionInfo | None:
    """Build engine nutrition totals from a request payload."""
    if payload is None:
        return None

    return NutritionInfo(
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fat=payload.fat,
        fiber=payload.fiber,
        sugar=payload.sugar,
        confidence=(
            NutritionConfidence(payload.confidence) if payload.confidence else None
        ),
        warnings=tuple(payload.warnings),
    )


def build_nutrition_response(info: NutritionInfo | None) -> NutritionResponse | None:
    """Build nutrition response from engine totals."""
    if info is None:
        return None
    return NutritionResponse.model_validate(info, from_attributes=True)


def build_scale_response(
    scale_factor: float,
    ingredients: Iterable[ScaledIngredient],
    nutrition: NutritionInfo | None,
) -> ScaleRecipeResponse:
    """Build scale response from engine output.

    Args:
        scale_factor: Applied scale factor.
        ingredients: Scaled ingredients in request order.
        nutrition: Scaled nutrition totals, if any were sent.

    Returns:
        Response schema for the scale endpoint.
    """
    return ScaleRecipeResponse(
        scale_factor=scale_factor,
        ingredients=[
            ScaledIngredientResponse.model_validate(item, from_attributes=True)
            for item in ingredients
        ],
        nutrition=build_nutrition_response(nutrition),
    )


def build_transform_response(result: RecipeTransformResult) -> TransformRecipeResponse:
    """Build transform response from a transformed recipe."""
    return TransformRecipeResponse(
        scale_factor=result.scale_factor,
        target_system=result.target_system,
        ingredients=[
            TransformedIngredientResponse.model_validate(item, from_attributes=True)
            for item in result.ingredients
        ],
        nutrition=build_nutrition_response(result.nutrition),
        instructions=result.instructions,
    )
