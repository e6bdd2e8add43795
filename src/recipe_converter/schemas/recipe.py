"""Recipe scaling and transform schemas."""

from __future__ import annotations

from pydantic import Field

from recipe_converter.schemas.base import (
    MAX_AMOUNT_LENGTH,
    MAX_UNIT_LENGTH,
    APIRequest,
    APIResponse,
)
from recipe_converter.schemas.enums import NutritionConfidence, UnitSystem


class IngredientPayload(APIRequest):
    """Ingredient line as stored with a recipe."""

    id: str | None = Field(default=None, description="Client-side identifier")
    text: str = Field(..., description="Ingredient name or full line", examples=["flour"])
    amount: str | None = Field(
        default=None,
        max_length=MAX_AMOUNT_LENGTH,
        examples=["1 1/2"],
    )
    unit: str | None = Field(
        default=None,
        max_length=MAX_UNIT_LENGTH,
        examples=["cups"],
    )


class NutritionPayload(APIRequest):
    """Recipe nutrition totals."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    confidence: NutritionConfidence | None = None
    warnings: list[str] = Field(default_factory=list)


class NutritionResponse(APIResponse):
    """Recipe nutrition totals after scaling."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    confidence: NutritionConfidence | None = None
    warnings: list[str] = Field(default_factory=list)


class ScaleRecipeRequest(APIRequest):
    """Request to scale a recipe to a new serving count."""

    ingredients: list[IngredientPayload] = Field(default_factory=list)
    original_servings: int = Field(
        ...,
        description="Serving count the recipe was written for",
        examples=[4],
    )
    servings: int = Field(
        ...,
        description="Requested serving count (clamped to the configured bounds)",
        examples=[8],
    )
    nutrition: NutritionPayload | None = None


class ScaledIngredientResponse(APIResponse):
    """Ingredient with its scaled amount.

    ``scaledAmount`` is null when the amount could not be scaled.
    """

    id: str | None = None
    text: str
    amount: str | None = None
    unit: str | None = None
    scaled_amount: str | None = None
    original_amount: str | None = None
    was_scaled: bool


class ScaleRecipeResponse(APIResponse):
    """Recipe scaled to a new serving count."""

    scale_factor: float = Field(..., examples=[2.0])
    ingredients: list[ScaledIngredientResponse]
    nutrition: NutritionResponse | None = None


class TransformRecipeRequest(APIRequest):
    """Request to render a recipe for a serving count and unit system.

    Omit both servings counts to keep the recipe's quantities, and omit
    ``targetSystem`` to keep its units.
    """

    ingredients: list[IngredientPayload] = Field(default_factory=list)
    original_servings: int | None = Field(default=None, examples=[4])
    servings: int | None = Field(default=None, examples=[6])
    target_system: UnitSystem | None = Field(default=None, examples=["metric"])
    nutrition: NutritionPayload | None = None
    instructions: list[str] = Field(
        default_factory=list,
        examples=[["Preheat the oven to 350F."]],
    )


class TransformedIngredientResponse(APIResponse):
    """Ingredient as displayed after scaling and conversion."""

    id: str | None = None
    text: str
    original_amount: str | None = None
    original_unit: str | None = None
    display_amount: str | None = None
    display_unit: str | None = None
    was_scaled: bool
    was_converted: bool


class TransformRecipeResponse(APIResponse):
    """Recipe rendered for a serving count and unit system."""

    scale_factor: float
    target_system: UnitSystem | None = None
    ingredients: list[TransformedIngredientResponse]
    nutrition: NutritionResponse | None = None
    instructions: list[str]
