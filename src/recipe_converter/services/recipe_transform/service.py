"""Recipe transform service.

Renders a stored recipe for a requested serving count and unit system:
ingredient amounts are scaled first and the scaled amounts are then
converted, nutrition totals are scaled, and temperatures inside the
instructions are rewritten.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from recipe_converter.observability.logging import get_logger
from recipe_converter.services.recipe_transform.exceptions import (
    IncompleteServingsError,
)
from recipe_converter.services.units.amounts import format_amount, parse_amount
from recipe_converter.services.units.constants import (
    DEFAULT_MAX_SERVINGS,
    DEFAULT_MIN_SERVINGS,
)
from recipe_converter.services.units.converter import (
    convert_temperature_in_text,
    convert_unit,
)
from recipe_converter.services.units.models import (
    RecipeTransformResult,
    TransformedIngredient,
)
from recipe_converter.services.units.scaling import (
    calculate_scale_factor,
    clamp_servings,
    scale_ingredients,
    scale_nutrition,
)


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from recipe_converter.schemas.enums import UnitSystem
    from recipe_converter.services.units.models import (
        Ingredient,
        NutritionInfo,
        ScaledIngredient,
    )


logger = get_logger(__name__)


class RecipeTransformService:
    """Applies serving scaling and unit conversion to whole recipes.

    Orchestrates:
    1. Scale factor from original and requested servings
    2. Ingredient scaling (non-scalable amounts pass through)
    3. Unit conversion of the scaled amounts
    4. Nutrition scaling
    5. Temperature rewriting in instructions

    Example:
        service = RecipeTransformService()
        result = service.transform(
            ingredients,
            original_servings=4,
            servings=8,
            target_system=UnitSystem.METRIC,
        )
    """

    def __init__(
        self,
        min_servings: int = DEFAULT_MIN_SERVINGS,
        max_servings: int = DEFAULT_MAX_SERVINGS,
    ) -> None:
        """Initialize the service.

        Args:
            min_servings: Smallest serving count a recipe can be scaled to.
            max_servings: Largest serving count a recipe can be scaled to.
        """
        if min_servings > max_servings:
            msg = f"min_servings ({min_servings}) exceeds max_servings ({max_servings})"
            raise ValueError(msg)
        self._min_servings = min_servings
        self._max_servings = max_servings

    def resolve_scale_factor(
        self,
        original_servings: int | None,
        servings: int | None,
    ) -> float:
        """Compute the scale factor for a servings request.

        The requested count is clamped to the configured bounds first.

        Raises:
            IncompleteServingsError: If only one of the counts is given.
        """
        if original_servings is None and servings is None:
            return 1
        if original_servings is None or servings is None:
            raise IncompleteServingsError(original_servings, servings)

        requested = clamp_servings(servings, self._min_servings, self._max_servings)
        return calculate_scale_factor(original_servings, requested)

    def scale(
        self,
        ingredients: Iterable[Ingredient],
        *,
        original_servings: int,
        servings: int,
        nutrition: NutritionInfo | None = None,
    ) -> tuple[float, list[ScaledIngredient], NutritionInfo | None]:
        """Scale ingredients and nutrition to a new serving count.

        Returns:
            Tuple of (scale factor, scaled ingredients, scaled nutrition).
        """
        scale_factor = self.resolve_scale_factor(original_servings, servings)
        scaled = scale_ingredients(ingredients, scale_factor)

        logger.debug(
            "Scaled recipe",
            scale_factor=scale_factor,
            ingredient_count=len(scaled),
            scaled_count=sum(1 for item in scaled if item.was_scaled),
        )

        return scale_factor, scaled, scale_nutrition(nutrition, scale_factor)

    def transform(
        self,
        ingredients: Iterable[Ingredient],
        *,
        original_servings: int | None = None,
        servings: int | None = None,
        target_system: UnitSystem | None = None,
        nutrition: NutritionInfo | None = None,
        instructions: Sequence[str] = (),
    ) -> RecipeTransformResult:
        """Render a recipe for a serving count and unit system.

        Args:
            ingredients: Ingredient lines as stored.
            original_servings: Serving count the recipe was written for.
            servings: Requested serving count.
            target_system: Unit system to display, or None to keep units.
            nutrition: Recipe nutrition totals, if known.
            instructions: Instruction step texts.

        Returns:
            Transformed recipe with original values preserved per ingredient.

        Raises:
            IncompleteServingsError: If only one of the servings counts is given.
        """
        scale_factor = self.resolve_scale_factor(original_servings, servings)
        scaled = scale_ingredients(ingredients, scale_factor)

        transformed = [
            self._convert_ingredient(item, target_system) for item in scaled
        ]

        steps = list(instructions)
        if target_system is not None:
            steps = [convert_temperature_in_text(step, target_system) for step in steps]

        logger.debug(
            "Transformed recipe",
            scale_factor=scale_factor,
            target_system=target_system,
            ingredient_count=len(transformed),
            converted_count=sum(1 for item in transformed if item.was_converted),
            instruction_count=len(steps),
        )

        return RecipeTransformResult(
            scale_factor=scale_factor,
            target_system=target_system,
            ingredients=transformed,
            nutrition=scale_nutrition(nutrition, scale_factor),
            instructions=steps,
        )

    def _convert_ingredient(
        self,
        ingredient: ScaledIngredient,
        target_system: UnitSystem | None,
    ) -> TransformedIngredient:
        """Convert an already scaled ingredient into the target system.

        Non-scalable amounts ("to taste") keep their original text and are
        converted as-is, which leaves them unchanged.
        """
        amount = (
            ingredient.scaled_amount
            if ingredient.scaled_amount is not None
            else ingredient.original_amount
        )

        display_amount = amount
        display_unit = ingredient.unit
        was_converted = False

        if target_system is not None and amount and ingredient.unit:
            bounds = _split_range(amount)
            if bounds is not None:
                converted = _convert_range(*bounds, ingredient.unit, target_system)
            else:
                result = convert_unit(amount, ingredient.unit, target_system)
                converted = (
                    (result.display_amount, result.unit)
                    if result.was_converted
                    else None
                )
            if converted is not None:
                display_amount, display_unit = converted
                was_converted = True

        return TransformedIngredient(
            id=ingredient.id,
            text=ingredient.text,
            original_amount=ingredient.original_amount,
            original_unit=ingredient.unit,
            display_amount=display_amount,
            display_unit=display_unit,
            was_scaled=ingredient.was_scaled,
            was_converted=was_converted,
        )


def _split_range(amount: str) -> tuple[str, str] | None:
    """Split a displayed range such as "1½-2" into its two ends."""
    parts = [part.strip() for part in amount.split("-")]
    if len(parts) != 2 or not all(parts):
        return None
    if any(parse_amount(part) is None for part in parts):
        return None
    return parts[0], parts[1]


def _convert_range(
    low: str,
    high: str,
    unit: str,
    target_system: UnitSystem,
) -> tuple[str, str] | None:
    """Convert both ends of a range into the unit chosen for its low end."""
    low_result = convert_unit(low, unit, target_system)
    low_value = parse_amount(low)
    high_value = parse_amount(high)
    if not low_result.was_converted or not low_value or high_value is None:
        return None

    high_converted = high_value * (low_result.amount / low_value)
    if not math.isfinite(high_converted):
        return None
    display = f"{low_result.display_amount}-{format_amount(high_converted)}"
    return display, low_result.unit
