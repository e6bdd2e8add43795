"""Serving-count scaling for ingredient amounts and nutrition totals."""

from __future__ import annotations

import dataclasses
import math
import re
from typing import TYPE_CHECKING, Final

from recipe_converter.services.units.amounts import (
    format_amount,
    parse_amount,
    round_half_up,
)
from recipe_converter.services.units.constants import (
    DEFAULT_MAX_SERVINGS,
    DEFAULT_MIN_SERVINGS,
    NON_SCALABLE_AMOUNTS,
)
from recipe_converter.services.units.models import ScaledAmount, ScaledIngredient


if TYPE_CHECKING:
    from collections.abc import Iterable

    from recipe_converter.services.units.models import Ingredient, NutritionInfo


_RANGE: Final[re.Pattern[str]] = re.compile(r"^(\d+(?:/\d+)?)\s*-\s*(\d+(?:/\d+)?)$")

_NUTRITION_FIELDS: Final[tuple[str, ...]] = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
)


def is_scalable_amount(amount: str | None) -> bool:
    """Check if an amount can be multiplied by a scale factor.

    Blank amounts and qualifiers such as "to taste" or "pinch" are not
    scalable. Only the whole string is compared, so "a pinch" still
    counts as scalable (and then fails to parse).
    """
    if not amount:
        return False
    trimmed = amount.strip()
    if not trimmed:
        return False
    return trimmed.lower() not in NON_SCALABLE_AMOUNTS


def scale_ingredient_amount(amount: str | None, scale_factor: float) -> ScaledAmount:
    """Scale an amount string by ``scale_factor``.

    Ranges like "2-3" scale both ends; the scaled value reported for a
    range is its low end.

    Args:
        amount: Amount as entered.
        scale_factor: Multiplier, e.g. 2 for doubling.

    Returns:
        The scaled value and display string, both None when the amount is
        missing, a non-scalable qualifier, or not a number.
    """
    if amount is None or not is_scalable_amount(amount):
        return ScaledAmount()

    trimmed = amount.strip()

    range_match = _RANGE.match(trimmed)
    if range_match:
        low = parse_amount(range_match.group(1))
        high = parse_amount(range_match.group(2))
        if low is not None and high is not None:
            scaled_low = low * scale_factor
            scaled_high = high * scale_factor
            if not (math.isfinite(scaled_low) and math.isfinite(scaled_high)):
                return ScaledAmount()
            return ScaledAmount(
                scaled_value=scaled_low,
                display_amount=f"{format_amount(scaled_low)}-{format_amount(scaled_high)}",
            )

    parsed = parse_amount(trimmed)
    if parsed is None:
        return ScaledAmount()

    scaled = parsed * scale_factor
    if not math.isfinite(scaled):
        return ScaledAmount()
    return ScaledAmount(scaled_value=scaled, display_amount=format_amount(scaled))


def scale_ingredients(
    ingredients: Iterable[Ingredient],
    scale_factor: float,
) -> list[ScaledIngredient]:
    """Scale every ingredient, keeping the original amount alongside."""
    scaled_ingredients: list[ScaledIngredient] = []
    for ingredient in ingredients:
        display_amount = scale_ingredient_amount(
            ingredient.amount, scale_factor
        ).display_amount
        scaled_ingredients.append(
            ScaledIngredient(
                id=ingredient.id,
                text=ingredient.text,
                amount=ingredient.amount,
                unit=ingredient.unit,
                scaled_amount=display_amount,
                original_amount=ingredient.amount,
                was_scaled=display_amount is not None and scale_factor != 1,
            )
        )
    return scaled_ingredients


def scale_nutrition(
    nutrition: NutritionInfo | None,
    scale_factor: float,
) -> NutritionInfo | None:
    """Scale recipe nutrition totals, rounding each value to 1 decimal.

    Unknown (None) values stay None; values that are not finite, or would
    overflow, are left unchanged.
    """
    if nutrition is None:
        return None

    scaled: dict[str, float | None] = {}
    for name in _NUTRITION_FIELDS:
        value = getattr(nutrition, name)
        scaled[name] = (
            None if value is None else _scale_nutrient(value, scale_factor)
        )

    return dataclasses.replace(nutrition, **scaled)


def _scale_nutrient(value: float, scale_factor: float) -> float:
    scaled = value * scale_factor
    if not math.isfinite(scaled):
        return value
    return round_half_up(scaled, 1)


def calculate_scale_factor(original_servings: float, new_servings: float) -> float:
    """Ratio of new to original servings; 1 if either is not positive."""
    if original_servings <= 0 or new_servings <= 0:
        return 1
    return new_servings / original_servings


def clamp_servings(
    servings: int,
    minimum: int = DEFAULT_MIN_SERVINGS,
    maximum: int = DEFAULT_MAX_SERVINGS,
) -> int:
    """Bound a requested serving count to ``[minimum, maximum]``."""
    return max(minimum, min(maximum, servings))
