"""Unit conversion and recipe scaling engine.

This package provides:
- Unit registry: alias resolution and unit listings
- Amount parsing and formatting (fractions, mixed numbers, decimals)
- Unit system conversion and temperature rewriting
- Ingredient and nutrition scaling

Everything here is pure and synchronous; no I/O happens inside the engine.
"""

from recipe_converter.services.units.amounts import format_amount, parse_amount
from recipe_converter.services.units.converter import (
    celsius_to_fahrenheit,
    convert_temperature_in_text,
    convert_unit,
    fahrenheit_to_celsius,
)
from recipe_converter.services.units.exceptions import UnitRegistryError, UnitsError
from recipe_converter.services.units.models import (
    ConversionResult,
    Ingredient,
    NutritionInfo,
    RecipeTransformResult,
    ScaledAmount,
    ScaledIngredient,
    TransformedIngredient,
    UnitDefinition,
)
from recipe_converter.services.units.registry import (
    get_system_display_name,
    get_units_for_system,
    is_recognized_unit,
    normalize_unit,
)
from recipe_converter.services.units.scaling import (
    calculate_scale_factor,
    clamp_servings,
    is_scalable_amount,
    scale_ingredient_amount,
    scale_ingredients,
    scale_nutrition,
)


__all__ = [
    "ConversionResult",
    "Ingredient",
    "NutritionInfo",
    "RecipeTransformResult",
    "ScaledAmount",
    "ScaledIngredient",
    "TransformedIngredient",
    "UnitDefinition",
    "UnitRegistryError",
    "UnitsError",
    "calculate_scale_factor",
    "celsius_to_fahrenheit",
    "clamp_servings",
    "convert_temperature_in_text",
    "convert_unit",
    "fahrenheit_to_celsius",
    "format_amount",
    "get_system_display_name",
    "get_units_for_system",
    "is_recognized_unit",
    "is_scalable_amount",
    "normalize_unit",
    "parse_amount",
    "scale_ingredient_amount",
    "scale_ingredients",
    "scale_nutrition",
]
