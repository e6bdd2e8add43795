"""Data mappers for transforming between different schema representations.

This package contains functions for mapping data between:
- API request payloads and engine records
- Engine results and API responses
"""

from recipe_converter.mappers.recipe import (
    build_nutrition_response,
    build_scale_response,
    build_transform_response,
    to_ingredients,
    to_nutrition_info,
)
from recipe_converter.mappers.units import (
    build_conversion_response,
    build_unit_list_response,
    build_unit_response,
)


__all__ = [
    "build_conversion_response",
    "build_nutrition_response",
    "build_scale_response",
    "build_transform_response",
    "build_unit_list_response",
    "build_unit_response",
    "to_ingredients",
    "to_nutrition_info",
]
