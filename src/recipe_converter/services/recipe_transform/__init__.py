"""Recipe transform service for serving scaling and unit display.

This package provides:
- RecipeTransformService: scales a recipe, then converts its units
- Custom exceptions for error handling
"""

from recipe_converter.services.recipe_transform.exceptions import (
    IncompleteServingsError,
    RecipeTransformError,
)
from recipe_converter.services.recipe_transform.service import RecipeTransformService


__all__ = [
    "IncompleteServingsError",
    "RecipeTransformError",
    "RecipeTransformService",
]
