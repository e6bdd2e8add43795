"""Pydantic schemas for request/response validation.

This module exports all schema classes for the Recipe Converter API.
"""

# Base classes
from recipe_converter.schemas.base import APIRequest, APIResponse

# Enums
from recipe_converter.schemas.enums import (
    HealthStatus,
    NutritionConfidence,
    UnitCategory,
    UnitSystem,
)

# Recipe schemas
from recipe_converter.schemas.recipe import (
    IngredientPayload,
    NutritionPayload,
    NutritionResponse,
    ScaledIngredientResponse,
    ScaleRecipeRequest,
    ScaleRecipeResponse,
    TransformedIngredientResponse,
    TransformRecipeRequest,
    TransformRecipeResponse,
)

# Root and health schemas
from recipe_converter.schemas.root import HealthResponse, RootResponse

# Unit schemas
from recipe_converter.schemas.units import (
    ConversionResultResponse,
    ConvertUnitRequest,
    TemperatureTextRequest,
    TemperatureTextResponse,
    UnitDefinitionResponse,
    UnitListResponse,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "ConversionResultResponse",
    "ConvertUnitRequest",
    "HealthResponse",
    "HealthStatus",
    "IngredientPayload",
    "NutritionConfidence",
    "NutritionPayload",
    "NutritionResponse",
    "RootResponse",
    "ScaleRecipeRequest",
    "ScaleRecipeResponse",
    "ScaledIngredientResponse",
    "TemperatureTextRequest",
    "TemperatureTextResponse",
    "TransformRecipeRequest",
    "TransformRecipeResponse",
    "TransformedIngredientResponse",
    "UnitCategory",
    "UnitDefinitionResponse",
    "UnitListResponse",
    "UnitSystem",
]
