"""Unit registry and conversion schemas."""

from __future__ import annotations

from pydantic import Field

from recipe_converter.schemas.base import (
    MAX_AMOUNT_LENGTH,
    MAX_UNIT_LENGTH,
    APIRequest,
    APIResponse,
)
from recipe_converter.schemas.enums import UnitCategory, UnitSystem


class UnitDefinitionResponse(APIResponse):
    """A recognized measurement unit."""

    name: str = Field(..., description="Canonical unit name", examples=["tablespoon"])
    symbol: str = Field(..., description="Display symbol", examples=["tbsp"])
    aliases: list[str] = Field(
        ...,
        description="Lowercase spellings that resolve to this unit",
        examples=[["tablespoon", "tablespoons", "tbs", "tbsp"]],
    )
    category: UnitCategory = Field(..., description="Measured quantity")
    system: UnitSystem = Field(..., description="Unit system")
    base_multiplier: float = Field(
        ...,
        gt=0,
        description="Amount of the category base unit (ml or g) in one of this unit",
        examples=[14.786765],
    )


class UnitListResponse(APIResponse):
    """Units in one category and system."""

    category: UnitCategory
    system: UnitSystem
    display_name: str = Field(..., description="System label", examples=["Metric"])
    units: list[UnitDefinitionResponse]


class ConvertUnitRequest(APIRequest):
    """Request to convert an amount into another unit system."""

    amount: str = Field(
        ...,
        max_length=MAX_AMOUNT_LENGTH,
        description="Amount as entered",
        examples=["1 1/2"],
    )
    unit: str = Field(
        ...,
        max_length=MAX_UNIT_LENGTH,
        description="Unit as entered",
        examples=["cups"],
    )
    target_system: UnitSystem | None = Field(
        default=None,
        description="System to convert into; the configured default when omitted",
    )


class ConversionResultResponse(APIResponse):
    """Result of a unit conversion.

    When ``wasConverted`` is false, the amount and unit are the originals
    (or the canonical symbol when already in the target system).
    """

    amount: float = Field(..., description="Numeric amount in the result unit")
    unit: str = Field(..., description="Result unit symbol", examples=["ml"])
    display_amount: str = Field(..., description="Formatted amount", examples=["473.2"])
    original_amount: str
    original_unit: str
    was_converted: bool


class TemperatureTextRequest(APIRequest):
    """Instruction text whose temperatures should be rewritten."""

    text: str = Field(..., description="Free-form text", examples=["Bake at 350F"])
    target_system: UnitSystem | None = Field(
        default=None,
        description="System to rewrite into; the configured default when omitted",
    )


class TemperatureTextResponse(APIResponse):
    """Instruction text with temperatures rewritten."""

    text: str = Field(..., examples=["Bake at 177°C (350°F)"])
