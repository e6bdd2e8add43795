"""Unit-related data mappers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_converter.schemas import (
    ConversionResultResponse,
    UnitDefinitionResponse,
    UnitListResponse,
)
from recipe_converter.services.units.registry import get_system_display_name


if TYPE_CHECKING:
    from collections.abc import Iterable

    from recipe_converter.schemas.enums import UnitCategory, UnitSystem
    from recipe_converter.services.units.models import (
        ConversionResult,
        UnitDefinition,
    )


def build_unit_response(unit: UnitDefinition) -> UnitDefinitionResponse:
    """Build unit response from a registry definition."""
    return UnitDefinitionResponse(
        name=unit.name,
        symbol=unit.symbol,
        aliases=sorted(unit.aliases),
        category=unit.category,
        system=unit.system,
        base_multiplier=unit.base_multiplier,
    )


def build_unit_list_response(
    category: UnitCategory,
    system: UnitSystem,
    units: Iterable[UnitDefinition],
) -> UnitListResponse:
    """Build unit listing response for one category and system."""
    return UnitListResponse(
        category=category,
        system=system,
        display_name=get_system_display_name(system),
        units=[build_unit_response(unit) for unit in units],
    )


def build_conversion_response(result: ConversionResult) -> ConversionResultResponse:
    """Build conversion response from an engine result."""
    return ConversionResultResponse.model_validate(result, from_attributes=True)
