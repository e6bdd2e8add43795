"""Unit endpoints.

Provides:
- GET /units for listing the units of a category and system
- GET /units/normalize for resolving a free-form unit string
- POST /units/convert for converting an amount into another unit system
- POST /temperatures/convert for rewriting temperatures in instruction text
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from recipe_converter.core.config import Settings, get_settings
from recipe_converter.core.exceptions import UnitNotFoundException
from recipe_converter.mappers import (
    build_conversion_response,
    build_unit_list_response,
    build_unit_response,
)
from recipe_converter.observability.logging import get_logger
from recipe_converter.schemas import (
    ConversionResultResponse,
    ConvertUnitRequest,
    TemperatureTextRequest,
    TemperatureTextResponse,
    UnitDefinitionResponse,
    UnitListResponse,
)
from recipe_converter.schemas.base import MAX_UNIT_LENGTH
from recipe_converter.schemas.enums import UnitCategory, UnitSystem
from recipe_converter.services.units import (
    convert_temperature_in_text,
    convert_unit,
    get_units_for_system,
    normalize_unit,
)


logger = get_logger(__name__)

router = APIRouter(tags=["Units"])


@router.get(
    "/units",
    response_model=UnitListResponse,
    summary="List units",
    description=(
        "Lists the recognized units of one category and unit system, in the "
        "order they are defined."
    ),
    responses={422: {"description": "Unknown category or system"}},
)
async def list_units(
    category: Annotated[
        UnitCategory,
        Query(description="Measured quantity"),
    ] = UnitCategory.VOLUME,
    system: Annotated[
        UnitSystem,
        Query(description="Unit system"),
    ] = UnitSystem.METRIC,
) -> UnitListResponse:
    """List units for a category and system.

    Temperature has no table units, so its listing is always empty.
    """
    return build_unit_list_response(
        category,
        system,
        get_units_for_system(category, system),
    )


@router.get(
    "/units/normalize",
    response_model=UnitDefinitionResponse,
    summary="Resolve a unit string",
    description=(
        "Resolves a free-form unit string such as 'Tbsp', 'tablespoons' or "
        "'TBS' to its unit definition. Matching is case-insensitive and "
        "tolerates a trailing plural 's'."
    ),
    responses={
        404: {
            "description": "Unit not recognized",
            "content": {
                "application/json": {
                    "example": {
                        "error": "UNIT_NOT_FOUND",
                        "message": "Unrecognized unit: 'pinch'",
                    }
                }
            },
        },
    },
)
async def normalize(
    unit: Annotated[
        str,
        Query(min_length=1, max_length=MAX_UNIT_LENGTH, description="Unit as entered"),
    ],
) -> UnitDefinitionResponse:
    """Resolve a unit string to its definition."""
    definition = normalize_unit(unit)
    if definition is None:
        raise UnitNotFoundException(unit)
    return build_unit_response(definition)


@router.post(
    "/units/convert",
    response_model=ConversionResultResponse,
    summary="Convert an amount",
    description=(
        "Converts an amount and unit into the legible preferred unit of the "
        "target system. Unparseable amounts, unknown units, temperatures and "
        "units already in the target system come back unconverted."
    ),
)
async def convert(
    request_body: ConvertUnitRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ConversionResultResponse:
    """Convert one amount into another unit system."""
    target_system = UnitSystem(
        request_body.target_system or settings.conversion.default_system
    )
    result = convert_unit(request_body.amount, request_body.unit, target_system)

    logger.debug(
        "Converted amount",
        amount=request_body.amount,
        unit=request_body.unit,
        target_system=target_system,
        result_unit=result.unit,
        was_converted=result.was_converted,
    )

    return build_conversion_response(result)


@router.post(
    "/temperatures/convert",
    response_model=TemperatureTextResponse,
    summary="Rewrite temperatures in text",
    description=(
        "Rewrites Fahrenheit temperatures as Celsius for the metric system, "
        "or Celsius as Fahrenheit for imperial, keeping the original value in "
        "parentheses."
    ),
)
async def convert_temperatures(
    request_body: TemperatureTextRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> TemperatureTextResponse:
    """Rewrite the temperatures in a piece of instruction text."""
    target_system = UnitSystem(
        request_body.target_system or settings.conversion.default_system
    )
    return TemperatureTextResponse(
        text=convert_temperature_in_text(request_body.text, target_system)
    )
