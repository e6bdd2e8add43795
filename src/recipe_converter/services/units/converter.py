"""Unit system conversion for ingredient amounts and instruction text.

Amounts are converted through the category base unit (ml or g) and then
shown in whichever preferred unit of the target system keeps the number
legible: 2 cups become "473.2 ml", while 4 lb skips past grams and
becomes "1.8 kg".
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Final

from recipe_converter.schemas.enums import UnitSystem
from recipe_converter.services.units.amounts import (
    format_amount,
    parse_amount,
    round_half_up,
)
from recipe_converter.services.units.constants import (
    LEGIBLE_MAX,
    LEGIBLE_MIN,
    PREFERRED_UNITS,
)
from recipe_converter.services.units.models import ConversionResult
from recipe_converter.services.units.registry import get_unit, normalize_unit


if TYPE_CHECKING:
    from recipe_converter.schemas.enums import UnitCategory
    from recipe_converter.services.units.models import UnitDefinition


# 350F, 350°F, 350 F, 350 degrees F, 350 degrees fahrenheit
# Readings longer than six digits are not temperatures and stay untouched
_FAHRENHEIT: Final[re.Pattern[str]] = re.compile(
    r"(?<!\d)(\d{1,6})\s*°?\s*(?:degrees?\s*)?(?:F|fahrenheit)\b",
    re.IGNORECASE | re.ASCII,
)
# 180C, 180°C, 180 C, 180 degrees C, 180 degrees celsius
_CELSIUS: Final[re.Pattern[str]] = re.compile(
    r"(?<!\d)(\d{1,6})\s*°?\s*(?:degrees?\s*)?(?:C|celsius)\b",
    re.IGNORECASE | re.ASCII,
)


def select_best_unit(
    base_amount: float,
    category: UnitCategory,
    target_system: UnitSystem,
) -> UnitDefinition:
    """Pick the display unit for an amount expressed in base units.

    Walks the preferred units of ``target_system`` in order and returns the
    first one that puts the value within [0.1, 1000]. Falls back to the
    first preferred unit when none does.
    """
    preferred = PREFERRED_UNITS[category][target_system]

    for key in preferred:
        unit = get_unit(key)
        converted = base_amount / unit.base_multiplier
        if LEGIBLE_MIN <= converted <= LEGIBLE_MAX:
            return unit

    return get_unit(preferred[0])


def _unconverted(
    amount: float | None,
    amount_str: str,
    from_unit: str,
) -> ConversionResult:
    return ConversionResult(
        amount=amount if amount is not None else 0,
        unit=from_unit,
        display_amount=amount_str,
        original_amount=amount_str,
        original_unit=from_unit,
        was_converted=False,
    )


def convert_unit(
    amount_str: str,
    from_unit: str,
    to_system: UnitSystem,
) -> ConversionResult:
    """Convert an amount and unit into the target unit system.

    Args:
        amount_str: Amount as entered, e.g. "1 1/2".
        from_unit: Unit as entered, e.g. "cups".
        to_system: System to display the amount in.

    Returns:
        The conversion result. ``was_converted`` is False when the amount or
        unit is not understood (original values are echoed back) or when
        the unit already belongs to ``to_system`` (the amount is echoed in
        formatted form with the canonical unit symbol).
    """
    amount = parse_amount(amount_str)
    unit = normalize_unit(from_unit)

    if amount is None or unit is None:
        return _unconverted(amount, amount_str, from_unit)

    if unit.system == to_system:
        return ConversionResult(
            amount=amount,
            unit=unit.symbol,
            display_amount=format_amount(amount),
            original_amount=amount_str,
            original_unit=from_unit,
            was_converted=False,
        )

    base_amount = amount * unit.base_multiplier
    target = select_best_unit(base_amount, unit.category, to_system)
    converted = base_amount / target.base_multiplier
    if not math.isfinite(converted):
        return _unconverted(amount, amount_str, from_unit)

    return ConversionResult(
        amount=converted,
        unit=target.symbol,
        display_amount=format_amount(converted),
        original_amount=amount_str,
        original_unit=from_unit,
        was_converted=True,
    )


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    """Convert Fahrenheit to whole degrees Celsius."""
    return int(round_half_up((fahrenheit - 32) * 5 / 9))


def celsius_to_fahrenheit(celsius: float) -> int:
    """Convert Celsius to whole degrees Fahrenheit."""
    return int(round_half_up(celsius * 9 / 5 + 32))


def _fahrenheit_to_metric(match: re.Match[str]) -> str:
    fahrenheit = int(match.group(1))
    return f"{fahrenheit_to_celsius(fahrenheit)}°C ({fahrenheit}°F)"


def _celsius_to_imperial(match: re.Match[str]) -> str:
    celsius = int(match.group(1))
    return f"{celsius_to_fahrenheit(celsius)}°F ({celsius}°C)"


def convert_temperature_in_text(text: str, to_system: UnitSystem) -> str:
    """Rewrite temperature mentions in free-form instruction text.

    For metric, every Fahrenheit mention becomes "<c>°C (<f>°F)"; for
    imperial, every Celsius mention becomes "<f>°F (<c>°C)". Mentions
    already in the target scale are left alone.

    Example:
        >>> convert_temperature_in_text("Bake at 350F", UnitSystem.METRIC)
        'Bake at 177°C (350°F)'
    """
    if not text:
        return text

    if to_system == UnitSystem.METRIC:
        return _FAHRENHEIT.sub(_fahrenheit_to_metric, text)
    return _CELSIUS.sub(_celsius_to_imperial, text)
