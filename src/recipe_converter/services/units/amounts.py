"""Amount parsing and display formatting.

Converts between the amount strings people type into recipes ("1 1/2",
"3/4", "0.5", "2½") and floats, and back into short display strings that
prefer common vulgar fractions.
"""

from __future__ import annotations

import math
import re
from typing import Final

from recipe_converter.services.units.constants import (
    FRACTION_GLYPHS,
    FRACTION_TOLERANCE,
    GLYPH_VALUES,
)


_MIXED_NUMBER: Final[re.Pattern[str]] = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_FRACTION: Final[re.Pattern[str]] = re.compile(r"^(\d+)/(\d+)$")
_GLYPH: Final[re.Pattern[str]] = re.compile(
    rf"^(\d+)?\s*([{''.join(GLYPH_VALUES)}])$"
)
# Longest numeric prefix, so "2 cups" reads as 2
_DECIMAL_PREFIX: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with halves going up (2.5 -> 3).

    Infinities, NaN and values too large to shift are returned unchanged.
    """
    scale = 10**ndigits
    shifted = value * scale + 0.5
    if not math.isfinite(shifted):
        return value
    return math.floor(shifted) / scale


def _divide(numerator: str, denominator: str) -> float | None:
    den = int(denominator)
    if den == 0:
        return None
    return int(numerator) / den


def _parse_trimmed(trimmed: str) -> float | None:
    mixed = _MIXED_NUMBER.match(trimmed)
    if mixed:
        fraction = _divide(mixed.group(2), mixed.group(3))
        if fraction is None:
            return None
        return int(mixed.group(1)) + fraction

    simple = _FRACTION.match(trimmed)
    if simple:
        return _divide(simple.group(1), simple.group(2))

    glyph = _GLYPH.match(trimmed)
    if glyph:
        whole = int(glyph.group(1)) if glyph.group(1) else 0
        return whole + GLYPH_VALUES[glyph.group(2)]

    decimal = _DECIMAL_PREFIX.match(trimmed)
    if decimal is None:
        return None
    return float(decimal.group(0))


def parse_amount(value: str | None) -> float | None:
    """Parse a human-entered amount into a number.

    Recognized forms, tried in order:
        - mixed numbers: "1 1/2"
        - simple fractions: "3/4"
        - fraction glyphs, optionally after a whole number: "½", "2¼"
        - decimals and integers: "0.5", "2"

    Anything else is read up to the end of its leading number, so
    "2 cups" parses as 2. Negative numbers and exponents are not part of
    the contract.

    Args:
        value: Amount text.

    Returns:
        The numeric value, or None if no finite number could be read.
    """
    if not value:
        return None

    try:
        result = _parse_trimmed(value.strip())
    except (ValueError, OverflowError):
        # Digit runs past the int conversion limit or beyond float range
        return None

    if result is None or not math.isfinite(result):
        return None
    return result


def format_amount(value: float) -> str:
    """Format a number for display.

    The value is rounded to 3 decimals first. A fractional part within
    0.02 of a common fraction is shown as its glyph ("1½", "¾"); whole
    numbers are shown plainly; anything else gets one decimal place.

    Examples:
        >>> format_amount(0.5)
        '½'
        >>> format_amount(1.5)
        '1½'
        >>> format_amount(2.3)
        '2.3'
    """
    if not math.isfinite(value):
        return str(value)

    rounded = round_half_up(value, 3)
    whole = math.floor(rounded)
    fractional = rounded - whole

    for fraction, glyph in FRACTION_GLYPHS:
        if abs(fractional - fraction) < FRACTION_TOLERANCE:
            if whole == 0:
                return glyph
            return f"{whole}{glyph}"

    if rounded == whole:
        return str(whole)

    display = f"{rounded:.1f}"
    return display.removesuffix(".0")
