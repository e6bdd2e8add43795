"""Constants for the unit conversion engine.

Contains:
- The static unit table (keyed by symbol, with alias lists)
- Preferred display units per category and system
- Display heuristics (fraction glyphs, legible magnitude range)
- Amounts that are never scaled
"""

from __future__ import annotations

from typing import Final, NamedTuple

from recipe_converter.schemas.enums import UnitCategory, UnitSystem


class UnitSpec(NamedTuple):
    """Row of the unit table before multipliers are resolved."""

    name: str
    symbol: str
    aliases: tuple[str, ...]
    category: UnitCategory
    system: UnitSystem
    pint_unit: str


# =============================================================================
# Unit Table
# =============================================================================
# Base multipliers are resolved through Pint from ``pint_unit``.
# Aliases are case-insensitive, so "t" (and "T") means tablespoon.

UNIT_TABLE: Final[dict[str, UnitSpec]] = {
    # Volume - Imperial
    "tsp": UnitSpec(
        name="teaspoon",
        symbol="tsp",
        aliases=("tsp", "teaspoon", "teaspoons"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.IMPERIAL,
        pint_unit="teaspoon",
    ),
    "tbsp": UnitSpec(
        name="tablespoon",
        symbol="tbsp",
        aliases=("tbsp", "tablespoon", "tablespoons", "tbs", "t"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.IMPERIAL,
        pint_unit="tablespoon",
    ),
    "fl oz": UnitSpec(
        name="fluid ounce",
        symbol="fl oz",
        aliases=("fl oz", "fluid ounce", "fluid ounces", "floz", "fl. oz"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.IMPERIAL,
        pint_unit="fluid_ounce",
    ),
    "cup": UnitSpec(
        name="cup",
        symbol="cup",
        aliases=("cup", "cups", "c"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.IMPERIAL,
        pint_unit="cup",
    ),
    "pint": UnitSpec(
        name="pint",
        symbol="pt",
        aliases=("pint", "pints", "pt"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.IMPERIAL,
        pint_unit="pint",
    ),
    "quart": UnitSpec(
        name="quart",
        symbol="qt",
        aliases=("quart", "quarts", "qt"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.IMPERIAL,
        pint_unit="quart",
    ),
    "gallon": UnitSpec(
        name="gallon",
        symbol="gal",
        aliases=("gallon", "gallons", "gal"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.IMPERIAL,
        pint_unit="gallon",
    ),
    # Volume - Metric
    "ml": UnitSpec(
        name="milliliter",
        symbol="ml",
        aliases=("ml", "milliliter", "milliliters", "millilitre", "millilitres"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.METRIC,
        pint_unit="milliliter",
    ),
    "cl": UnitSpec(
        name="centiliter",
        symbol="cl",
        aliases=("cl", "centiliter", "centiliters", "centilitre", "centilitres"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.METRIC,
        pint_unit="centiliter",
    ),
    "dl": UnitSpec(
        name="deciliter",
        symbol="dl",
        aliases=("dl", "deciliter", "deciliters", "decilitre", "decilitres"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.METRIC,
        pint_unit="deciliter",
    ),
    "l": UnitSpec(
        name="liter",
        symbol="L",
        aliases=("l", "liter", "liters", "litre", "litres"),
        category=UnitCategory.VOLUME,
        system=UnitSystem.METRIC,
        pint_unit="liter",
    ),
    # Weight - Imperial
    "oz": UnitSpec(
        name="ounce",
        symbol="oz",
        aliases=("oz", "ounce", "ounces"),
        category=UnitCategory.WEIGHT,
        system=UnitSystem.IMPERIAL,
        pint_unit="ounce",
    ),
    "lb": UnitSpec(
        name="pound",
        symbol="lb",
        aliases=("lb", "lbs", "pound", "pounds"),
        category=UnitCategory.WEIGHT,
        system=UnitSystem.IMPERIAL,
        pint_unit="pound",
    ),
    # Weight - Metric
    "mg": UnitSpec(
        name="milligram",
        symbol="mg",
        aliases=("mg", "milligram", "milligrams"),
        category=UnitCategory.WEIGHT,
        system=UnitSystem.METRIC,
        pint_unit="milligram",
    ),
    "g": UnitSpec(
        name="gram",
        symbol="g",
        aliases=("g", "gram", "grams"),
        category=UnitCategory.WEIGHT,
        system=UnitSystem.METRIC,
        pint_unit="gram",
    ),
    "kg": UnitSpec(
        name="kilogram",
        symbol="kg",
        aliases=("kg", "kilogram", "kilograms", "kilo", "kilos"),
        category=UnitCategory.WEIGHT,
        system=UnitSystem.METRIC,
        pint_unit="kilogram",
    ),
}

# Pint unit each category converts through
BASE_PINT_UNITS: Final[dict[UnitCategory, str]] = {
    UnitCategory.VOLUME: "milliliter",
    UnitCategory.WEIGHT: "gram",
}

# Decimal places kept from Pint magnitudes
MULTIPLIER_PRECISION: Final[int] = 6


# =============================================================================
# Display Preferences
# =============================================================================
# Ordered: the first unit giving a legible value wins

PREFERRED_UNITS: Final[dict[UnitCategory, dict[UnitSystem, tuple[str, ...]]]] = {
    UnitCategory.VOLUME: {
        UnitSystem.IMPERIAL: ("cup", "tbsp", "tsp", "fl oz", "quart", "gallon"),
        UnitSystem.METRIC: ("ml", "l"),
    },
    UnitCategory.WEIGHT: {
        UnitSystem.IMPERIAL: ("lb", "oz"),
        UnitSystem.METRIC: ("g", "kg"),
    },
}

# Converted values outside this range fall through to the next preferred unit
LEGIBLE_MIN: Final[float] = 0.1
LEGIBLE_MAX: Final[float] = 1000.0

SYSTEM_DISPLAY_NAMES: Final[dict[UnitSystem, str]] = {
    UnitSystem.METRIC: "Metric",
    UnitSystem.IMPERIAL: "Imperial",
}


# =============================================================================
# Amount Formatting
# =============================================================================

# Checked in ascending order; first match within tolerance wins
FRACTION_GLYPHS: Final[tuple[tuple[float, str], ...]] = (
    (0.125, "⅛"),
    (0.25, "¼"),
    (0.333, "⅓"),
    (0.375, "⅜"),
    (0.5, "½"),
    (0.625, "⅝"),
    (0.666, "⅔"),
    (0.75, "¾"),
    (0.875, "⅞"),
)

FRACTION_TOLERANCE: Final[float] = 0.02

# Exact values used when reading a glyph back in
GLYPH_VALUES: Final[dict[str, float]] = {
    "⅛": 1 / 8,
    "¼": 1 / 4,
    "⅓": 1 / 3,
    "⅜": 3 / 8,
    "½": 1 / 2,
    "⅝": 5 / 8,
    "⅔": 2 / 3,
    "¾": 3 / 4,
    "⅞": 7 / 8,
}


# =============================================================================
# Scaling
# =============================================================================

# Whole-string, case-insensitive matches only
NON_SCALABLE_AMOUNTS: Final[frozenset[str]] = frozenset(
    {
        "to taste",
        "pinch",
        "some",
        "few",
        "handful",
        "as needed",
        "dash",
        "splash",
        "drizzle",
    }
)

DEFAULT_MIN_SERVINGS: Final[int] = 1
DEFAULT_MAX_SERVINGS: Final[int] = 99
