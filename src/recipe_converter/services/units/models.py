"""Plain records consumed and produced by the unit engine.

Every record is frozen. Engine operations build new records next to the
caller's originals instead of editing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from recipe_converter.schemas.enums import (
    NutritionConfidence,
    UnitCategory,
    UnitSystem,
)


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """A recognized measurement unit.

    ``base_multiplier`` converts one of this unit into the category base
    unit (milliliter for volume, gram for weight).
    """

    name: str
    symbol: str
    aliases: frozenset[str]
    category: UnitCategory
    system: UnitSystem
    base_multiplier: float


@dataclass(frozen=True, slots=True)
class Ingredient:
    """Ingredient line as stored with a recipe."""

    text: str
    amount: str | None = None
    unit: str | None = None
    id: str | None = None


@dataclass(frozen=True, slots=True)
class NutritionInfo:
    """Recipe nutrition totals. Any field may be unknown."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    confidence: NutritionConfidence | None = None
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of converting one amount and unit to a target system."""

    amount: float
    unit: str
    display_amount: str
    original_amount: str
    original_unit: str
    was_converted: bool


@dataclass(frozen=True, slots=True)
class ScaledAmount:
    """Scaled numeric value and its display string.

    Both are ``None`` when the amount cannot be scaled.
    """

    scaled_value: float | None = None
    display_amount: str | None = None


@dataclass(frozen=True, slots=True)
class ScaledIngredient:
    """Ingredient together with its amount scaled for new servings."""

    text: str
    amount: str | None
    unit: str | None
    scaled_amount: str | None
    original_amount: str | None
    was_scaled: bool
    id: str | None = None


@dataclass(frozen=True, slots=True)
class TransformedIngredient:
    """Ingredient after scaling and unit conversion.

    ``display_amount`` and ``display_unit`` are what a recipe page shows;
    the original values stay available for an "originally ..." hint.
    """

    text: str
    original_amount: str | None
    original_unit: str | None
    display_amount: str | None
    display_unit: str | None
    was_scaled: bool
    was_converted: bool
    id: str | None = None


@dataclass(frozen=True, slots=True)
class RecipeTransformResult:
    """A recipe rendered for a serving count and unit system."""

    scale_factor: float
    target_system: UnitSystem | None
    ingredients: list[TransformedIngredient] = field(default_factory=list)
    nutrition: NutritionInfo | None = None
    instructions: list[str] = field(default_factory=list)
