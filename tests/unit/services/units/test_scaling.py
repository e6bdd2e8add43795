"""Unit tests for ingredient and nutrition scaling.

Tests cover:
- Scalable amount detection
- Single amount scaling (numbers, fractions, ranges, qualifiers)
- Ingredient list scaling
- Nutrition scaling and rounding
- Scale factor and serving bounds
"""

from __future__ import annotations

import math

import pytest

from recipe_converter.schemas.enums import NutritionConfidence
from recipe_converter.services.units.models import Ingredient, NutritionInfo
from recipe_converter.services.units.scaling import (
    calculate_scale_factor,
    clamp_servings,
    is_scalable_amount,
    scale_ingredient_amount,
    scale_ingredients,
    scale_nutrition,
)


pytestmark = pytest.mark.unit


class TestIsScalableAmount:
    """Tests for is_scalable_amount."""

    @pytest.mark.parametrize("amount", ["2", "1 1/2", "2-3", "a pinch"])
    def test_scalable(self, amount: str) -> None:
        """Should treat anything but blanks and known qualifiers as scalable."""
        assert is_scalable_amount(amount) is True

    @pytest.mark.parametrize(
        "amount",
        [None, "", "   ", "to taste", "To Taste", " pinch ", "handful", "as needed"],
    )
    def test_not_scalable(self, amount: str | None) -> None:
        """Should reject blanks and whole-string qualifiers."""
        assert is_scalable_amount(amount) is False


class TestScaleIngredientAmount:
    """Tests for scale_ingredient_amount."""

    def test_doubles_whole_number(self) -> None:
        """Should scale a plain number."""
        result = scale_ingredient_amount("2", 2)

        assert result.scaled_value == 4
        assert result.display_amount == "4"

    def test_mixed_number(self) -> None:
        """Should scale mixed numbers and show glyphs."""
        result = scale_ingredient_amount("1 1/2", 1.5)

        assert result.scaled_value == pytest.approx(2.25)
        assert result.display_amount == "2¼"

    def test_halving_fraction(self) -> None:
        """Should show halved fractions as glyphs."""
        assert scale_ingredient_amount("3/4", 0.5).display_amount == "⅜"

    def test_range_scales_both_ends(self) -> None:
        """Should scale both ends of a range and report the low end."""
        result = scale_ingredient_amount("2-3", 2)

        assert result.display_amount == "4-6"
        assert result.scaled_value == 4

    def test_range_with_spaces_and_fractions(self) -> None:
        """Should accept spaced ranges with fractional ends."""
        result = scale_ingredient_amount("1/2 - 1", 2)

        assert result.display_amount == "1-2"
        assert result.scaled_value == 1

    def test_surrounding_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert scale_ingredient_amount(" 2 ", 1.5).display_amount == "3"

    @pytest.mark.parametrize("amount", ["to taste", "pinch", None, "", "a pinch"])
    def test_unscalable_returns_none(self, amount: str | None) -> None:
        """Should return None for qualifiers and unparseable amounts."""
        result = scale_ingredient_amount(amount, 2)

        assert result.scaled_value is None
        assert result.display_amount is None

    @pytest.mark.parametrize(
        ("amount", "factor"),
        [("1e400", 2), ("9" * 400, 2), ("1e307", 99), ("1e307-2e307", 99)],
    )
    def test_overflowing_amount_returns_none(self, amount: str, factor: float) -> None:
        """Should not raise when the amount or its scaled value overflows."""
        result = scale_ingredient_amount(amount, factor)

        assert result.scaled_value is None
        assert result.display_amount is None

    def test_factor_one_keeps_value(self) -> None:
        """Should reformat but not change the value for factor 1."""
        result = scale_ingredient_amount("0.5", 1)

        assert result.scaled_value == 0.5
        assert result.display_amount == "½"


class TestScaleIngredients:
    """Tests for scale_ingredients."""

    def test_scales_and_keeps_originals(self) -> None:
        """Should keep the original amount alongside the scaled one."""
        ingredients = [Ingredient(id="a", text="sugar", amount="1", unit="cup")]

        (result,) = scale_ingredients(ingredients, 3)

        assert result.id == "a"
        assert result.text == "sugar"
        assert result.unit == "cup"
        assert result.amount == "1"
        assert result.original_amount == "1"
        assert result.scaled_amount == "3"
        assert result.was_scaled is True

    def test_non_scalable_not_marked_scaled(self) -> None:
        """Should not mark qualifiers as scaled."""
        ingredients = [Ingredient(text="salt", amount="to taste")]

        (result,) = scale_ingredients(ingredients, 2)

        assert result.scaled_amount is None
        assert result.original_amount == "to taste"
        assert result.was_scaled is False

    def test_factor_one_not_marked_scaled(self) -> None:
        """Should not mark anything as scaled for factor 1."""
        ingredients = [Ingredient(text="flour", amount="2", unit="cups")]

        (result,) = scale_ingredients(ingredients, 1)

        assert result.scaled_amount == "2"
        assert result.was_scaled is False

    def test_preserves_order_and_inputs(
        self,
        pancake_ingredients: list[Ingredient],
    ) -> None:
        """Should return one result per ingredient, in order, without edits."""
        before = list(pancake_ingredients)

        result = scale_ingredients(pancake_ingredients, 2)

        assert [item.id for item in result] == [item.id for item in before]
        assert pancake_ingredients == before
        assert [item.scaled_amount for item in result] == [
            "3",
            "2½",
            "6",
            "4",
            None,
            "2-4",
        ]


class TestScaleNutrition:
    """Tests for scale_nutrition."""

    def test_none_passthrough(self) -> None:
        """Should return None when there is no nutrition."""
        assert scale_nutrition(None, 2) is None

    def test_scales_and_preserves_unknowns(self) -> None:
        """Should scale known values and keep unknown ones as None."""
        result = scale_nutrition(NutritionInfo(calories=200, protein=None), 1.5)

        assert result is not None
        assert result.calories == 300
        assert result.protein is None

    def test_rounds_to_one_decimal(self) -> None:
        """Should round scaled values to one decimal, halves up."""
        result = scale_nutrition(NutritionInfo(fat=10, fiber=0.25, sugar=3), 1 / 3)

        assert result is not None
        assert result.fat == pytest.approx(3.3)
        assert result.fiber == pytest.approx(0.1)
        assert result.sugar == pytest.approx(1.0)

    def test_overflowing_value_unchanged(self) -> None:
        """Should keep values whose scaled result would overflow."""
        result = scale_nutrition(NutritionInfo(calories=1e308, protein=10), 10)

        assert result is not None
        assert result.calories == 1e308
        assert result.protein == 100

    def test_nan_value_unchanged(self) -> None:
        """Should pass NaN through without raising."""
        result = scale_nutrition(NutritionInfo(calories=math.nan), 1)

        assert result is not None
        assert result.calories is not None
        assert math.isnan(result.calories)

    def test_keeps_confidence_and_warnings(self) -> None:
        """Should carry non-numeric fields through unchanged."""
        info = NutritionInfo(
            calories=100,
            confidence=NutritionConfidence.LOW,
            warnings=("estimated",),
        )

        result = scale_nutrition(info, 2)

        assert result is not None
        assert result.confidence == NutritionConfidence.LOW
        assert result.warnings == ("estimated",)
        assert info.calories == 100


class TestCalculateScaleFactor:
    """Tests for calculate_scale_factor."""

    @pytest.mark.parametrize(
        ("original", "new", "expected"),
        [(4, 8, 2), (4, 4, 1), (4, 2, 0.5), (3, 4, 4 / 3)],
    )
    def test_ratio(self, original: int, new: int, expected: float) -> None:
        """Should divide new servings by original servings."""
        assert calculate_scale_factor(original, new) == pytest.approx(expected)

    @pytest.mark.parametrize(("original", "new"), [(0, 5), (4, 0), (-2, 4), (4, -1)])
    def test_non_positive_returns_one(self, original: int, new: int) -> None:
        """Should fall back to 1 for non-positive servings."""
        assert calculate_scale_factor(original, new) == 1


class TestClampServings:
    """Tests for clamp_servings."""

    @pytest.mark.parametrize(
        ("servings", "expected"),
        [(0, 1), (-3, 1), (1, 1), (12, 12), (99, 99), (150, 99)],
    )
    def test_default_bounds(self, servings: int, expected: int) -> None:
        """Should bound servings to 1..99 by default."""
        assert clamp_servings(servings) == expected

    def test_custom_bounds(self) -> None:
        """Should honor custom bounds."""
        assert clamp_servings(30, minimum=2, maximum=24) == 24
        assert clamp_servings(1, minimum=2, maximum=24) == 2
