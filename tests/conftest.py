"""Shared test fixtures for the Recipe Converter service tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_converter.core.config import get_settings
from recipe_converter.services.units import Ingredient, NutritionInfo


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _test_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Load the test configuration layer and reset cached settings."""
    monkeypatch.setenv("APP_ENV", "test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def pancake_ingredients() -> list[Ingredient]:
    """Ingredient lines of a four-serving pancake recipe."""
    return [
        Ingredient(id="1", text="flour", amount="1 1/2", unit="cups"),
        Ingredient(id="2", text="milk", amount="1 1/4", unit="cup"),
        Ingredient(id="3", text="butter", amount="3", unit="tbsp"),
        Ingredient(id="4", text="eggs", amount="2", unit=None),
        Ingredient(id="5", text="salt", amount="to taste", unit=None),
        Ingredient(id="6", text="blueberries", amount="1-2", unit="cups"),
    ]


@pytest.fixture
def pancake_nutrition() -> NutritionInfo:
    """Nutrition totals for the pancake recipe."""
    return NutritionInfo(
        calories=1200,
        protein=32.5,
        carbs=180,
        fat=40,
        fiber=None,
        sugar=24,
    )
