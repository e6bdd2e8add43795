"""Exceptions for the recipe transform service."""

from __future__ import annotations


class RecipeTransformError(Exception):
    """Base exception for recipe transform errors."""


class IncompleteServingsError(RecipeTransformError):
    """Raised when only one side of the servings ratio is supplied.

    Scaling needs both the recipe's original serving count and the
    requested one; either both are given or neither.
    """

    def __init__(
        self,
        original_servings: int | None,
        servings: int | None,
    ) -> None:
        """Initialize the exception.

        Args:
            original_servings: Serving count the recipe was written for.
            servings: Requested serving count.
        """
        self.original_servings = original_servings
        self.servings = servings
        super().__init__(
            "Both 'originalServings' and 'servings' must be provided together, "
            "or neither"
        )
