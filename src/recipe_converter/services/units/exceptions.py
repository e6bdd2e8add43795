"""Exceptions for the unit conversion engine.

The engine itself never raises for user input: unparseable amounts and
unknown units come back as ``None`` or as unchanged passthrough results.
These exceptions only guard the static unit table.
"""

from __future__ import annotations


class UnitsError(Exception):
    """Base exception for unit engine errors."""

    def __init__(self, message: str, unit: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            unit: Optional unit key related to the error.
        """
        self.unit = unit
        super().__init__(message)


class UnitRegistryError(UnitsError):
    """Raised when the static unit table is inconsistent.

    This can occur when:
    - Two definitions claim the same alias (case-insensitive)
    - A category has no base unit, or more than one
    - A preferred display unit is missing from the table
    """

    def __init__(
        self,
        message: str,
        unit: str | None = None,
        alias: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            unit: Optional unit key that failed validation.
            alias: Optional alias that caused the conflict.
        """
        self.alias = alias
        super().__init__(message, unit)
