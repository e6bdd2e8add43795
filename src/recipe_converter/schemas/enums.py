"""Enumeration types for recipe converter schemas.

This module contains all enum definitions used across the API schemas
and the unit conversion engine.
"""

from __future__ import annotations

from enum import StrEnum


class UnitSystem(StrEnum):
    """Measurement conventions a recipe can be displayed in."""

    IMPERIAL = "imperial"
    METRIC = "metric"


class UnitCategory(StrEnum):
    """Physical quantity a unit measures.

    Temperature is rewritten inside instruction text rather than
    converted through base multipliers.
    """

    VOLUME = "volume"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"


class NutritionConfidence(StrEnum):
    """Confidence reported by the external nutrition estimator."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class HealthStatus(StrEnum):
    """Health check status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
