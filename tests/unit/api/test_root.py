"""Unit tests for root and health endpoints."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from recipe_converter.api.v1.endpoints.health import health_check
from recipe_converter.api.v1.endpoints.root import root
from recipe_converter.schemas.enums import HealthStatus
from recipe_converter.services.units.registry import UNITS


pytestmark = pytest.mark.unit


def _settings(*, non_production: bool = True) -> MagicMock:
    settings = MagicMock()
    settings.app.name = "Recipe Converter Service"
    settings.app.version = "0.1.0"
    settings.APP_ENV = "test"
    settings.is_non_production = non_production
    settings.api.v1_prefix = "/api/v1/recipe-converter"
    return settings


class TestRootEndpoint:
    """Tests for root endpoint function."""

    async def test_returns_service_info(self) -> None:
        """Should return name, version and operational status."""
        result = await root(_settings())

        assert result.service == "Recipe Converter Service"
        assert result.version == "0.1.0"
        assert result.status == "operational"

    async def test_docs_url_in_non_production(self) -> None:
        """Should link the docs under the API prefix outside production."""
        result = await root(_settings())

        assert result.docs == "/api/v1/recipe-converter/docs"

    async def test_docs_disabled_in_production(self) -> None:
        """Should report docs as disabled in production."""
        result = await root(_settings(non_production=False))

        assert result.docs == "disabled"

    async def test_health_url_uses_prefix(self) -> None:
        """Should link the health endpoint under the API prefix."""
        result = await root(_settings())

        assert result.health == "/api/v1/recipe-converter/health"


class TestHealthEndpoint:
    """Tests for health_check endpoint function."""

    async def test_reports_healthy(self) -> None:
        """Should report healthy with the loaded unit count."""
        result = await health_check(_settings())

        assert result.status == HealthStatus.HEALTHY
        assert result.version == "0.1.0"
        assert result.environment == "test"
        assert result.unit_count == len(UNITS)
        assert result.timestamp is not None
