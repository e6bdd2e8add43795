"""Integration test fixtures.

Provides an application built from test settings and an async HTTP client
that drives it through the full middleware stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from recipe_converter.core.config import Settings, get_settings
from recipe_converter.core.config.settings import (
    ApiSettings,
    AppSettings,
    ConversionSettings,
    LoggingSettings,
)
from recipe_converter.factory import create_app
from recipe_converter.schemas.enums import UnitSystem


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


pytestmark = pytest.mark.integration


@pytest.fixture
def test_settings() -> Settings:
    """Create settings for the test environment."""
    return Settings(
        APP_ENV="test",
        app=AppSettings(
            name="test-app",
            version="0.0.1-test",
            debug=True,
        ),
        api=ApiSettings(
            cors_origins=["http://localhost:3000"],
        ),
        logging=LoggingSettings(
            level="DEBUG",
            format="json",
        ),
        conversion=ConversionSettings(
            default_system=UnitSystem.METRIC,
            min_servings=1,
            max_servings=24,
        ),
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create FastAPI app with test settings.

    Endpoints that read settings through the get_settings dependency are
    pointed at the same test settings passed to create_app().
    """
    application = create_app(test_settings)
    application.dependency_overrides[get_settings] = lambda: test_settings
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
