"""Unit tests for application factory.

Tests cover:
- create_app function
- Service creation from conversion settings
- Middleware setup
- Router setup
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_converter.core.config import Settings
from recipe_converter.core.config.settings import ApiSettings, ConversionSettings
from recipe_converter.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    TimingMiddleware,
)
from recipe_converter.factory import create_app
from recipe_converter.services.recipe_transform import RecipeTransformService


pytestmark = pytest.mark.unit


def _middleware_classes(app: FastAPI) -> list[type]:
    return [middleware.cls for middleware in app.user_middleware]


class TestCreateApp:
    """Tests for create_app function."""

    def test_creates_fastapi_instance(self) -> None:
        """Should create a FastAPI instance named after the settings."""
        settings = Settings(APP_ENV="local")

        app = create_app(settings)

        assert isinstance(app, FastAPI)
        assert app.title == settings.app.name
        assert app.version == settings.app.version

    def test_stores_settings_in_state(self) -> None:
        """Should store settings in app state."""
        settings = Settings(APP_ENV="local")

        app = create_app(settings)

        assert app.state.settings is settings

    def test_creates_transform_service(self) -> None:
        """Should create the transform service with the configured bounds."""
        settings = Settings(
            APP_ENV="local",
            conversion=ConversionSettings(min_servings=2, max_servings=12),
        )

        app = create_app(settings)

        service = app.state.transform_service
        assert isinstance(service, RecipeTransformService)
        assert service.resolve_scale_factor(4, 40) == 3
        assert service.resolve_scale_factor(4, 1) == pytest.approx(0.5)

    def test_docs_under_prefix_outside_production(self) -> None:
        """Should serve docs under the API prefix outside production."""
        app = create_app(Settings(APP_ENV="local"))

        assert app.docs_url == "/api/v1/recipe-converter/docs"
        assert app.openapi_url == "/api/v1/recipe-converter/openapi.json"

    def test_disables_docs_in_production(self) -> None:
        """Should disable docs endpoints in production."""
        app = create_app(Settings(APP_ENV="production"))

        assert app.docs_url is None
        assert app.redoc_url is None
        assert app.openapi_url is None

    def test_uses_default_settings(self) -> None:
        """Should fall back to get_settings when no settings are passed."""
        app = create_app()

        assert app.state.settings.APP_ENV == "test"


class TestSetupMiddleware:
    """Tests for middleware setup."""

    def test_adds_core_middleware(self) -> None:
        """Should add request ID, timing and logging middleware."""
        app = create_app(Settings(APP_ENV="local"))

        classes = _middleware_classes(app)
        assert RequestIDMiddleware in classes
        assert TimingMiddleware in classes
        assert LoggingMiddleware in classes

    def test_request_id_runs_first(self) -> None:
        """Should put the request ID middleware outermost."""
        app = create_app(Settings(APP_ENV="local"))

        assert _middleware_classes(app)[0] is RequestIDMiddleware

    def test_cors_only_with_origins(self) -> None:
        """Should add CORS middleware only when origins are configured."""
        without = create_app(Settings(APP_ENV="local", api=ApiSettings(cors_origins=[])))
        with_origins = create_app(
            Settings(
                APP_ENV="local",
                api=ApiSettings(cors_origins=["http://localhost:3000"]),
            )
        )

        assert CORSMiddleware not in _middleware_classes(without)
        assert CORSMiddleware in _middleware_classes(with_origins)


class TestSetupRouters:
    """Tests for router setup."""

    @pytest.mark.parametrize(
        "path",
        [
            "/api/v1/recipe-converter/",
            "/api/v1/recipe-converter/health",
            "/api/v1/recipe-converter/units",
            "/api/v1/recipe-converter/units/normalize",
            "/api/v1/recipe-converter/units/convert",
            "/api/v1/recipe-converter/temperatures/convert",
            "/api/v1/recipe-converter/recipes/scale",
            "/api/v1/recipe-converter/recipes/transform",
        ],
    )
    def test_routes_mounted_under_prefix(self, path: str) -> None:
        """Should mount every endpoint under the v1 prefix."""
        app = create_app(Settings(APP_ENV="local"))

        paths = {getattr(route, "path", None) for route in app.routes}
        assert path in paths
