"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application from settings
- Creates the recipe transform service
- Sets up the middleware stack
- Registers exception handlers
- Mounts API routers
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from recipe_converter.api.v1.router import router as v1_router
from recipe_converter.core.config import Settings, get_settings
from recipe_converter.core.events.lifespan import lifespan
from recipe_converter.core.exceptions import setup_exception_handlers
from recipe_converter.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    TimingMiddleware,
)
from recipe_converter.services.recipe_transform.service import RecipeTransformService


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    prefix = settings.api.v1_prefix
    docs_enabled = settings.is_non_production

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description=(
            "Recipe Converter Service - unit conversion and serving scaling "
            "for recipe ingredients, nutrition and instructions"
        ),
        lifespan=lifespan,
        docs_url=f"{prefix}/docs" if docs_enabled else None,
        redoc_url=f"{prefix}/redoc" if docs_enabled else None,
        openapi_url=f"{prefix}/openapi.json" if docs_enabled else None,
        default_response_class=ORJSONResponse,
        debug=settings.app.debug,
    )

    app.state.settings = settings
    app.state.transform_service = RecipeTransformService(
        min_servings=settings.conversion.min_servings,
        max_servings=settings.conversion.max_servings,
    )

    setup_exception_handlers(app)

    # Order matters - first added = last executed
    _setup_middleware(app, settings)

    _setup_routers(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Order from request perspective:
    1. RequestIDMiddleware (adds request ID to logs and response)
    2. TimingMiddleware (measures request time)
    3. LoggingMiddleware (logs requests/responses)
    4. GZipMiddleware (compresses responses)
    5. CORSMiddleware (handles CORS, only when origins are configured)
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time"],
        )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(LoggingMiddleware)

    app.add_middleware(TimingMiddleware)

    app.add_middleware(RequestIDMiddleware)


def _setup_routers(app: FastAPI, settings: Settings) -> None:
    """Mount API routers under the configured v1 prefix."""
    app.include_router(v1_router, prefix=settings.api.v1_prefix)
