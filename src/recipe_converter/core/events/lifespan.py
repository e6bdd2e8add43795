"""Application lifespan event handlers.

Startup configures logging and reports the loaded unit table; there are no
connections to open or close.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipe_converter.core.config import Settings, get_settings
from recipe_converter.observability.logging import get_logger, setup_logging
from recipe_converter.services.units.registry import UNITS


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


logger = get_logger(__name__)


def _startup(settings: Settings) -> None:
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        unit_count=len(UNITS),
        default_system=settings.conversion.default_system,
    )


def _shutdown(settings: Settings) -> None:
    logger.info("Shutting down application", app_name=settings.app.name)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Run startup before serving and shutdown after."""
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    _startup(settings)
    try:
        yield
    finally:
        _shutdown(settings)
