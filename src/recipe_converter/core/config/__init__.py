"""Configuration module with YAML and environment variable support."""

from .settings import ConversionSettings, Settings, get_settings


__all__ = [
    "ConversionSettings",
    "Settings",
    "get_settings",
]
