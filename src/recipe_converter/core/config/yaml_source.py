"""YAML settings source layered by deployment environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic_settings import PydanticBaseSettingsSource


if TYPE_CHECKING:
    from collections.abc import Iterator

    from pydantic.fields import FieldInfo


# Overrides the config directory location (useful for installed wheels)
CONFIG_DIR_ENV_VAR = "RECIPE_CONVERTER_CONFIG_DIR"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``.

    Nested mappings are merged key by key; any other value in ``override``
    replaces the one in ``base``.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def default_config_dir() -> Path:
    """Locate ``config/`` at the project root.

    src/recipe_converter/core/config/yaml_source.py -> <root>/config
    """
    override = os.getenv(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[4] / "config"


def _iter_yaml_files(directory: Path) -> Iterator[Path]:
    if directory.is_dir():
        yield from sorted(directory.glob("*.yaml"))


def load_layered_yaml(config_dir: Path, app_env: str) -> dict[str, Any]:
    """Load ``base/*.yaml`` then merge ``environments/<app_env>/*.yaml`` on top.

    Files inside a layer are merged in name order.
    """
    merged: dict[str, Any] = {}
    layers = (config_dir / "base", config_dir / "environments" / app_env)
    for layer in layers:
        for path in _iter_yaml_files(layer):
            with path.open(encoding="utf-8") as f:
                merged = deep_merge(merged, yaml.safe_load(f) or {})
    return merged


class MultiYamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the layered YAML files.

    ``APP_ENV`` (default "development") selects the environment layer.
    """

    def __init__(
        self,
        settings_cls: type[Any],
        config_dir: Path | None = None,
    ) -> None:
        super().__init__(settings_cls)
        self._app_env = os.getenv("APP_ENV", "development")
        self._data = load_layered_yaml(config_dir or default_config_dir(), self._app_env)

    def get_field_value(
        self,
        field: FieldInfo,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        value = self._data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, Any]:
        return self._data
