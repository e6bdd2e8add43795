"""Unit registry with case-insensitive alias resolution.

The unit table is resolved once at import time: Pint supplies each unit's
multiplier to its category base unit, and a read-only alias index maps
every lowercase alias to its definition. Lookups never raise for user
input; unknown units come back as ``None``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

import pint

from recipe_converter.services.units.constants import (
    BASE_PINT_UNITS,
    MULTIPLIER_PRECISION,
    PREFERRED_UNITS,
    SYSTEM_DISPLAY_NAMES,
    UNIT_TABLE,
)
from recipe_converter.services.units.exceptions import UnitRegistryError
from recipe_converter.services.units.models import UnitDefinition


if TYPE_CHECKING:
    from collections.abc import Mapping

    from recipe_converter.schemas.enums import UnitCategory, UnitSystem
    from recipe_converter.services.units.constants import UnitSpec


# Module-level unit registry (only used while building the table)
_ureg: pint.UnitRegistry[pint.Quantity[float]] = pint.UnitRegistry()


def _resolve_multiplier(key: str, spec: UnitSpec) -> float:
    """Size of one ``key`` unit in its category base unit, via Pint."""
    base_unit = BASE_PINT_UNITS.get(spec.category)
    if base_unit is None:
        msg = f"Category {spec.category.value} has no base unit"
        raise UnitRegistryError(msg, unit=key)

    try:
        magnitude = _ureg.Quantity(1, spec.pint_unit).to(base_unit).magnitude
    except pint.PintError as e:
        msg = f"Pint cannot convert {spec.pint_unit} to {base_unit}: {e}"
        raise UnitRegistryError(msg, unit=key) from e

    return round(float(magnitude), MULTIPLIER_PRECISION)


def _build_units() -> dict[str, UnitDefinition]:
    return {
        key: UnitDefinition(
            name=spec.name,
            symbol=spec.symbol,
            aliases=frozenset(alias.lower() for alias in spec.aliases),
            category=spec.category,
            system=spec.system,
            base_multiplier=_resolve_multiplier(key, spec),
        )
        for key, spec in UNIT_TABLE.items()
    }


def _build_alias_index(
    units: Mapping[str, UnitDefinition],
) -> dict[str, UnitDefinition]:
    """Index definitions by lowercase alias.

    Raises:
        UnitRegistryError: If two definitions share an alias.
    """
    index: dict[str, UnitDefinition] = {}
    for key, unit in units.items():
        for alias in unit.aliases:
            existing = index.get(alias)
            if existing is not None and existing is not unit:
                msg = f"Alias '{alias}' maps to both {existing.name} and {unit.name}"
                raise UnitRegistryError(msg, unit=key, alias=alias)
            index[alias] = unit
    return index


def _validate_units(units: Mapping[str, UnitDefinition]) -> None:
    """Check the base-unit and preferred-unit invariants.

    Raises:
        UnitRegistryError: If a category lacks exactly one metric base unit,
            or a preferred display unit is not in the table.
    """
    for category in BASE_PINT_UNITS:
        base_units = [
            key
            for key, unit in units.items()
            if unit.category == category and unit.base_multiplier == 1
        ]
        if len(base_units) != 1:
            msg = (
                f"Category {category.value} needs exactly one base unit, "
                f"found {len(base_units)}"
            )
            raise UnitRegistryError(msg)

    for systems in PREFERRED_UNITS.values():
        for system, keys in systems.items():
            for key in keys:
                unit = units.get(key)
                if unit is None or unit.system != system:
                    msg = f"Preferred unit '{key}' is not a {system.value} unit"
                    raise UnitRegistryError(msg, unit=key)


UNITS: Final[Mapping[str, UnitDefinition]] = MappingProxyType(_build_units())
_ALIAS_INDEX: Final[Mapping[str, UnitDefinition]] = MappingProxyType(
    _build_alias_index(UNITS)
)
_validate_units(UNITS)


def normalize_unit(value: str | None) -> UnitDefinition | None:
    """Resolve a free-form unit string to its definition.

    Lookup is case-insensitive and ignores surrounding whitespace. When
    there is no exact alias match, a single trailing "s" is dropped and the
    lookup retried. That plural rule is deliberately naive: irregular
    plurals are only recognized when listed as aliases.

    Args:
        value: Unit as typed by a user, e.g. "Tbsp" or "cups".

    Returns:
        The matching definition, or None if the unit is not recognized.
    """
    if not value:
        return None

    normalized = value.strip().lower()

    unit = _ALIAS_INDEX.get(normalized)
    if unit is not None:
        return unit

    if normalized.endswith("s"):
        return _ALIAS_INDEX.get(normalized[:-1])

    return None


def is_recognized_unit(value: str | None) -> bool:
    """Check if a unit string resolves to a known definition."""
    return normalize_unit(value) is not None


def get_unit(key: str) -> UnitDefinition:
    """Get a definition by its table key (e.g. "fl oz").

    Raises:
        KeyError: If the key is not in the unit table.
    """
    return UNITS[key]


def get_units_for_system(
    category: UnitCategory,
    system: UnitSystem,
) -> list[UnitDefinition]:
    """List definitions in a category and system, in table order."""
    return [
        unit
        for unit in UNITS.values()
        if unit.category == category and unit.system == system
    ]


def get_system_display_name(system: UnitSystem) -> str:
    """Human-readable label for a unit system."""
    return SYSTEM_DISPLAY_NAMES[system]
