"""Reference-precision conversions backed by :mod:`pint`.

The legacy tables round several constants (1 lb = 453.6 g, 1 hp = 745.699872 W).
This registry describes the same units with their standard definitions so
callers can opt into the precise values without changing unit names.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Iterable

from pint import UnitRegistry
from pint.errors import DimensionalityError, UndefinedUnitError

from .units import UnitDefinition, UnitKind

_CUSTOM_DEFINITIONS: tuple[str, ...] = (
    "us_fluid_barrel = 31.5 * gallon",
    "uk_liquid_gallon = 4.54609 * liter",
    "international_acre = 4046.8564224 * meter ** 2",
    "international_btu = 1055.05585262 * joule",
    "inch_of_mercury_column = 3386.389 * pascal",
    "inch_of_water_column = 249.08891 * pascal",
    "millimeter_of_water_column = 9.80665 * pascal",
)


class ReferenceUnitError(RuntimeError):
    """Raised when a table entry has no usable pint expression."""


def _build_registry() -> UnitRegistry:
    registry = UnitRegistry(autoconvert_offset_to_baseunit=True)
    for definition in _CUSTOM_DEFINITIONS:
        registry.define(definition)
    return registry


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """Return the process-wide :class:`~pint.UnitRegistry`."""

    return _build_registry()


def _to_reference_base(unit: UnitDefinition, value: float, base: UnitDefinition):
    registry = get_registry()
    if unit.kind is UnitKind.AFFINE:
        return registry.Quantity(value, unit.reference).to(base.reference)
    scale = registry.parse_expression(unit.reference)
    if unit.kind is UnitKind.RECIPROCAL:
        if value == 0:
            return registry.Quantity(math.inf, base.reference)
        return (1 / (value * scale)).to(base.reference)
    return (value * scale).to(base.reference)


def _from_reference_base(quantity, unit: UnitDefinition) -> float:
    registry = get_registry()
    if unit.kind is UnitKind.AFFINE:
        return float(quantity.to(unit.reference).magnitude)
    scale = registry.parse_expression(unit.reference)
    if unit.kind is UnitKind.RECIPROCAL:
        if quantity.magnitude == 0:
            return math.inf
        return float((1 / quantity / scale).to("dimensionless").magnitude)
    return float((quantity / scale).to("dimensionless").magnitude)


def reference_convert(
    value: float, source: UnitDefinition, target: UnitDefinition, base: UnitDefinition
) -> float:
    """Convert ``value`` from ``source`` to ``target`` with reference constants.

    ``base`` is the dimension's base unit; every conversion passes through it
    so reciprocal units compose the same way as in the legacy tables.
    """

    try:
        quantity = _to_reference_base(source, value, base)
        return _from_reference_base(quantity, target)
    except (UndefinedUnitError, DimensionalityError) as exc:
        raise ReferenceUnitError(
            f"Reference definition for '{source.name}' -> '{target.name}' failed: {exc}"
        ) from exc


def iter_custom_units() -> Iterable[str]:
    """Yield the custom unit definitions injected into the registry."""

    return tuple(_CUSTOM_DEFINITIONS)


__all__ = ["ReferenceUnitError", "get_registry", "iter_custom_units", "reference_convert"]
