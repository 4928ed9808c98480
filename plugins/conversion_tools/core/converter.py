"""Table-driven unit conversion.

Every conversion resolves both unit names in the dimension's alias table,
maps the value onto the base unit and from there onto the target unit.
Finite values are evaluated with exact rationals and rounded once; NaN and
infinities take the plain float path so they propagate as IEEE 754 values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, List, Optional, Tuple, Union

from .reference import reference_convert
from .units import DIMENSIONS, Dimension, DimensionTable, UnitDefinition, UnitKind

CONSTANT_SETS = ("legacy", "reference")

Number = Union[Fraction, float]


class ConversionError(Exception):
    """Base exception for conversion failures."""


class UnknownDimensionError(ConversionError):
    """Raised when a dimension id is not one of the supported dimensions."""


class UnrecognizedUnitError(ConversionError):
    """Raised when an :class:`UnrecognizedUnit` result is unwrapped."""

    def __init__(self, dimension: Dimension, units: Tuple[str, ...]):
        names = ", ".join(f"'{unit}'" for unit in units)
        super().__init__(f"Unrecognized {dimension.value} unit(s): {names}.")
        self.dimension = dimension
        self.units = units


class BadInputError(ConversionError):
    """Raised when options passed alongside a conversion are invalid."""


@dataclass(frozen=True, slots=True)
class Conversion:
    """Successful conversion outcome."""

    dimension: Dimension
    from_unit: str
    to_unit: str
    value: float
    result: float
    constants: str = "legacy"

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> float:
        return self.result


@dataclass(frozen=True, slots=True)
class UnrecognizedUnit:
    """Outcome returned when either unit name is missing from the table."""

    dimension: Dimension
    units: Tuple[str, ...]

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(UnrecognizedUnitError(self.dimension, self.units))

    def unwrap(self) -> float:
        raise UnrecognizedUnitError(self.dimension, self.units)


ConversionOutcome = Union[Conversion, UnrecognizedUnit]


def get_dimension(dimension: Dimension | str) -> DimensionTable:
    try:
        key = Dimension(dimension)
    except ValueError as exc:
        raise UnknownDimensionError(f"Unknown dimension '{dimension}'.") from exc
    return DIMENSIONS[key]


def resolve_unit(dimension: Dimension | str, name: str) -> Optional[UnitDefinition]:
    """Return the unit ``name`` denotes in ``dimension``, or ``None``."""

    return get_dimension(dimension).resolve(name)


def list_dimensions() -> List[Dict[str, object]]:
    return [
        {
            "id": table.dimension.value,
            "label": table.label,
            "base_unit": table.base_unit,
            "unit_count": len(table.units),
        }
        for table in DIMENSIONS.values()
    ]


def list_units(dimension: Dimension | str) -> List[Dict[str, object]]:
    table = get_dimension(dimension)
    return [
        {
            "name": unit.name,
            "label": unit.label,
            "aliases": list(unit.aliases),
            "kind": unit.kind.value,
        }
        for unit in table.units
    ]


def _exact(value: float) -> Number:
    if isinstance(value, Fraction):
        return value
    if math.isfinite(value):
        return Fraction(value)
    return float(value)


def _as_float(value: float) -> float:
    try:
        return float(value)
    except (OverflowError, TypeError, ValueError) as exc:
        raise BadInputError(f"Value does not fit in a float: {exc}.") from exc


def _to_base(unit: UnitDefinition, value: Number) -> Number:
    if unit.kind is UnitKind.RECIPROCAL:
        if value == 0:
            return math.inf
        return unit.factor / value
    if unit.kind is UnitKind.AFFINE:
        return value * unit.factor + unit.offset
    return value * unit.factor


def _from_base(unit: UnitDefinition, base: Number) -> Number:
    if unit.kind is UnitKind.RECIPROCAL:
        if base == 0:
            return math.inf
        return unit.factor / base
    if unit.kind is UnitKind.AFFINE:
        return (base - unit.offset) / unit.factor
    return base / unit.factor


def convert_units(value: float, source: UnitDefinition, target: UnitDefinition) -> float:
    """Convert ``value`` between two resolved units of the same dimension."""

    if source is target:
        return float(value)
    result = float(_from_base(target, _to_base(source, _exact(value))))
    if result == 0 and value == 0:
        # Rationals have no negative zero.
        return math.copysign(0.0, value)
    return result


def convert(
    dimension: Dimension | str,
    from_unit: str,
    to_unit: str,
    value: float,
    *,
    constants: str = "legacy",
) -> ConversionOutcome:
    """Convert ``value`` from ``from_unit`` to ``to_unit`` within ``dimension``.

    Returns a :class:`Conversion` on success. When either name is missing from
    the dimension's alias table an :class:`UnrecognizedUnit` is returned
    instead; nothing is coerced to ``0`` or ``NaN``.
    """

    if constants not in CONSTANT_SETS:
        raise BadInputError(
            f"Constants must be one of {', '.join(CONSTANT_SETS)}; got '{constants}'."
        )
    value = _as_float(value)
    table = get_dimension(dimension)
    source = table.resolve(from_unit)
    target = table.resolve(to_unit)
    missing = tuple(
        name for name, unit in ((from_unit, source), (to_unit, target)) if unit is None
    )
    if missing:
        return UnrecognizedUnit(dimension=table.dimension, units=tuple(dict.fromkeys(missing)))

    if constants == "reference" and source is not target:
        base = table.resolve(table.base_unit)
        result = reference_convert(value, source, target, base)
    else:
        result = convert_units(value, source, target)
    return Conversion(
        dimension=table.dimension,
        from_unit=from_unit,
        to_unit=to_unit,
        value=value,
        result=result,
        constants=constants,
    )


__all__ = [
    "CONSTANT_SETS",
    "BadInputError",
    "Conversion",
    "ConversionError",
    "ConversionOutcome",
    "UnknownDimensionError",
    "UnrecognizedUnit",
    "UnrecognizedUnitError",
    "convert",
    "convert_units",
    "get_dimension",
    "list_dimensions",
    "list_units",
    "resolve_unit",
]
