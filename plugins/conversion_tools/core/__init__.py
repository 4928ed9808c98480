"""Facade for the conversion tools core."""

from __future__ import annotations

from .converter import (
    CONSTANT_SETS,
    BadInputError,
    Conversion,
    ConversionError,
    ConversionOutcome,
    UnknownDimensionError,
    UnrecognizedUnit,
    UnrecognizedUnitError,
    convert,
    get_dimension,
    list_dimensions,
    list_units,
    resolve_unit,
)
from .formatting import describe, format_value
from .units import DIMENSIONS, Dimension, UnitDefinition, UnitKind


def catalogue() -> dict[str, object]:
    """Return every dimension together with its units."""

    dimensions = list_dimensions()
    return {
        "dimensions": dimensions,
        "units": {item["id"]: list_units(item["id"]) for item in dimensions},
    }


__all__ = [
    "CONSTANT_SETS",
    "DIMENSIONS",
    "BadInputError",
    "Conversion",
    "ConversionError",
    "ConversionOutcome",
    "Dimension",
    "UnitDefinition",
    "UnitKind",
    "UnknownDimensionError",
    "UnrecognizedUnit",
    "UnrecognizedUnitError",
    "catalogue",
    "convert",
    "describe",
    "format_value",
    "get_dimension",
    "list_dimensions",
    "list_units",
    "resolve_unit",
]
