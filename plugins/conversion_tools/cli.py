"""Command line interface for the conversion tools."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .core import (
    CONSTANT_SETS,
    ConversionError,
    Dimension,
    convert,
    describe,
    list_dimensions,
    list_units,
)


def _print(payload: Any, *, stream=None) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True), file=stream or sys.stdout)


def _fail(message: str, **extra: Any) -> None:
    _print({"error": message, **extra}, stream=sys.stderr)
    raise SystemExit(2)


def command_dimensions(args: argparse.Namespace) -> None:
    _print({"dimensions": list_dimensions()})


def command_units(args: argparse.Namespace) -> None:
    _print({"dimension": args.dimension, "units": list_units(args.dimension)})


def command_convert(args: argparse.Namespace) -> None:
    outcome = convert(
        args.dimension,
        args.from_unit,
        args.to_unit,
        args.value,
        constants=args.constants,
    )
    if not outcome.ok:
        _fail(outcome.message, units=list(outcome.units))
    _print(describe(outcome, sig_figs=args.sig_figs, decimals=args.decimals))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="FixTools unit conversion")
    subparsers = parser.add_subparsers(dest="command", required=True)
    dimension_help = "One of: " + ", ".join(item.value for item in Dimension)

    dimensions_parser = subparsers.add_parser("dimensions", help="List supported dimensions")
    dimensions_parser.set_defaults(func=command_dimensions)

    units_parser = subparsers.add_parser("units", help="List the units of a dimension")
    units_parser.add_argument("--dimension", required=True, help=dimension_help)
    units_parser.set_defaults(func=command_units)

    convert_parser = subparsers.add_parser("convert", help="Convert a value between two units")
    convert_parser.add_argument("--dimension", required=True, help=dimension_help)
    convert_parser.add_argument("--from", dest="from_unit", required=True, help="Source unit name")
    convert_parser.add_argument("--to", dest="to_unit", required=True, help="Target unit name")
    convert_parser.add_argument(
        "--constants", default="legacy", choices=list(CONSTANT_SETS), help="Constant set"
    )
    precision = convert_parser.add_mutually_exclusive_group()
    precision.add_argument("--sig-figs", dest="sig_figs", type=int, help="Significant figures")
    precision.add_argument("--decimals", type=int, help="Digits after the decimal point")
    convert_parser.add_argument("value", type=float, help="Value to convert")
    convert_parser.set_defaults(func=command_convert)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ConversionError as exc:
        _fail(str(exc))


if __name__ == "__main__":
    main()
