"""Static unit tables for the conversion tools.

Every dimension maps its units onto a single base unit. Factors are stored
as exact rationals built from the decimal literals the site has always used,
so a conversion is rounded to ``float`` exactly once.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


class Dimension(str, Enum):
    """Physical quantities supported by the converter."""

    MASS = "mass"
    VOLUME = "volume"
    AREA = "area"
    BIT_BYTE = "bitByte"
    POWER = "power"
    TIME = "time"
    TEMPERATURE = "temperature"
    PRESSURE = "pressure"
    LENGTH = "length"
    ENERGY = "energy"
    SPEED = "speed"
    FUEL_ECONOMY = "fuelEconomy"
    PLANE_ANGLE = "planeAngle"


class UnitKind(str, Enum):
    LINEAR = "linear"
    AFFINE = "affine"
    RECIPROCAL = "reciprocal"


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """A unit and its mapping onto the dimension's base unit.

    ``linear``: ``base = value * factor``
    ``affine``: ``base = value * factor + offset``
    ``reciprocal``: ``base = factor / value``
    """

    name: str
    label: str
    aliases: Tuple[str, ...]
    factor: Fraction
    reference: str
    kind: UnitKind = UnitKind.LINEAR
    offset: Fraction = Fraction(0)


@dataclass(frozen=True, slots=True)
class DimensionTable:
    dimension: Dimension
    label: str
    base_unit: str
    units: Tuple[UnitDefinition, ...]
    aliases: Mapping[str, UnitDefinition]

    def resolve(self, name: str) -> Optional[UnitDefinition]:
        return self.aliases.get(name)


def _q(text: str) -> Fraction:
    return Fraction(text)


def _per(text: str) -> Fraction:
    """Factor of a unit of which ``text`` make up one base unit."""

    return 1 / Fraction(text)


_PI = Fraction(math.pi)


def _unit(
    name: str,
    label: str,
    factor: Fraction | int,
    reference: str,
    *aliases: str,
    kind: UnitKind = UnitKind.LINEAR,
    offset: Fraction | int = 0,
) -> UnitDefinition:
    return UnitDefinition(
        name=name,
        label=label,
        aliases=(name, *aliases),
        factor=Fraction(factor),
        reference=reference,
        kind=kind,
        offset=Fraction(offset),
    )


_MASS = (
    _unit("gram", "Gram", 1, "gram", "g"),
    _unit("kilogram", "Kilogram", 1000, "kilogram", "kg"),
    _unit("milligram", "Milligram", _q("0.001"), "milligram", "mg"),
    _unit("pounds", "Pound", _q("453.6"), "pound", "pound", "lb"),
)

_VOLUME = (
    _unit("cubicMeter", "Cubic meter", 1000, "meter ** 3", "cubic meter", "m3"),
    _unit("liter", "Liter", 1, "liter", "litre", "L"),
    _unit("milliliter", "Milliliter", _q("0.001"), "milliliter", "millilitre", "ml"),
    _unit(
        "cubicCentimeter",
        "Cubic centimeter",
        _q("0.001"),
        "centimeter ** 3",
        "cubic centimeter",
        "cc",
        "cm3",
    ),
    _unit("cubicDecimeter", "Cubic decimeter", 1, "decimeter ** 3", "cubic decimeter", "dm3"),
    _unit(
        "cubicKilometer",
        "Cubic kilometer",
        10**12,
        "kilometer ** 3",
        "cubic kilometer",
        "km3",
    ),
    _unit("cubicInch", "Cubic inch", _q("0.0163871"), "inch ** 3", "cubic inch", "in3"),
    _unit("cubicFoot", "Cubic foot", _q("28.3168"), "foot ** 3", "cubic foot", "ft3"),
    _unit("cubicYard", "Cubic yard", _q("764.555"), "yard ** 3", "cubic yard", "yd3"),
    _unit(
        "usFluidOunce",
        "US fluid ounce",
        _q("0.0295735"),
        "fluid_ounce",
        "US fluid ounce",
        "fl oz US",
    ),
    _unit("usCup", "US cup", _q("0.236588"), "cup", "US cup", "cup US"),
    _unit("usPint", "US pint", _q("0.473176"), "pint", "US pint", "pt US"),
    _unit("usQuart", "US quart", _q("0.946353"), "quart", "US quart", "qt US"),
    _unit("usGallon", "US gallon", _q("3.78541"), "gallon", "US gallon", "gallon", "gal US"),
    _unit("usBarrel", "US barrel", _q("119.24"), "us_fluid_barrel", "US barrel", "bbl"),
    _unit("teaspoon", "Teaspoon", _q("0.00492892"), "teaspoon", "tsp"),
    _unit("tablespoon", "Tablespoon", _q("0.0147868"), "tablespoon", "tbsp"),
    _unit(
        "imperialFluidOunce",
        "Imperial fluid ounce",
        _q("0.0284131"),
        "uk_liquid_gallon / 160",
        "Imperial fluid ounce",
        "fl oz UK",
    ),
    _unit(
        "imperialCup",
        "Imperial cup",
        _q("0.284131"),
        "uk_liquid_gallon / 16",
        "Imperial cup",
        "cup UK",
    ),
    _unit(
        "imperialPint",
        "Imperial pint",
        _q("0.568261"),
        "uk_liquid_gallon / 8",
        "Imperial pint",
        "pt UK",
    ),
    _unit(
        "imperialQuart",
        "Imperial quart",
        _q("1.13652"),
        "uk_liquid_gallon / 4",
        "Imperial quart",
        "qt UK",
    ),
    _unit(
        "imperialGallon",
        "Imperial gallon",
        _q("4.54609"),
        "uk_liquid_gallon",
        "Imperial gallon",
        "gal UK",
    ),
)

_AREA = (
    _unit(
        "squareMillimeter",
        "Square millimeter",
        _q("0.000001"),
        "millimeter ** 2",
        "square millimeter",
        "mm2",
        "mm²",
    ),
    _unit(
        "squareCentimeter",
        "Square centimeter",
        _q("0.0001"),
        "centimeter ** 2",
        "square centimeter",
        "cm2",
        "cm²",
    ),
    _unit("squareMeter", "Square meter", 1, "meter ** 2", "square meter", "meter", "m2", "m²"),
    _unit(
        "squareKilometer",
        "Square kilometer",
        10**6,
        "kilometer ** 2",
        "square kilometer",
        "kilometer",
        "km2",
        "km²",
    ),
    _unit("hectare", "Hectare", 10**4, "hectare", "ha"),
    _unit("are", "Are", 100, "are", "a"),
    _unit(
        "squareInch",
        "Square inch",
        _q("0.00064516"),
        "inch ** 2",
        "square inch",
        "in2",
        "in²",
    ),
    _unit(
        "squareFoot",
        "Square foot",
        _q("0.092903"),
        "foot ** 2",
        "square foot",
        "foot",
        "ft2",
        "ft²",
    ),
    _unit(
        "squareYard",
        "Square yard",
        _q("0.836127"),
        "yard ** 2",
        "square yard",
        "yard",
        "yd2",
        "yd²",
    ),
    _unit("acre", "Acre", _q("4046.86"), "international_acre"),
    _unit(
        "squareMile",
        "Square mile",
        _q("2589988.11"),
        "mile ** 2",
        "square mile",
        "mile",
        "mi2",
        "mi²",
    ),
)

_BIT_BYTE = (
    _unit("bit", "Bit", 1, "bit", "b"),
    _unit("byte", "Byte", 8, "byte", "B"),
    _unit("nibble", "Nibble", 4, "4 * bit"),
    _unit("kilobyte", "Kilobyte", 8 * 10**3, "kilobyte", "kB", "KB"),
    _unit("megabyte", "Megabyte", 8 * 10**6, "megabyte", "MB"),
    _unit("gigabyte", "Gigabyte", 8 * 10**9, "gigabyte", "GB"),
    _unit("terabyte", "Terabyte", 8 * 10**12, "terabyte", "TB"),
    _unit("petabyte", "Petabyte", 8 * 10**15, "petabyte", "PB"),
    _unit("exabyte", "Exabyte", 8 * 10**18, "exabyte", "EB"),
    _unit("zettabyte", "Zettabyte", 8 * 10**21, "zettabyte", "ZB"),
    _unit("yottabyte", "Yottabyte", 8 * 10**24, "yottabyte", "YB"),
    _unit("kibibyte", "Kibibyte", 8 * 2**10, "kibibyte", "KiB"),
    _unit("mebibyte", "Mebibyte", 8 * 2**20, "mebibyte", "MiB"),
    _unit("gibibyte", "Gibibyte", 8 * 2**30, "gibibyte", "GiB"),
    _unit("tebibyte", "Tebibyte", 8 * 2**40, "tebibyte", "TiB"),
    _unit("pebibyte", "Pebibyte", 8 * 2**50, "pebibyte", "PiB"),
    _unit("exbibyte", "Exbibyte", 8 * 2**60, "exbibyte", "EiB"),
    _unit("zebibyte", "Zebibyte", 8 * 2**70, "zebibyte", "ZiB"),
    _unit("yobibyte", "Yobibyte", 8 * 2**80, "yobibyte", "YiB"),
)

_POWER = (
    _unit("milliwatt", "Milliwatt", _q("0.001"), "milliwatt", "mW"),
    _unit("watt", "Watt", 1, "watt", "W"),
    _unit("kilowatt", "Kilowatt", 1000, "kilowatt", "kW"),
    _unit("megawatt", "Megawatt", 10**6, "megawatt", "MW"),
    _unit("gigawatt", "Gigawatt", 10**9, "gigawatt", "GW"),
    _unit("horsepower", "Horsepower", _q("745.699872"), "horsepower", "hp"),
    _unit("metricHorsepower", "Metric horsepower", _q("735.49875"), "metric_horsepower", "PS"),
    _unit("btuPerHour", "BTU per hour", _q("0.29307107"), "international_btu / hour", "BTU/h"),
    _unit(
        "footPoundPerSecond",
        "Foot-pound per second",
        _q("1.355817948"),
        "foot * force_pound / second",
        "ft·lbf/s",
    ),
    _unit("caloriePerSecond", "Calorie per second", _q("4.184"), "calorie / second", "cal/s"),
)

_TIME = (
    _unit("second", "Second", 1, "second", "s"),
    _unit("minute", "Minute", 60, "minute", "min"),
    _unit("hour", "Hour", 3600, "hour", "h"),
)

_TEMPERATURE = (
    _unit("kelvin", "Kelvin", 1, "kelvin", "K", kind=UnitKind.AFFINE),
    _unit(
        "celcius",
        "Celsius",
        1,
        "degC",
        "celsius",
        "°C",
        kind=UnitKind.AFFINE,
        offset=_q("273.15"),
    ),
    _unit(
        "farenheit",
        "Fahrenheit",
        Fraction(5, 9),
        "degF",
        "fahrenheit",
        "°F",
        kind=UnitKind.AFFINE,
        offset=_q("459.67") * Fraction(5, 9),
    ),
    _unit("rankine", "Rankine", Fraction(5, 9), "degR", "°R", kind=UnitKind.AFFINE),
)

_PRESSURE = (
    _unit("pascal", "Pascal", 1, "pascal", "Pa"),
    _unit("kilopascal", "Kilopascal", 1000, "kilopascal", "kPa"),
    _unit("megapascal", "Megapascal", 10**6, "megapascal", "MPa"),
    _unit("bar", "Bar", 10**5, "bar"),
    _unit("millibar", "Millibar", 100, "millibar", "mbar"),
    _unit("hectopascal", "Hectopascal", 100, "hectopascal", "hPa"),
    _unit("atm", "Atmosphere", 101325, "atmosphere", "atmosphere"),
    _unit("torr", "Torr", _q("133.322"), "torr", "millimeterOfMercury"),
    _unit("psi", "Pound per square inch", _q("6894.76"), "psi", "poundPerSquareInch"),
    _unit(
        "psf",
        "Pound per square foot",
        _q("47.8803"),
        "force_pound / foot ** 2",
        "poundPerSquareFoot",
    ),
    _unit("inchOfMercury", "Inch of mercury", _q("3386.39"), "inch_of_mercury_column"),
    _unit("inchOfWater", "Inch of water", _q("249.089"), "inch_of_water_column"),
    _unit(
        "millimeterOfWater",
        "Millimeter of water",
        _q("9.80665"),
        "millimeter_of_water_column",
        "mmH2O",
    ),
    _unit(
        "technicalAtmosphere",
        "Technical atmosphere",
        _q("98066.5"),
        "kilogram * standard_gravity / centimeter ** 2",
        "at",
    ),
)

_LENGTH = (
    _unit("millimeter", "Millimeter", _q("0.001"), "millimeter", "mm"),
    _unit("centimeter", "Centimeter", _q("0.01"), "centimeter", "cm"),
    _unit("meter", "Meter", 1, "meter", "m"),
    _unit("kilometer", "Kilometer", 1000, "kilometer", "km"),
    _unit("inch", "Inch", _q("0.0254"), "inch", "in"),
    _unit("nanometer", "Nanometer", _q("1e-9"), "nanometer", "nm"),
    _unit("micrometer", "Micrometer", _q("1e-6"), "micrometer", "µm", "um"),
    _unit("decimeter", "Decimeter", _q("0.1"), "decimeter", "dm"),
    _unit("foot", "Foot", _q("0.3048"), "foot", "ft"),
    _unit("yard", "Yard", _q("0.9144"), "yard", "yd"),
    _unit("mile", "Mile", _q("1609.344"), "mile", "mi"),
    _unit("nauticalMile", "Nautical mile", 1852, "nautical_mile", "nmi"),
    _unit("lightYear", "Light year", _q("9.461e15"), "light_year", "ly"),
    _unit("astronomicalUnit", "Astronomical unit", _q("1.496e11"), "astronomical_unit", "AU"),
    _unit("parsec", "Parsec", _q("3.086e16"), "parsec", "pc"),
)

_ENERGY = (
    _unit("joule", "Joule", 1, "joule", "J"),
    _unit("kilojoule", "Kilojoule", 1000, "kilojoule", "kJ"),
    _unit("gramcalorie", "Gram calorie", _q("4.184"), "calorie", "cal"),
    _unit("kilocalorie", "Kilocalorie", 4184, "kilocalorie", "kcal"),
    _unit("footpound", "Foot-pound", _q("1.356"), "foot * force_pound", "ft·lbf"),
)

_SPEED = (
    _unit("meter per second", "Meter per second", 1, "meter / second", "m/s", "meterPerSecond"),
    _unit(
        "kilometer per hour",
        "Kilometer per hour",
        _per("3.6"),
        "kilometer / hour",
        "km/h",
        "kilometerPerHour",
    ),
    _unit(
        "miles per hour", "Miles per hour", _per("2.237"), "mile / hour", "mph", "milePerHour"
    ),
    _unit(
        "foot per second",
        "Foot per second",
        _per("3.281"),
        "foot / second",
        "ft/s",
        "footPerSecond",
    ),
    _unit("knot", "Knot", Fraction(1852, 3600), "knot", "kn", "nauticalMilePerHour"),
    _unit(
        "kilometerPerSecond", "Kilometer per second", 1000, "kilometer / second", "km/s"
    ),
    _unit("milePerSecond", "Mile per second", _q("1609.344"), "mile / second", "mi/s"),
    _unit(
        "footPerMinute", "Foot per minute", _q("0.3048") / 60, "foot / minute", "ft/min"
    ),
    _unit("inchPerSecond", "Inch per second", _q("0.0254"), "inch / second", "in/s"),
    _unit("yardPerSecond", "Yard per second", _q("0.9144"), "yard / second", "yd/s"),
    _unit("mach", "Mach (sea level)", 343, "343 * meter / second", "Ma"),
    _unit("speedOfLight", "Speed of light", 299792458, "speed_of_light", "c"),
)

_FUEL_ECONOMY = (
    _unit("kilometer per liter", "Kilometer per liter", 1, "kilometer / liter", "km/L"),
    _unit(
        "liter per 100 kilometer",
        "Liter per 100 kilometer",
        100,
        "liter / (100 * kilometer)",
        "L/100km",
        kind=UnitKind.RECIPROCAL,
    ),
    _unit("miles per gallon", "Miles per gallon (US)", _per("2.352"), "mile / gallon", "mpg"),
    _unit(
        "miles per gallon (imperial)",
        "Miles per gallon (imperial)",
        _per("2.82481"),
        "mile / uk_liquid_gallon",
        "mpg UK",
    ),
)

_PLANE_ANGLE = (
    _unit("radian", "Radian", 1, "radian", "rad"),
    _unit("degree", "Degree", _PI / 180, "degree", "deg"),
    _unit("gradian", "Gradian", _PI / 200, "gradian", "grad"),
    _unit("milliradian", "Milliradian", _q("0.001"), "milliradian", "mrad"),
    _unit(
        "minuteOfArc",
        "Minute of arc",
        _PI / (180 * 60),
        "arcminute",
        "minute of arc",
        "arcmin",
        "'",
    ),
    _unit(
        "secondOfArc",
        "Second of arc",
        _PI / (180 * 3600),
        "arcsecond",
        "second of arc",
        "arcsec",
        '"',
    ),
    _unit("turn", "Turn", 2 * _PI, "turn", "revolution", "rev"),
    _unit("quadrant", "Quadrant", _PI / 2, "turn / 4"),
    _unit("sextant", "Sextant", _PI / 3, "turn / 6"),
    _unit("octant", "Octant", _PI / 4, "turn / 8"),
)


def _build_table(
    dimension: Dimension, label: str, base_unit: str, units: Tuple[UnitDefinition, ...]
) -> DimensionTable:
    aliases: Dict[str, UnitDefinition] = {}
    for unit in units:
        for alias in unit.aliases:
            existing = aliases.get(alias)
            if existing is not None and existing is not unit:
                raise ValueError(
                    f"Alias '{alias}' maps to both '{existing.name}' and "
                    f"'{unit.name}' in {dimension.value}."
                )
            aliases[alias] = unit
    if base_unit not in aliases:
        raise ValueError(f"Base unit '{base_unit}' missing from {dimension.value}.")
    return DimensionTable(
        dimension=dimension,
        label=label,
        base_unit=base_unit,
        units=units,
        aliases=MappingProxyType(aliases),
    )


DIMENSIONS: Mapping[Dimension, DimensionTable] = MappingProxyType(
    {
        table.dimension: table
        for table in (
            _build_table(Dimension.MASS, "Mass", "gram", _MASS),
            _build_table(Dimension.VOLUME, "Volume", "liter", _VOLUME),
            _build_table(Dimension.AREA, "Area", "squareMeter", _AREA),
            _build_table(Dimension.BIT_BYTE, "Bit / Byte", "bit", _BIT_BYTE),
            _build_table(Dimension.POWER, "Power", "watt", _POWER),
            _build_table(Dimension.TIME, "Time", "second", _TIME),
            _build_table(Dimension.TEMPERATURE, "Temperature", "kelvin", _TEMPERATURE),
            _build_table(Dimension.PRESSURE, "Pressure", "pascal", _PRESSURE),
            _build_table(Dimension.LENGTH, "Length", "meter", _LENGTH),
            _build_table(Dimension.ENERGY, "Energy", "joule", _ENERGY),
            _build_table(Dimension.SPEED, "Speed", "meter per second", _SPEED),
            _build_table(
                Dimension.FUEL_ECONOMY, "Fuel economy", "kilometer per liter", _FUEL_ECONOMY
            ),
            _build_table(Dimension.PLANE_ANGLE, "Plane angle", "radian", _PLANE_ANGLE),
        )
    }
)


__all__ = [
    "DIMENSIONS",
    "Dimension",
    "DimensionTable",
    "UnitDefinition",
    "UnitKind",
]
