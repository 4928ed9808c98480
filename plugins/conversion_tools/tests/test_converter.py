import math
from itertools import permutations

import pytest

from plugins.conversion_tools.core import (
    DIMENSIONS,
    BadInputError,
    Conversion,
    Dimension,
    UnknownDimensionError,
    UnrecognizedUnit,
    UnrecognizedUnitError,
    convert,
    list_dimensions,
    list_units,
    resolve_unit,
)
from plugins.conversion_tools.core.units import UnitKind, _build_table, _unit


def _result(dimension, from_unit, to_unit, value):
    outcome = convert(dimension, from_unit, to_unit, value)
    assert outcome.ok, outcome
    return outcome.result


@pytest.mark.parametrize(
    "dimension,from_unit,to_unit,value,expected",
    [
        ("temperature", "celcius", "farenheit", 0, 32),
        ("temperature", "farenheit", "celcius", 212, 100),
        ("length", "meter", "centimeter", 1, 100),
        ("length", "meter", "centimeter", -5, -500),
        ("bitByte", "byte", "bit", 1, 8),
        ("power", "watt", "kilowatt", 0, 0),
        ("volume", "usGallon", "liter", 1, 3.78541),
        ("time", "hour", "second", 2, 7200),
        ("fuelEconomy", "liter per 100 kilometer", "kilometer per liter", 5, 20),
        ("planeAngle", "turn", "degree", 1, 360),
        ("planeAngle", "degree", "radian", 180, math.pi),
    ],
)
def test_known_values_are_exact(dimension, from_unit, to_unit, value, expected):
    assert _result(dimension, from_unit, to_unit, value) == expected


def test_kilogram_to_pounds_uses_legacy_pound():
    assert _result("mass", "kilogram", "pounds", 1) == pytest.approx(2.205, rel=1e-3)
    assert _result("mass", "pounds", "gram", 1) == pytest.approx(453.6)


def test_volume_spot_check_matches_published_factor():
    assert _result("volume", "usGallon", "liter", 1) == pytest.approx(3.78541)
    assert _result("volume", "liter", "cubicFoot", 28.3168) == pytest.approx(1.0)


@pytest.mark.parametrize("dimension", list(Dimension))
@pytest.mark.parametrize("value", [0, 1, -5, 1000.5, 1e-9])
def test_identity_returns_input_for_every_alias(dimension, value):
    for unit in DIMENSIONS[dimension].units:
        for alias in unit.aliases:
            assert _result(dimension, alias, alias, value) == value
            assert _result(dimension, alias, unit.name, value) == value


@pytest.mark.parametrize("dimension", list(Dimension))
def test_round_trip_between_every_pair(dimension):
    names = [unit.name for unit in DIMENSIONS[dimension].units]
    for source, target in permutations(names, 2):
        for value in (0, 1, -5, 1000.5):
            there = _result(dimension, source, target, value)
            back = _result(dimension, target, source, there)
            assert back == pytest.approx(value, rel=1e-6, abs=1e-9), (source, target, value)


def test_aliases_of_one_unit_give_identical_results():
    reference = _result("volume", "usGallon", "liter", 1)
    for alias in ("gallon", "US gallon", "gal US"):
        assert _result("volume", alias, "liter", 1) == reference
    assert _result("planeAngle", "'", "arcsec", 1) == _result(
        "planeAngle", "minuteOfArc", "secondOfArc", 1
    )


def test_unrecognized_unit_is_reported_not_coerced():
    outcome = convert("volume", "lightyear", "liter", 1)
    assert isinstance(outcome, UnrecognizedUnit)
    assert outcome.ok is False
    assert outcome.units == ("lightyear",)
    assert "lightyear" in outcome.message
    with pytest.raises(UnrecognizedUnitError) as excinfo:
        outcome.unwrap()
    assert excinfo.value.dimension is Dimension.VOLUME


def test_both_unrecognized_units_are_listed_once():
    outcome = convert("mass", "stone", "grain", 1)
    assert outcome.units == ("stone", "grain")
    same = convert("mass", "stone", "stone", 1)
    assert same.units == ("stone",)


def test_unit_names_are_case_sensitive_and_untrimmed():
    assert not convert("length", "Meter", "centimeter", 1).ok
    assert not convert("length", " meter", "centimeter", 1).ok
    assert _result("bitByte", "B", "b", 1) == 8


def test_units_from_other_dimensions_are_unrecognized():
    outcome = convert("length", "meter", "second", 1)
    assert outcome.units == ("second",)


def test_area_accepts_short_linear_aliases():
    assert _result("area", "kilometer", "meter", 1) == 1_000_000
    assert _result("area", "hectare", "are", 1) == 100


def test_temperature_pairs():
    assert _result("temperature", "celcius", "kelvin", 0) == 273.15
    assert _result("temperature", "kelvin", "celcius", 0) == -273.15
    assert _result("temperature", "farenheit", "rankine", 0) == 459.67
    assert _result("temperature", "rankine", "celcius", 491.67) == pytest.approx(0, abs=1e-9)
    assert _result("temperature", "kelvin", "farenheit", 373.15) == pytest.approx(212)
    assert _result("temperature", "celsius", "fahrenheit", -40) == -40


def test_kelvin_rankine_use_ratio_not_offset():
    assert _result("temperature", "kelvin", "rankine", 100) == 180
    assert _result("temperature", "rankine", "kelvin", 180) == 100


def test_fuel_economy_conversions():
    assert _result("fuelEconomy", "kilometer per liter", "miles per gallon", 10) == pytest.approx(23.52)
    assert _result("fuelEconomy", "miles per gallon", "liter per 100 kilometer", 30) == pytest.approx(
        235.215 / 30, rel=1e-3
    )
    assert _result(
        "fuelEconomy", "miles per gallon (imperial)", "miles per gallon", 1
    ) == pytest.approx(1 / 1.201, rel=1e-4)
    assert _result(
        "fuelEconomy", "miles per gallon (imperial)", "kilometer per liter", 1
    ) == pytest.approx(0.354006)


def test_reciprocal_units_handle_zero():
    assert _result("fuelEconomy", "liter per 100 kilometer", "kilometer per liter", 0) == math.inf
    assert _result("fuelEconomy", "kilometer per liter", "liter per 100 kilometer", 0) == math.inf
    assert _result("fuelEconomy", "liter per 100 kilometer", "miles per gallon", math.inf) == 0


def test_non_finite_values_propagate():
    assert math.isnan(_result("length", "meter", "centimeter", math.nan))
    assert _result("length", "meter", "centimeter", -math.inf) == -math.inf
    assert _result("temperature", "celcius", "farenheit", math.inf) == math.inf
    assert math.isnan(_result("fuelEconomy", "miles per gallon", "liter per 100 kilometer", math.nan))


def test_negative_zero_keeps_its_sign():
    result = _result("length", "meter", "centimeter", -0.0)
    assert result == 0
    assert math.copysign(1, result) == -1
    assert math.copysign(1, _result("length", "meter", "centimeter", 0.0)) == 1
    assert _result("temperature", "celcius", "farenheit", -0.0) == 32


def test_values_beyond_float_range_are_bad_input():
    with pytest.raises(BadInputError):
        convert("length", "meter", "centimeter", 10**400)
    assert _result("length", "meter", "centimeter", 10**20) == 10**22


@pytest.mark.parametrize(
    "dimension,from_unit,to_unit,value,expected",
    [
        ("length", "mile", "foot", 1, 5280),
        ("length", "nauticalMile", "meter", 1, 1852),
        ("length", "nanometer", "micrometer", 1000, 1),
        ("length", "yard", "inch", 1, 36),
        ("length", "parsec", "meter", 1, 3.086e16),
        ("speed", "knot", "kilometer per hour", 1, 1.852),
        ("speed", "nauticalMilePerHour", "knot", 3, 3),
        ("speed", "mach", "meterPerSecond", 2, 686),
        ("speed", "yardPerSecond", "footPerMinute", 1, 180),
        ("bitByte", "kibibyte", "byte", 1, 1024),
        ("bitByte", "gigabyte", "megabyte", 1, 1000),
        ("bitByte", "nibble", "bit", 1, 4),
        ("bitByte", "yobibyte", "bit", 1, 8 * 2**80),
    ],
)
def test_extended_length_speed_and_storage_units(dimension, from_unit, to_unit, value, expected):
    assert _result(dimension, from_unit, to_unit, value) == expected


def test_camel_case_speed_codes_are_aliases():
    assert resolve_unit("speed", "milePerHour") is resolve_unit("speed", "mph")
    assert resolve_unit("speed", "meterPerSecond").name == "meter per second"
    assert resolve_unit("speed", "footPerSecond").name == "foot per second"


def test_conversion_record_keeps_request():
    outcome = convert(Dimension.LENGTH, "m", "cm", 2)
    assert isinstance(outcome, Conversion)
    assert outcome.dimension is Dimension.LENGTH
    assert (outcome.from_unit, outcome.to_unit, outcome.value) == ("m", "cm", 2.0)
    assert outcome.unwrap() == 200
    assert outcome.constants == "legacy"


def test_unknown_dimension_raises():
    with pytest.raises(UnknownDimensionError):
        convert("currency", "USD", "EUR", 1)


def test_unknown_constant_set_raises():
    with pytest.raises(BadInputError):
        convert("length", "meter", "inch", 1, constants="approximate")


def test_listing_helpers():
    listed = {item["id"]: item for item in list_dimensions()}
    assert set(listed) == {dimension.value for dimension in Dimension}
    assert listed["pressure"]["base_unit"] == "pascal"
    units = list_units("fuelEconomy")
    kinds = {unit["name"]: unit["kind"] for unit in units}
    assert kinds["liter per 100 kilometer"] == "reciprocal"
    assert [unit["name"] for unit in units].count("miles per gallon (imperial)") == 1
    assert resolve_unit("volume", "bbl").name == "usBarrel"
    assert resolve_unit("volume", "barrel") is None


def test_every_alias_resolves_to_a_single_unit():
    for table in DIMENSIONS.values():
        seen = {}
        for unit in table.units:
            assert unit.name in unit.aliases
            for alias in unit.aliases:
                assert seen.setdefault(alias, unit.name) == unit.name
                assert table.resolve(alias) is unit


def test_conflicting_aliases_are_rejected():
    units = (
        _unit("meter", "Meter", 1, "meter", "m"),
        _unit("mile", "Mile", 1609, "mile", "m"),
    )
    with pytest.raises(ValueError, match="Alias 'm'"):
        _build_table(Dimension.LENGTH, "Length", "meter", units)


def test_temperature_units_are_affine():
    assert {unit.kind for unit in DIMENSIONS[Dimension.TEMPERATURE].units} == {UnitKind.AFFINE}
