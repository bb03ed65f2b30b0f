from __future__ import annotations

import math
import sys

import pytest

from weather import formulas


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, 3),
        (-2.5, -2),
        (2.49, 2),
        (-2.51, -3),
        (0.49999999999999994, 0),
        (-0.5, 0),
        (7.0, 7),
        (-7.0, -7),
    ],
)
def test_round_half_up(value, expected) -> None:
    assert formulas.round_half_up(value) == expected


def test_round_half_up_returns_int() -> None:
    assert isinstance(formulas.round_half_up(3.2), int)


def test_temperature_conversions() -> None:
    assert formulas.celsius_to_fahrenheit(100) == pytest.approx(212)
    assert formulas.celsius_to_fahrenheit(-40) == pytest.approx(-40)
    assert formulas.fahrenheit_to_celsius(32) == pytest.approx(0)


def test_vapor_pressure_at_freezing() -> None:
    assert formulas.vapor_pressure(0) == pytest.approx(6.11)


def test_relative_humidity() -> None:
    assert formulas.relative_humidity(9, 2) == pytest.approx(61.46, abs=0.05)
    assert formulas.relative_humidity(15, 15) == pytest.approx(100)


def test_heat_index_uses_celsius_temperature() -> None:
    assert formulas.heat_index(9, 2) == pytest.approx(40.16, abs=0.05)


def test_wind_chill() -> None:
    assert formulas.wind_chill(9, 9) == pytest.approx(6.76, abs=0.05)


def test_wind_chill_without_wind() -> None:
    expected = formulas.fahrenheit_to_celsius(35.74 + 0.6215 * formulas.celsius_to_fahrenheit(9))
    assert formulas.wind_chill(9, 0) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value, expected",
    [
        (math.nan, 0),
        (math.inf, sys.maxsize),
        (-math.inf, -sys.maxsize - 1),
    ],
)
def test_round_half_up_non_finite(value, expected) -> None:
    assert formulas.round_half_up(value) == expected


def test_vapor_pressure_saturates_instead_of_raising() -> None:
    assert formulas.vapor_pressure(-237.3) == 0
    assert formulas.vapor_pressure(-240) == math.inf


def test_relative_humidity_with_vanishing_saturation() -> None:
    assert math.isnan(formulas.relative_humidity(-237.3, -237.3))
    assert formulas.relative_humidity(-237.3, -240) == math.inf
