"""Meteorological approximations used by readings.

All helpers work on unrounded values and return unrounded results; callers
round only the final figure.
"""
from __future__ import annotations

import math
import sys

# Magnus-type vapour pressure coefficients (hPa, Celsius).
_VP_BASE = 6.11
_VP_A = 7.5
_VP_B = 237.3

# NWS heat index regression, applied to Celsius temperature as-is.
_HI_C1 = -8.78469475556
_HI_C2 = 1.61139411
_HI_C3 = 2.33854883889
_HI_C4 = -0.14611605
_HI_C5 = -0.012308094
_HI_C6 = -0.0164248277778
_HI_C7 = 0.002211732
_HI_C8 = 0.00072546
_HI_C9 = -0.000003582


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity.

    ``2.5`` becomes ``3`` and ``-2.5`` becomes ``-2``. ``value - floor(value)``
    is exact for finite floats, so values just below a half never round up.
    NaN rounds to ``0`` and infinities clamp to ``sys.maxsize`` bounds.
    """

    if math.isnan(value):
        return 0
    if math.isinf(value):
        return sys.maxsize if value > 0 else -sys.maxsize - 1
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def _divide(numerator: float, denominator: float) -> float:
    # IEEE 754 division: x / 0 is a signed infinity, 0 / 0 is NaN.
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _power_of_ten(exponent: float) -> float:
    try:
        return math.pow(10, exponent)
    except OverflowError:
        return math.inf


def celsius_to_fahrenheit(temperature_c: float) -> float:
    return 9.0 / 5.0 * temperature_c + 32


def fahrenheit_to_celsius(temperature_f: float) -> float:
    return (temperature_f - 32) * (5.0 / 9.0)


def vapor_pressure(temperature_c: float) -> float:
    """Vapour pressure in hPa at the given temperature.

    Near ``-237.3`` the exponent diverges; the result saturates to ``0`` or
    ``inf`` instead of raising.
    """

    exponent = _divide(_VP_A * temperature_c, _VP_B + temperature_c)
    return _VP_BASE * _power_of_ten(exponent)


def relative_humidity(temperature_c: float, dew_point_c: float) -> float:
    """Relative humidity in percent from air temperature and dew point."""

    actual = vapor_pressure(dew_point_c)
    saturated = vapor_pressure(temperature_c)
    return _divide(100 * actual, saturated)


def heat_index(temperature_c: float, dew_point_c: float) -> float:
    t = temperature_c
    r = relative_humidity(temperature_c, dew_point_c)
    return (
        _HI_C1
        + _HI_C2 * t
        + _HI_C3 * r
        + _HI_C4 * t * r
        + _HI_C5 * t * t
        + _HI_C6 * r * r
        + _HI_C7 * t * t * r
        + _HI_C8 * t * r * r
        + _HI_C9 * t * t * r * r
    )


def wind_chill(temperature_c: float, wind_speed_mph: float) -> float:
    """Wind chill in Celsius; the regression itself runs in Fahrenheit."""

    temperature_f = celsius_to_fahrenheit(temperature_c)
    wind_factor = math.pow(wind_speed_mph, 0.16)
    chill_f = 35.74 + 0.6215 * temperature_f - 35.75 * wind_factor + 0.4275 * temperature_f * wind_factor
    return fahrenheit_to_celsius(chill_f)


__all__ = [
    "round_half_up",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "vapor_pressure",
    "relative_humidity",
    "heat_index",
    "wind_chill",
]
