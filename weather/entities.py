from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from . import formulas
from .exceptions import InvalidReadingError


def _is_finite_real(value: object) -> bool:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def _is_count(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True, eq=False)
class StevensonReading:
    """One reading taken from a Stevenson screen.

    Raw values are kept exactly as given:
    - temperature and dew point in Celsius
    - wind speed in miles per hour
    - rain received over the last 24 hours in millimetres

    The public properties report rounded integers. Derived quantities are
    computed from the raw values and only their final result is rounded.
    """

    temperature_c: float
    dew_point_c: float
    wind_speed_mph: float
    total_rain_mm: int

    def __post_init__(self) -> None:
        if not (
            _is_finite_real(self.temperature_c)
            and _is_finite_real(self.dew_point_c)
            and _is_finite_real(self.wind_speed_mph)
            and _is_count(self.total_rain_mm)
        ):
            raise InvalidReadingError("Invalid arguments!")
        if (
            self.temperature_c < self.dew_point_c
            or self.wind_speed_mph < 0
            or self.total_rain_mm < 0
        ):
            raise InvalidReadingError("Invalid arguments!")

    @property
    def temperature(self) -> int:
        return formulas.round_half_up(self.temperature_c)

    @property
    def dew_point(self) -> int:
        return formulas.round_half_up(self.dew_point_c)

    @property
    def wind_speed(self) -> int:
        return formulas.round_half_up(self.wind_speed_mph)

    @property
    def total_rain(self) -> int:
        return int(self.total_rain_mm)

    @property
    def relative_humidity(self) -> int:
        return formulas.round_half_up(formulas.relative_humidity(self.temperature_c, self.dew_point_c))

    @property
    def heat_index(self) -> int:
        return formulas.round_half_up(formulas.heat_index(self.temperature_c, self.dew_point_c))

    @property
    def wind_chill(self) -> int:
        return formulas.round_half_up(formulas.wind_chill(self.temperature_c, self.wind_speed_mph))

    def __str__(self) -> str:
        return (
            f"Reading: T = {self.temperature}, D = {self.dew_point}, "
            f"v = {self.wind_speed}, rain = {self.total_rain}"
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, StevensonReading):
            return NotImplemented
        return (
            self.temperature_c == other.temperature_c
            and self.dew_point_c == other.dew_point_c
            and self.wind_speed_mph == other.wind_speed_mph
            and self.total_rain_mm == other.total_rain_mm
        )

    def __hash__(self) -> int:
        # Rounded values: raw-equal readings always round alike.
        return hash((self.temperature, self.dew_point, self.wind_speed, self.total_rain))


__all__ = ["StevensonReading"]
