"""Core abstractions for the weather domain."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class WeatherReading(Protocol):
    """A single weather observation exposing rounded values and derived metrics.

    Every quantity is reported as an integer:
    - temperature and dew point in Celsius
    - wind speed in miles per hour
    - total rain in millimetres
    - relative humidity in percent
    - heat index and wind chill in Celsius
    """

    @property
    def temperature(self) -> int:
        ...

    @property
    def dew_point(self) -> int:
        ...

    @property
    def wind_speed(self) -> int:
        ...

    @property
    def total_rain(self) -> int:
        ...

    @property
    def relative_humidity(self) -> int:
        ...

    @property
    def heat_index(self) -> int:
        ...

    @property
    def wind_chill(self) -> int:
        ...


__all__ = ["WeatherReading"]
