"""Weather station readings and derived meteorological quantities."""
from __future__ import annotations

from .abstractions import WeatherReading
from .entities import StevensonReading
from .exceptions import ImproperlyConfigured, InvalidReadingError, PayloadError, WeatherError

__all__ = [
    "WeatherReading",
    "StevensonReading",
    "WeatherError",
    "InvalidReadingError",
    "PayloadError",
    "ImproperlyConfigured",
]
