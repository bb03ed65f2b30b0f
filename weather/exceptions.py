from __future__ import annotations


class WeatherError(Exception):
    """Base weather error."""


class InvalidReadingError(WeatherError, ValueError):
    """Raised when a reading is constructed from inconsistent values."""


class PayloadError(WeatherError, ValueError):
    """Raised when a station payload cannot be turned into a reading."""


class ImproperlyConfigured(WeatherError):
    """Raised when the environment holds an unusable setting."""


__all__ = ["WeatherError", "InvalidReadingError", "PayloadError", "ImproperlyConfigured"]
