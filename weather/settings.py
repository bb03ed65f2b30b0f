"""Environment driven settings for the weather package."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .exceptions import ImproperlyConfigured

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class WeatherSettings:
    log_level: int = logging.INFO
    strict_ingest: bool = False


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ImproperlyConfigured(f"Unknown log level: {value}")
    return level


def load_settings() -> WeatherSettings:
    return WeatherSettings(
        log_level=_parse_log_level(env("WEATHER_LOG_LEVEL", "INFO")),
        strict_ingest=env("WEATHER_STRICT_INGEST", "0") == "1",
    )


def configure_logging(settings: WeatherSettings | None = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger("weather").setLevel(settings.log_level)


__all__ = ["WeatherSettings", "configure_logging", "env", "load_settings"]
