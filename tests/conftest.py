from __future__ import annotations

import pytest

from weather import StevensonReading


@pytest.fixture
def example() -> StevensonReading:
    return StevensonReading(9, 2, 9, 4)


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("WEATHER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WEATHER_STRICT_INGEST", raising=False)
    yield monkeypatch
