from __future__ import annotations

import os


os.environ.setdefault("WEATHER_LOG_LEVEL", "INFO")
os.environ.setdefault("WEATHER_STRICT_INGEST", "0")
