"""Payload schemas for station readings."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from ..entities import StevensonReading

__all__ = ["ReadingPayload"]


def _normalise_payload(values: Dict[str, Any]) -> Dict[str, Any]:
    raw = dict(values)
    metrics = values.pop("metrics", None) or {}
    if not isinstance(metrics, dict):
        raise ValueError("metrics must be an object")
    for name, value in metrics.items():
        if values.get(name) is None:
            values[name] = value
    values["raw"] = raw
    return values


class ReadingPayload(BaseModel):
    """A station payload carrying the four values of a reading.

    Values may sit at the top level or under ``metrics``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    station_id: Optional[str] = Field(default=None)
    temperature_c: float = Field(validation_alias=AliasChoices("temperature_c", "temperature"))
    dew_point_c: float = Field(validation_alias=AliasChoices("dew_point_c", "dew_point"))
    wind_speed_mph: float = Field(validation_alias=AliasChoices("wind_speed_mph", "wind_speed"))
    total_rain_mm: int = Field(validation_alias=AliasChoices("total_rain_mm", "total_rain", "rain"))
    raw: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _apply_normalisation(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return _normalise_payload(dict(data))

    def to_reading(self) -> StevensonReading:
        return StevensonReading(
            self.temperature_c,
            self.dew_point_c,
            self.wind_speed_mph,
            self.total_rain_mm,
        )
