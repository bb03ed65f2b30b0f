"""Validate incoming station payloads and build readings from them."""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..entities import StevensonReading
from ..exceptions import InvalidReadingError, PayloadError
from ..settings import load_settings
from . import schemas

logger = logging.getLogger(__name__)

Payload = Union[bytes, str, Mapping[str, Any]]


def _decode(payload: Payload) -> Any:
    if isinstance(payload, Mapping):
        return dict(payload)
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadError("Payload is not valid UTF-8") from exc
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise PayloadError("Invalid JSON payload") from exc


def process_payload(payload: Payload) -> StevensonReading:
    """Validate a single payload and return the reading it describes."""

    data = _decode(payload)
    if not isinstance(data, dict):
        raise PayloadError("Payload must be a JSON object")

    try:
        measurement = schemas.ReadingPayload.model_validate(data)
    except ValidationError as exc:
        raise PayloadError(f"Invalid reading payload ({exc.error_count()} errors)") from exc

    return measurement.to_reading()


def ingest_payloads(payloads: Iterable[Payload], strict: Optional[bool] = None) -> List[StevensonReading]:
    """Build readings from payloads, logging and skipping rejected ones.

    In strict mode the first rejection is raised instead.
    """

    if strict is None:
        strict = load_settings().strict_ingest

    readings: List[StevensonReading] = []
    rejected = 0
    for index, payload in enumerate(payloads):
        try:
            readings.append(process_payload(payload))
        except (PayloadError, InvalidReadingError) as exc:
            if strict:
                raise
            rejected += 1
            logger.warning("Rejected payload #%d: %s", index, exc)
    logger.info("Ingested %d readings, rejected %d", len(readings), rejected)
    return readings


__all__ = ["ingest_payloads", "process_payload"]
