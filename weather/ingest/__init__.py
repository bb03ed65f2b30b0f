"""Turn station payloads into validated readings."""
from __future__ import annotations

from .consumer import ingest_payloads, process_payload
from .schemas import ReadingPayload

__all__ = ["ReadingPayload", "ingest_payloads", "process_payload"]
