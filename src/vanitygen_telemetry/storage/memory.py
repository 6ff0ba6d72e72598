"""In-process telemetry store used by tests and local runs."""
from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock

from .base import TelemetryRecord


class InMemoryTelemetryStore:
    def __init__(self) -> None:
        self.records: list[TelemetryRecord] = []
        self._lock = Lock()

    def insert(
        self,
        prefix_length: int,
        duration_seconds: float,
        cores_used: int,
        attempts: int,
    ) -> TelemetryRecord:
        with self._lock:
            record = TelemetryRecord(
                id=len(self.records) + 1,
                prefix_length=prefix_length,
                duration_seconds=duration_seconds,
                cores_used=cores_used,
                attempts=attempts,
                created_at=datetime.now(timezone.utc).isoformat(),
            )
            self.records.append(record)
        return record
