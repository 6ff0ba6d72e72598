"""Persistence contract shared by all telemetry stores."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class StoreError(RuntimeError):
    """Raised when a store cannot durably record a submission."""


@dataclass(frozen=True)
class TelemetryRecord:
    id: int
    prefix_length: int
    duration_seconds: float
    cores_used: int
    attempts: int
    created_at: str


class TelemetryStore(Protocol):
    def insert(
        self,
        prefix_length: int,
        duration_seconds: float,
        cores_used: int,
        attempts: int,
    ) -> TelemetryRecord:
        ...
