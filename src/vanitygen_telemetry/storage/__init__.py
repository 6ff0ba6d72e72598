"""Telemetry persistence backends."""
from __future__ import annotations

from .base import StoreError, TelemetryRecord, TelemetryStore
from .memory import InMemoryTelemetryStore
from .sql import SQLTelemetryStore

__all__ = [
    "InMemoryTelemetryStore",
    "SQLTelemetryStore",
    "StoreError",
    "TelemetryRecord",
    "TelemetryStore",
]
