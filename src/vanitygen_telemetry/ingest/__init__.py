"""Telemetry submission validation and handling."""
from __future__ import annotations

from .handler import IngestionHandler, IngestRequest, IngestResponse
from .schemas import InvalidSubmission, TelemetrySubmission, parse_submission

__all__ = [
    "IngestRequest",
    "IngestResponse",
    "IngestionHandler",
    "InvalidSubmission",
    "TelemetrySubmission",
    "parse_submission",
]
