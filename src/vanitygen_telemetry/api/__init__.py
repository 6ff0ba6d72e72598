"""HTTP surface of the telemetry service."""
from __future__ import annotations

from .routes import ingest_bp

__all__ = ["ingest_bp"]
