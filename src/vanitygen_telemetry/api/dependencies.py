"""Dependency wiring for API routes."""
from __future__ import annotations

from flask import current_app

from ..ingest.handler import IngestionHandler

HANDLER_EXTENSION = "telemetry_handler"


def get_handler() -> IngestionHandler:
    return current_app.extensions[HANDLER_EXTENSION]
