"""Configuration helpers for the telemetry service."""
from __future__ import annotations

from .settings import ServiceSettings, load_settings

__all__ = ["ServiceSettings", "load_settings"]
