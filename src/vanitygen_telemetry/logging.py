"""JSON-lines logging for the telemetry service."""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

SERVICE_NAME = "vanitygen-telemetry"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JSONLogFormatter(logging.Formatter):
    """One JSON object per record, with ``extra=`` fields under ``context``.

    The ingestion path passes ``record_id`` and the submission counters,
    the HTTP layer passes ``method`` and ``path``; those land in
    ``context`` so log shippers can index them without parsing messages.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(level: str | None = None) -> None:
    level = (level or os.environ.get("TELEMETRY_LOG_LEVEL", "INFO")).upper()
    handler = logging.StreamHandler()
    handler.setFormatter(JSONLogFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
