"""Tests for the JSON log formatter."""

import json
import logging
import sys

from vanitygen_telemetry.logging import JSONLogFormatter


def _record(msg, *args, **extra):
    record = logging.LogRecord("vanitygen_telemetry.ingest.handler", logging.INFO, __file__, 10, msg, args, None)
    record.__dict__.update(extra)
    return record


def test_extras_are_grouped_under_context():
    payload = json.loads(JSONLogFormatter().format(_record("Recorded %s", "row", record_id=7, cores_used=4)))

    assert payload["service"] == "vanitygen-telemetry"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "vanitygen_telemetry.ingest.handler"
    assert payload["message"] == "Recorded row"
    assert payload["context"] == {"record_id": 7, "cores_used": 4}
    assert "lineno" not in payload


def test_records_without_extras_have_no_context():
    payload = json.loads(JSONLogFormatter().format(_record("plain")))

    assert "context" not in payload


def test_exceptions_are_rendered():
    try:
        raise RuntimeError("disk full")
    except RuntimeError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    payload = json.loads(JSONLogFormatter().format(record))

    assert "RuntimeError: disk full" in payload["error"]
