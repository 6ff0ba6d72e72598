"""Framework-independent ingestion handler.

``IngestionHandler.handle`` turns one inbound request into one response:
route gate, JSON body parse, ordered field validation, then a single
store insert. The HTTP layer only translates to and from these types.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from ..storage.base import TelemetryStore
from .schemas import InvalidSubmission, TelemetrySubmission, parse_submission

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/submit"

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "86400",
}

TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass(frozen=True)
class IngestRequest:
    method: str
    path: str
    body: bytes | None = None


@dataclass(frozen=True)
class IngestResponse:
    status: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def text(cls, status: int, message: str) -> "IngestResponse":
        return cls(status=status, body=message, headers={"Content-Type": TEXT_CONTENT_TYPE})


class InvalidJSON(ValueError):
    """The request body is not a JSON object."""


def _reject_constant(name: str) -> Any:
    raise InvalidJSON(f"Non-standard JSON constant {name}")


def parse_body(body: bytes | None) -> dict[str, Any]:
    if not body:
        raise InvalidJSON("Empty body")
    try:
        # UTF-8 only; a leading BOM is dropped.
        data = json.loads(body.decode("utf-8-sig"), parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidJSON(str(exc)) from exc
    if not isinstance(data, dict):
        raise InvalidJSON(f"Expected a JSON object, got {type(data).__name__}")
    return data


class IngestionHandler:
    """Validate telemetry submissions and append them to ``store``.

    The handler keeps no state between requests apart from the store
    handle it was constructed with. Store errors propagate to the caller.
    """

    def __init__(self, store: TelemetryStore):
        self.store = store

    def handle(self, request: IngestRequest) -> IngestResponse:
        method = request.method.upper()
        if method == "OPTIONS":
            return IngestResponse(status=204, headers=dict(PREFLIGHT_HEADERS))
        if method != "POST":
            return IngestResponse.text(405, "Method not allowed")
        if request.path != SUBMIT_PATH:
            return IngestResponse.text(404, "Not found")

        try:
            data = parse_body(request.body)
        except InvalidJSON as exc:
            logger.debug("Rejected submission body: %s", exc)
            return IngestResponse.text(400, "Invalid JSON")

        try:
            submission = parse_submission(data)
        except InvalidSubmission as exc:
            logger.debug("Rejected submission: %s", exc)
            return IngestResponse.text(400, str(exc))

        self.persist(submission)
        return IngestResponse(
            status=200,
            body=json.dumps({"ok": True}),
            headers={
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": "*",
            },
        )

    def persist(self, submission: TelemetrySubmission) -> None:
        record = self.store.insert(
            prefix_length=submission.prefix_length,
            duration_seconds=submission.duration_seconds,
            cores_used=submission.cores_used,
            attempts=submission.attempts,
        )
        logger.info(
            "Recorded telemetry submission",
            extra={
                "record_id": record.id,
                "prefix_length": record.prefix_length,
                "cores_used": record.cores_used,
            },
        )
