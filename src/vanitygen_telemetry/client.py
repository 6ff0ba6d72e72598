"""Client side of the telemetry exchange.

The generator reports one ``TelemetryPayload`` after a successful search.
Only the four counters below are ever sent: never the prefix text, the
resulting address or any key material. Submission happens on a daemon
thread and every failure is discarded so telemetry cannot affect the run.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://worker.stormycloud.org/submit"
DEFAULT_TIMEOUT_SEC = 5.0


@dataclass(frozen=True)
class TelemetryPayload:
    prefix_length: int
    duration_seconds: float
    cores_used: int
    attempts: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def send(
    payload: TelemetryPayload,
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: float = DEFAULT_TIMEOUT_SEC,
    session: requests.Session | None = None,
) -> bool:
    """POST ``payload`` once. Returns whether the endpoint acknowledged it."""
    poster = session or requests
    try:
        response = poster.post(endpoint, json=payload.to_dict(), timeout=timeout)
        response.close()
    except requests.RequestException as exc:
        logger.debug("Telemetry submission failed: %s", exc)
        return False
    if response.status_code != 200:
        logger.debug("Telemetry endpoint answered %s", response.status_code)
        return False
    return True


def submit(
    payload: TelemetryPayload,
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: float = DEFAULT_TIMEOUT_SEC,
    session: requests.Session | None = None,
) -> threading.Thread:
    """Send ``payload`` in the background and return the worker thread."""
    worker = threading.Thread(
        target=send,
        args=(payload,),
        kwargs={"endpoint": endpoint, "timeout": timeout, "session": session},
        name="telemetry-submit",
        daemon=True,
    )
    worker.start()
    return worker
