"""Request schema for telemetry submissions."""
from __future__ import annotations

import math
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

MAX_PREFIX_LENGTH = 52
MAX_DURATION_SECONDS = 31_536_000  # one year
MAX_CORES = 1024

# Validation order; the first failing field is the one reported.
FIELD_ORDER = ("prefix_length", "duration_seconds", "cores_used", "attempts")


class InvalidSubmission(ValueError):
    """A submission field is missing, mistyped or out of range."""

    def __init__(self, field: str):
        super().__init__(f"Invalid {field}")
        self.field = field


def _json_number(value: Any) -> int | float:
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError("must be finite")
    return value


def _json_integer(value: Any) -> int:
    value = _json_number(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("must be an integer")
        return int(value)
    return value


JSONInteger = BeforeValidator(_json_integer)
JSONNumber = BeforeValidator(_json_number)


class TelemetrySubmission(BaseModel):
    """One completed vanity search run as reported by the client."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    prefix_length: Annotated[int, JSONInteger, Field(ge=1, le=MAX_PREFIX_LENGTH)]
    duration_seconds: Annotated[float, JSONNumber, Field(ge=0, le=MAX_DURATION_SECONDS)]
    cores_used: Annotated[int, JSONInteger, Field(ge=1, le=MAX_CORES)]
    attempts: Annotated[int, JSONInteger, Field(ge=1)]


def parse_submission(data: dict[str, Any]) -> TelemetrySubmission:
    """Validate ``data`` and raise ``InvalidSubmission`` naming the first bad field."""
    try:
        return TelemetrySubmission.model_validate(data)
    except ValidationError as exc:
        failed = {error["loc"][0] for error in exc.errors() if error["loc"]}
        for field in FIELD_ORDER:
            if field in failed:
                raise InvalidSubmission(field) from exc
        raise
