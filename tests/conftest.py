"""Shared pytest fixtures for the telemetry service test suite."""

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from vanitygen_telemetry.app import create_app
from vanitygen_telemetry.storage.memory import InMemoryTelemetryStore


VALID_PAYLOAD = {
    "prefix_length": 20,
    "duration_seconds": 5.5,
    "cores_used": 4,
    "attempts": 100,
}


@pytest.fixture
def valid_payload():
    return dict(VALID_PAYLOAD)


@pytest.fixture
def store():
    return InMemoryTelemetryStore()


@pytest.fixture
def app(store):
    app = create_app(store=store)
    app.testing = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
