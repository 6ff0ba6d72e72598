"""Tests for the SQLAlchemy telemetry store."""

import pytest
from sqlalchemy import inspect, text

from vanitygen_telemetry.storage.base import StoreError
from vanitygen_telemetry.storage.sql import SQLTelemetryStore


@pytest.fixture
def sql_store(tmp_path):
    store = SQLTelemetryStore(f"sqlite:///{tmp_path / 'data' / 'telemetry.db'}")
    store.create_schema()
    return store


def test_insert_assigns_id_and_timestamp(sql_store):
    first = sql_store.insert(prefix_length=12, duration_seconds=0.25, cores_used=8, attempts=4096)
    second = sql_store.insert(prefix_length=13, duration_seconds=1, cores_used=8, attempts=1)

    assert first.id == 1
    assert second.id == 2
    assert first.created_at
    assert [record.id for record in sql_store.fetch_all()] == [1, 2]
    assert sql_store.fetch_all()[0].created_at == first.created_at


def test_create_schema_is_idempotent(sql_store):
    sql_store.insert(prefix_length=1, duration_seconds=0, cores_used=1, attempts=1)
    sql_store.create_schema()

    assert len(sql_store.fetch_all()) == 1


def test_rows_match_table_layout(sql_store):
    sql_store.insert(prefix_length=20, duration_seconds=5.5, cores_used=4, attempts=100)

    columns = [column["name"] for column in inspect(sql_store.engine).get_columns("telemetry")]
    with sql_store.engine.connect() as conn:
        values = conn.execute(
            text("SELECT prefix_length, duration_seconds, cores_used, attempts FROM telemetry")
        ).one()

    assert columns == ["id", "prefix_length", "duration_seconds", "cores_used", "attempts", "created_at"]
    assert tuple(values) == (20, 5.5, 4, 100)


def test_missing_table_raises_store_error(tmp_path):
    store = SQLTelemetryStore(f"sqlite:///{tmp_path / 'empty.db'}")

    with pytest.raises(StoreError):
        store.insert(prefix_length=20, duration_seconds=1, cores_used=1, attempts=1)


def test_attempts_beyond_64_bits_are_stored_as_real(sql_store):
    record = sql_store.insert(prefix_length=20, duration_seconds=1, cores_used=1, attempts=2**64 - 1)

    assert record.attempts == float(2**64 - 1)
    assert sql_store.fetch_all()[0].attempts == float(2**64 - 1)
