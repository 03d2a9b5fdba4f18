"""Tests for creating and dropping relations in SQLite."""

from dataclasses import dataclass

import pytest

from common.errors import SchemaError
from database import tables
from schemas.common.table import Table
from schemas.schedule.trips import Trip
from schemas.schema_registry import TABLES

from conftest import table_exists


@dataclass(frozen=True)
class Malformed(Table):
    item_id: str


Malformed._table_name = "malformed"
Malformed._columns = ("item_id",)
Malformed._create_sql = "item_id text primary key,,"


def test_create_statement_wraps_clause():
    sql = tables.create_statement(Trip)
    assert sql.startswith("CREATE TABLE IF NOT EXISTS trips (")
    assert "trip_id text not null primary key" in sql
    assert tables.drop_statement(Trip) == "DROP TABLE IF EXISTS trips"


def test_create_all_creates_every_relation(connection):
    tables.create_all(connection)
    for table in TABLES:
        assert table_exists(connection, table.table_name())


def test_lifecycle_is_idempotent(connection):
    for _ in range(2):
        tables.drop_all(connection)
        tables.create_all(connection)
    tables.create_all(connection)

    assert all(table_exists(connection, table.table_name()) for table in TABLES)


def test_drop_all_removes_every_relation(connection):
    tables.create_all(connection)
    tables.drop_all(connection)
    tables.drop_all(connection)

    assert not any(table_exists(connection, table.table_name()) for table in TABLES)


def test_malformed_creation_clause_raises_schema_error(connection):
    with pytest.raises(SchemaError, match="malformed"):
        tables.create(connection, Malformed)
    assert not table_exists(connection, "malformed")
