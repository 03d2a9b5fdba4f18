"""
Central registry for all table record types.
This provides the ordered set of importable tables and checks
every table contract when it is imported.
"""

import dataclasses
from typing import Tuple, Type

from common.errors import SchemaError
from schemas.common.table import Table
from schemas.schedule.agency import Agency
from schemas.schedule.routes import Route
from schemas.schedule.stop_times import StopTime
from schemas.schedule.stops import Stop
from schemas.schedule.trips import Trip

# Import order: referenced tables before the tables that reference them
TABLES: Tuple[Type[Table], ...] = (
    Agency,
    Stop,
    Route,
    Trip,
    StopTime,
)


def validate_table(table: Type[Table]) -> None:
    """
    Check a record type's contract, raising SchemaError on any misconfiguration.

    - the class is a dataclass deriving from Table with a table name
    - the declared columns equal the dataclass fields, in the same order
    - primary key columns are declared columns
    - a non-empty creation clause is declared
    """
    if not (isinstance(table, type) and issubclass(table, Table)):
        raise SchemaError(f"{table!r} is not a Table type")
    if not dataclasses.is_dataclass(table):
        raise SchemaError(f"{table.__name__} must be a dataclass")
    if not table.table_name():
        raise SchemaError(f"{table.__name__} does not declare a table name")

    columns = table.column_names()
    fields = table.field_names()
    if tuple(columns) != tuple(fields):
        raise SchemaError(
            f"{table.__name__} columns {list(columns)} do not match its fields {list(fields)}"
        )

    unknown_keys = [key for key in table.primary_key() if key not in columns]
    if unknown_keys:
        raise SchemaError(f"{table.__name__} primary key uses unknown columns {unknown_keys}")

    table.create_sql()


for _table in TABLES:
    validate_table(_table)

__all__ = [
    'TABLES',
    'validate_table',
]
