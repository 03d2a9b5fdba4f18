"""Read records back out of their relations."""

from __future__ import annotations

from typing import Any, List, Mapping, Type, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from common.errors import SchemaError, StorageError
from common.logging_utils import logger
from schemas.common.table import Table, encode_value

T = TypeVar("T", bound=Table)


def _select(conn: Connection, table: Type[T], sql: str, params: Mapping[str, Any]) -> List[T]:
    table_name = table.table_name()
    try:
        with conn.begin():
            rows = conn.execute(text(sql), params).mappings().all()
    except OperationalError as exc:
        raise SchemaError(f"Select from `{table_name}` failed: {exc.orig}") from exc
    except SQLAlchemyError as exc:
        raise StorageError(f"Select from `{table_name}` failed: {exc}") from exc

    # DeserializationError on any row aborts the read; no partial result is returned
    records = [table.from_row(row) for row in rows]
    logger.debug("Select %d records from %s", len(records), table_name)
    return records


def select_all(conn: Connection, table: Type[T]) -> List[T]:
    return _select(conn, table, f"SELECT * FROM {table.table_name()}", {})


def select_where(conn: Connection, table: Type[T], column: str, value: Any) -> List[T]:
    """Exact-match lookup on one declared column."""
    if column not in table.column_names():
        raise ValueError(f"`{table.table_name()}` has no column '{column}'")
    sql = f"SELECT * FROM {table.table_name()} WHERE {column} = :value"
    return _select(conn, table, sql, {"value": encode_value(value)})
