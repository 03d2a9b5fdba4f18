# src/database/batch_insert.py
"""Batch insert helper for SQLite: one transaction per batch, one statement per record."""

from __future__ import annotations

from typing import Any, Dict, Sequence, Type

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    ProgrammingError,
    SQLAlchemyError,
    StatementError,
)

from common.errors import BindingError, ConstraintError, SchemaError, StorageError
from common.logging_utils import logger
from schemas.common.table import Table


def insert_statement(table: Type[Table]) -> str:
    """``INSERT INTO <table> (<columns>) VALUES (<named placeholders>)``."""
    columns = table.column_names()
    return "INSERT INTO {} ({}) VALUES ({})".format(
        table.table_name(),
        ",".join(columns),
        ",".join(f":{column}" for column in columns),
    )


def insert_batch(
    conn: Connection,
    table: Type[Table],
    records: Sequence[Table],
) -> Dict[str, Any]:
    """Insert ``records`` into ``table`` atomically.

    Every record is bound by column name and inserted with its own statement
    inside a single transaction that is committed once at the end. Any
    failure rolls the whole batch back and is raised as a ``StorageError``
    subclass; the table is left exactly as it was. An empty batch still
    opens and commits an (empty) transaction.
    """

    table_name = table.table_name()
    statement = text(insert_statement(table))

    logger.debug("Insert %d records to %s", len(records), table_name)

    try:
        with conn.begin():
            for record in records:
                if not isinstance(record, table):
                    raise BindingError(
                        f"Cannot insert {type(record).__name__} into `{table_name}` "
                        f"(expected {table.__name__})"
                    )
                conn.execute(statement, record.to_params())
    except StorageError:
        raise
    except IntegrityError as exc:
        raise ConstraintError(f"Insert into `{table_name}` violated a constraint: {exc.orig}") from exc
    except OperationalError as exc:
        raise SchemaError(f"Insert into `{table_name}` failed: {exc.orig}") from exc
    except (InterfaceError, ProgrammingError) as exc:
        raise BindingError(f"Cannot bind record for `{table_name}`: {exc.orig}") from exc
    except DBAPIError as exc:
        raise StorageError(f"Insert into `{table_name}` failed: {exc.orig}") from exc
    except StatementError as exc:
        raise BindingError(f"Cannot bind record for `{table_name}`: {exc}") from exc
    except SQLAlchemyError as exc:
        raise StorageError(f"Insert into `{table_name}` failed: {exc}") from exc

    return {
        "table": table_name,
        "rows_processed": len(records),
        "method": "insert",
    }
