"""Create and drop the relation behind each record type."""

from __future__ import annotations

from typing import Iterable, Type

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from common.errors import SchemaError
from common.logging_utils import logger
from schemas.common.table import Table
from schemas.schema_registry import TABLES


def create_statement(table: Type[Table]) -> str:
    return f"CREATE TABLE IF NOT EXISTS {table.table_name()} ({table.create_sql()})"


def drop_statement(table: Type[Table]) -> str:
    return f"DROP TABLE IF EXISTS {table.table_name()}"


def _execute_ddl(conn: Connection, sql: str, table: Type[Table], action: str) -> None:
    try:
        with conn.begin():
            conn.exec_driver_sql(sql)
    except SQLAlchemyError as exc:
        raise SchemaError(f"Failed to {action} table `{table.table_name()}`: {exc}") from exc


def create(conn: Connection, table: Type[Table]) -> None:
    _execute_ddl(conn, create_statement(table), table, "create")
    logger.debug("Create table `%s`", table.table_name())


def drop(conn: Connection, table: Type[Table]) -> None:
    _execute_ddl(conn, drop_statement(table), table, "drop")
    logger.debug("Drop table `%s`", table.table_name())


def create_all(conn: Connection, tables: Iterable[Type[Table]] = TABLES) -> None:
    for table in tables:
        create(conn, table)


def drop_all(conn: Connection, tables: Iterable[Type[Table]] = TABLES) -> None:
    for table in tables:
        drop(conn, table)
