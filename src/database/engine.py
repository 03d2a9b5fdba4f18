"""SQLite engine and connection scaffolding backed by SQLAlchemy."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from common.errors import StoreConnectionError
from common.logging_utils import logger

PathLike = Union[str, Path]


def sqlite_url(path: PathLike) -> str:
    return f"sqlite:///{path}"


def create_sqlite_engine(path: PathLike, echo: bool = False) -> Engine:
    """Create an engine for the database file at ``path``.

    pysqlite's implicit transaction handling is switched off so that every
    ``Connection.begin()`` emits a real ``BEGIN``; DDL and empty batches then
    run inside the same transactions as inserts.
    """
    engine = create_engine(sqlite_url(path), echo=echo)

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


def open_connection(path: PathLike, echo: bool = False) -> Connection:
    """Open the single connection a storage session owns for its lifetime."""
    engine = create_sqlite_engine(path, echo=echo)
    try:
        connection = engine.connect()
        # pysqlite opens files lazily; a non-database file only fails on first read
        try:
            with connection.begin():
                connection.exec_driver_sql("PRAGMA schema_version")
        except SQLAlchemyError:
            connection.close()
            raise
    except SQLAlchemyError as exc:
        engine.dispose()
        raise StoreConnectionError(f"Cannot open database {path}: {exc}") from exc

    logger.debug("Opened database %s", path)
    return connection
