"""In-memory adapter for the storage capability interface.

Mirrors the SQLite adapter's failure model: relations must be created before
use, primary keys are unique, non-optional fields reject nulls, and a batch
that fails leaves its relation untouched.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

from common.errors import BindingError, ConstraintError, SchemaError
from common.logging_utils import logger
from schemas.common.table import Table, field_types, unwrap_optional
from schemas.schedule.agency import Agency
from schemas.schedule.routes import Route, RouteId
from schemas.schedule.stop_times import StopTime
from schemas.schedule.stops import Stop
from schemas.schedule.trips import Trip
from schemas.schema_registry import TABLES
from storage.base import GtfsStorage

T = TypeVar("T", bound=Table)


class MemoryGtfs(GtfsStorage):
    """GTFS storage held in process memory, for tests and dry runs."""

    def __init__(self, known_tables: Sequence[Type[Table]] = TABLES):
        self._tables = tuple(known_tables)
        self._relations: Dict[str, List[Table]] = {}

    def create_all(self) -> None:
        for table in self._tables:
            table.create_sql()
            self._relations.setdefault(table.table_name(), [])
            logger.debug("Create table `%s`", table.table_name())

    def drop_all(self) -> None:
        for table in self._tables:
            self._relations.pop(table.table_name(), None)
            logger.debug("Drop table `%s`", table.table_name())

    def _relation(self, table: Type[Table]) -> List[Table]:
        try:
            return self._relations[table.table_name()]
        except KeyError:
            raise SchemaError(f"no such table: {table.table_name()}") from None

    def _insert(self, table: Type[T], records: Sequence[T]) -> None:
        table_name = table.table_name()
        existing = self._relation(table)
        key_columns = table.primary_key()
        nullable = {name: unwrap_optional(hint)[1] for name, hint in field_types(table).items()}

        staged = list(existing)
        keys = {self._key(record, key_columns) for record in existing}

        logger.debug("Insert %d records to %s", len(records), table_name)
        for record in records:
            if not isinstance(record, table):
                raise BindingError(
                    f"Cannot insert {type(record).__name__} into `{table_name}` (expected {table.__name__})"
                )
            params = record.to_params()
            for column, value in params.items():
                if value is None and not nullable[column]:
                    raise ConstraintError(f"NOT NULL constraint failed: {table_name}.{column}")
            if key_columns:
                key = tuple(params[column] for column in key_columns)
                if key in keys:
                    raise ConstraintError(
                        f"UNIQUE constraint failed: {table_name}.{', '.join(key_columns)} = {key}"
                    )
                keys.add(key)
            staged.append(record)

        self._relations[table_name] = staged

    @staticmethod
    def _key(record: Table, key_columns: Sequence[str]) -> tuple:
        params = record.to_params()
        return tuple(params[column] for column in key_columns)

    def _select(self, table: Type[T], column: Optional[str] = None, value: Any = None) -> List[T]:
        records = list(self._relation(table))
        if column is None:
            return records
        if column not in table.column_names():
            raise ValueError(f"`{table.table_name()}` has no column '{column}'")
        return [record for record in records if getattr(record, column) == value]

    def insert_agencies(self, agencies: Sequence[Agency]) -> None:
        self._insert(Agency, agencies)

    def select_agencies(self) -> List[Agency]:
        return self._select(Agency)

    def insert_stops(self, stops: Sequence[Stop]) -> None:
        self._insert(Stop, stops)

    def select_stops(self) -> List[Stop]:
        return self._select(Stop)

    def insert_routes(self, routes: Sequence[Route]) -> None:
        self._insert(Route, routes)

    def select_routes(self, route_id: Optional[RouteId] = None) -> List[Route]:
        if route_id is None:
            return self._select(Route)
        return self._select(Route, "route_id", route_id)

    def insert_trips(self, trips: Sequence[Trip]) -> None:
        self._insert(Trip, trips)

    def select_trips(self, route_id: Optional[RouteId] = None) -> List[Trip]:
        if route_id is None:
            return self._select(Trip)
        return self._select(Trip, "route_id", route_id)

    def insert_stop_times(self, stop_times: Sequence[StopTime]) -> None:
        self._insert(StopTime, stop_times)

    def select_stop_times(self) -> List[StopTime]:
        return self._select(StopTime)
