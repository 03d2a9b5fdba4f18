"""SQLite adapter for the storage capability interface."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Type, Union

from sqlalchemy.engine import Connection

from database import tables
from database.batch_insert import insert_batch
from database.engine import open_connection
from database.query import select_all, select_where
from schemas.common.table import Table
from schemas.schedule.agency import Agency
from schemas.schedule.routes import Route, RouteId
from schemas.schedule.stop_times import StopTime
from schemas.schedule.stops import Stop
from schemas.schedule.trips import Trip
from schemas.schema_registry import TABLES
from storage.base import GtfsStorage


def init(path: Union[str, Path]) -> GtfsStorage:
    """Open the database file at ``path`` (created if absent) as GTFS storage."""
    return GtfsDb(open_connection(path))


class GtfsDb(GtfsStorage):
    """GTFS storage in a single SQLite file, owned through one connection."""

    def __init__(self, connection: Connection, known_tables: Sequence[Type[Table]] = TABLES):
        self._connection = connection
        self._tables = tuple(known_tables)

    def close(self) -> None:
        engine = self._connection.engine
        self._connection.close()
        engine.dispose()

    def create_all(self) -> None:
        tables.create_all(self._connection, self._tables)

    def drop_all(self) -> None:
        tables.drop_all(self._connection, self._tables)

    def insert_agencies(self, agencies: Sequence[Agency]) -> None:
        insert_batch(self._connection, Agency, agencies)

    def select_agencies(self) -> List[Agency]:
        return select_all(self._connection, Agency)

    def insert_stops(self, stops: Sequence[Stop]) -> None:
        insert_batch(self._connection, Stop, stops)

    def select_stops(self) -> List[Stop]:
        return select_all(self._connection, Stop)

    def insert_routes(self, routes: Sequence[Route]) -> None:
        insert_batch(self._connection, Route, routes)

    def select_routes(self, route_id: Optional[RouteId] = None) -> List[Route]:
        if route_id is None:
            return select_all(self._connection, Route)
        return select_where(self._connection, Route, "route_id", route_id)

    def insert_trips(self, trips: Sequence[Trip]) -> None:
        insert_batch(self._connection, Trip, trips)

    def select_trips(self, route_id: Optional[RouteId] = None) -> List[Trip]:
        if route_id is None:
            return select_all(self._connection, Trip)
        return select_where(self._connection, Trip, "route_id", route_id)

    def insert_stop_times(self, stop_times: Sequence[StopTime]) -> None:
        insert_batch(self._connection, StopTime, stop_times)

    def select_stop_times(self) -> List[StopTime]:
        return select_all(self._connection, StopTime)
