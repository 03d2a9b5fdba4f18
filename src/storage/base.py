"""Storage capability interface that application services depend on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Type

from common.errors import SchemaError
from schemas.common.table import Table
from schemas.schedule.agency import Agency
from schemas.schedule.routes import Route, RouteId
from schemas.schedule.stop_times import StopTime
from schemas.schedule.stops import Stop
from schemas.schedule.trips import Trip


class GtfsStorage(ABC):
    """Transit feed data as an abstract capability, independent of where it lives.

    Inserts are all-or-nothing per batch. Selects either return every record
    or raise; they never return a partial result.
    """

    @abstractmethod
    def create_all(self) -> None:
        """Create every known relation; a relation that already exists is left alone."""

    @abstractmethod
    def drop_all(self) -> None:
        """Drop every known relation that exists."""

    @abstractmethod
    def insert_agencies(self, agencies: Sequence[Agency]) -> None:
        ...

    @abstractmethod
    def select_agencies(self) -> List[Agency]:
        ...

    @abstractmethod
    def insert_stops(self, stops: Sequence[Stop]) -> None:
        ...

    @abstractmethod
    def select_stops(self) -> List[Stop]:
        ...

    @abstractmethod
    def insert_routes(self, routes: Sequence[Route]) -> None:
        ...

    @abstractmethod
    def select_routes(self, route_id: Optional[RouteId] = None) -> List[Route]:
        """All routes, or only the route with ``route_id`` when given."""

    @abstractmethod
    def insert_trips(self, trips: Sequence[Trip]) -> None:
        ...

    @abstractmethod
    def select_trips(self, route_id: Optional[RouteId] = None) -> List[Trip]:
        """All trips, or only the trips running on ``route_id`` when given."""

    @abstractmethod
    def insert_stop_times(self, stop_times: Sequence[StopTime]) -> None:
        ...

    @abstractmethod
    def select_stop_times(self) -> List[StopTime]:
        ...

    def insert(self, table: Type[Table], records: Sequence[Table]) -> None:
        """Route a homogeneous batch of ``table`` records to its insert method."""
        inserters = {
            Agency: self.insert_agencies,
            Stop: self.insert_stops,
            Route: self.insert_routes,
            Trip: self.insert_trips,
            StopTime: self.insert_stop_times,
        }
        try:
            inserter = inserters[table]
        except KeyError:
            raise SchemaError(f"No storage is defined for {table.__name__}") from None
        inserter(records)

    def close(self) -> None:
        """Release the backing store; a no-op for stores without resources."""

    def __enter__(self) -> "GtfsStorage":
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()
