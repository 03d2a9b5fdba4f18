"""Read-side services over the storage capability interface."""

from __future__ import annotations

from typing import List, Optional

from schemas.schedule.agency import Agency
from schemas.schedule.routes import Route, RouteId
from schemas.schedule.stop_times import StopTime
from schemas.schedule.stops import Stop
from schemas.schedule.trips import Trip
from storage.base import GtfsStorage


class AgencyService:
    def __init__(self, storage: GtfsStorage) -> None:
        self._storage = storage

    def fetch(self) -> List[Agency]:
        return self._storage.select_agencies()


class StopService:
    def __init__(self, storage: GtfsStorage) -> None:
        self._storage = storage

    def fetch(self) -> List[Stop]:
        return self._storage.select_stops()


class RouteService:
    def __init__(self, storage: GtfsStorage) -> None:
        self._storage = storage

    def fetch(self, route_id: Optional[RouteId] = None) -> List[Route]:
        return self._storage.select_routes(route_id)


class TripService:
    def __init__(self, storage: GtfsStorage) -> None:
        self._storage = storage

    def fetch(self, route_id: Optional[RouteId] = None) -> List[Trip]:
        """Trips ordered by trip_id, optionally limited to one route."""
        trips = self._storage.select_trips(route_id)
        return sorted(trips, key=lambda trip: trip.trip_id)


class StopTimeService:
    def __init__(self, storage: GtfsStorage) -> None:
        self._storage = storage

    def fetch(self) -> List[StopTime]:
        """Stop times grouped by trip, in stop order."""
        stop_times = self._storage.select_stop_times()
        return sorted(stop_times, key=lambda st: (st.trip_id, st.stop_sequence))
