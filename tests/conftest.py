"""Shared fixtures: storage adapters, sample records and a sample GTFS directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from database import gtfs_db
from database.engine import open_connection
from schemas.schedule.agency import Agency
from schemas.schedule.routes import Route, RouteType
from schemas.schedule.stop_times import DropOffType, PickupType, StopTime, Timepoint
from schemas.schedule.stops import LocationType, Stop, WheelchairBoarding
from schemas.schedule.trips import BikesAllowed, Direction, Trip, WheelchairAccessible
from storage.memory import MemoryGtfs


def count_rows(connection, table_name: str) -> int:
    with connection.begin():
        return connection.exec_driver_sql(f"SELECT COUNT(*) FROM {table_name}").scalar()


def table_exists(connection, table_name: str) -> bool:
    with connection.begin():
        row = connection.exec_driver_sql(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
            (table_name,),
        ).first()
    return row is not None


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "hibou.db"


@pytest.fixture
def connection(db_path):
    conn = open_connection(db_path)
    yield conn
    conn.close()
    conn.engine.dispose()


@pytest.fixture
def sqlite_storage(db_path):
    storage = gtfs_db.init(db_path)
    storage.create_all()
    yield storage
    storage.close()


@pytest.fixture(params=["sqlite", "memory"])
def storage(request, db_path):
    """Each storage adapter, with every relation freshly created."""
    if request.param == "sqlite":
        store = gtfs_db.init(db_path)
    else:
        store = MemoryGtfs()
    store.drop_all()
    store.create_all()
    yield store
    store.close()


@pytest.fixture
def agencies():
    return [
        Agency(
            agency_id="8000020130001",
            agency_name="都営バス",
            agency_url="http://www.kotsu.metro.tokyo.jp/bus/",
            agency_timezone="Asia/Tokyo",
            agency_lang="ja",
            agency_phone="03-3816-5700",
        ),
    ]


@pytest.fixture
def stops():
    return [
        Stop(
            stop_id="S1",
            stop_name="Tokyo Station",
            stop_lat=35.681236,
            stop_lon=139.767125,
            location_type=LocationType.STOP,
            wheelchair_boarding=WheelchairBoarding.POSSIBLE,
        ),
        Stop(
            stop_id="S2",
            stop_name="Shimbashi",
            stop_lat=35.666,
            stop_lon=139.758,
            stop_code="0042",
        ),
    ]


@pytest.fixture
def routes():
    return [
        Route(route_id="R1", agency_id="8000020130001", route_type=RouteType.BUS, route_short_name="都01"),
        Route(route_id="R2", agency_id="8000020130001", route_type=RouteType.BUS, route_sort_order=2),
    ]


@pytest.fixture
def trips():
    return [
        Trip(
            route_id="R1",
            service_id="S1",
            trip_id="T1",
            trip_headsign="Shimbashi",
            direction_id=Direction.OUTBOUND,
            wheelchair_accessible=WheelchairAccessible.ALLOW,
            bikes_allowed=BikesAllowed.DENY,
            jp_office_id="S",
        ),
        Trip(route_id="R1", service_id="S1", trip_id="T2", direction_id=Direction.INBOUND),
    ]


@pytest.fixture
def stop_times():
    return [
        StopTime(
            trip_id="T1",
            stop_id="S1",
            stop_sequence=1,
            arrival_time="08:00:00",
            departure_time="08:00:00",
            pickup_type=PickupType.REGULAR,
            drop_off_type=DropOffType.NONE,
            timepoint=Timepoint.EXACT,
        ),
        StopTime(
            trip_id="T1",
            stop_id="S2",
            stop_sequence=2,
            arrival_time="08:10:00",
            departure_time="08:11:00",
            shape_dist_traveled=1.5,
        ),
    ]


GTFS_FILES = {
    "agency.txt": (
        "agency_id,agency_name,agency_url,agency_timezone,agency_lang,agency_phone\n"
        "8000020130001,都営バス,http://www.kotsu.metro.tokyo.jp/bus/,Asia/Tokyo,ja,03-3816-5700\n"
    ),
    "stops.txt": (
        "stop_id,stop_code,stop_name,stop_lat,stop_lon,location_type,wheelchair_boarding\n"
        "S1,,Tokyo Station,35.681236,139.767125,0,1\n"
        "S2,0042,Shimbashi,35.666,139.758,,\n"
    ),
    "routes.txt": (
        "route_id,agency_id,route_short_name,route_long_name,route_type\n"
        "R1,8000020130001,都01,Shibuya - Shimbashi,3\n"
        "R2,8000020130001,都02,,3\n"
    ),
    "trips.txt": (
        "route_id,service_id,trip_id,trip_headsign,direction_id,wheelchair_accessible,bikes_allowed,jp_office_id\n"
        "R1,WD,T2,Shibuya,1,,,\n"
        "R1,WD,T1,Shimbashi,0,1,2,S\n"
        "R2,SA,T3,,,,,\n"
    ),
    "stop_times.txt": (
        "trip_id,arrival_time,departure_time,stop_id,stop_sequence,pickup_type,drop_off_type,shape_dist_traveled,timepoint\n"
        "T1,08:00:00,08:00:00,S1,1,0,0,0,1\n"
        "T1,08:10:00,08:11:00,S2,2,,,1.5,\n"
        "T2,25:05:00,25:05:00,S2,1,,,,\n"
    ),
}


@pytest.fixture
def gtfs_dir(tmp_path: Path) -> Path:
    """A small, valid GTFS feed extracted into a directory."""
    feed = tmp_path / "gtfs"
    feed.mkdir()
    for name, content in GTFS_FILES.items():
        (feed / name).write_text(content, encoding="utf-8")
    return feed
