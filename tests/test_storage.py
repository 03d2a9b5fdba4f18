"""Behaviour every storage adapter must share (SQLite and in-memory)."""

import pytest

from common.errors import BindingError, ConstraintError, SchemaError
from schemas.common.table import Table
from schemas.schedule.agency import Agency
from schemas.schedule.routes import Route, RouteType
from schemas.schedule.stop_times import StopTime
from schemas.schedule.stops import Stop
from schemas.schedule.trips import Trip
from storage.memory import MemoryGtfs


def test_lifecycle_twice_in_succession(storage):
    for _ in range(2):
        storage.drop_all()
        storage.create_all()
    assert storage.select_trips() == []


def test_round_trip_every_entity(storage, agencies, stops, routes, trips, stop_times):
    storage.insert_agencies(agencies)
    storage.insert_stops(stops)
    storage.insert_routes(routes)
    storage.insert_trips(trips)
    storage.insert_stop_times(stop_times)

    assert set(storage.select_agencies()) == set(agencies)
    assert set(storage.select_stops()) == set(stops)
    assert set(storage.select_routes()) == set(routes)
    assert set(storage.select_trips()) == set(trips)
    assert set(storage.select_stop_times()) == set(stop_times)


def test_round_trip_is_field_for_field(storage, stops):
    storage.insert_stops(stops[:1])

    [stored] = storage.select_stops()

    for column in Stop.column_names():
        assert getattr(stored, column) == getattr(stops[0], column)
    assert type(stored.location_type) is type(stops[0].location_type)


def test_trips_scenario(storage):
    t1 = Trip(route_id="R1", service_id="S1", trip_id="T1")
    t2 = Trip(route_id="R1", service_id="S1", trip_id="T2")
    storage.insert_trips([t1, t2])

    assert sorted(storage.select_trips(), key=lambda t: t.trip_id) == [t1, t2]

    with pytest.raises(ConstraintError):
        storage.insert_trips([Trip(route_id="R9", service_id="S9", trip_id="T1")])

    assert len(storage.select_trips()) == 2


NULL_IDENTIFIERS = [
    (
        "insert_agencies",
        "select_agencies",
        Agency(agency_id=None, agency_name="A", agency_url="http://example.com", agency_timezone="Asia/Tokyo", agency_lang="ja"),
    ),
    ("insert_stops", "select_stops", Stop(stop_id=None, stop_name="S", stop_lat=35.0, stop_lon=139.0)),
    ("insert_routes", "select_routes", Route(route_id=None, agency_id="A", route_type=RouteType.BUS)),
    ("insert_trips", "select_trips", Trip(route_id="R1", service_id="S1", trip_id=None)),
]


@pytest.mark.parametrize("insert, select, record", NULL_IDENTIFIERS)
def test_null_identifier_is_a_constraint_error(storage, insert, select, record):
    with pytest.raises(ConstraintError):
        getattr(storage, insert)([record])

    assert getattr(storage, select)() == []


def test_failed_batch_leaves_table_unchanged(storage, stop_times):
    storage.insert_stop_times(stop_times)
    duplicate = StopTime(trip_id="T1", stop_id="S9", stop_sequence=2)
    fresh = StopTime(trip_id="T2", stop_id="S1", stop_sequence=1)

    with pytest.raises(ConstraintError):
        storage.insert_stop_times([fresh, duplicate])

    assert set(storage.select_stop_times()) == set(stop_times)


def test_empty_insert_leaves_state_unchanged(storage, routes):
    storage.insert_routes(routes)
    storage.insert_routes([])
    assert len(storage.select_routes()) == 2


def test_select_routes_by_id(storage, routes):
    storage.insert_routes(routes)
    assert storage.select_routes("R2") == [routes[1]]
    assert storage.select_routes("R404") == []


def test_select_trips_by_route(storage, trips):
    extra = Trip(route_id="R2", service_id="S1", trip_id="T3")
    storage.insert_trips(trips + [extra])

    assert set(storage.select_trips("R1")) == set(trips)
    assert storage.select_trips("R2") == [extra]
    assert storage.select_trips("R404") == []


def test_null_in_required_field_is_rejected(storage):
    with pytest.raises(ConstraintError):
        storage.insert_agencies([Agency(
            agency_id="A1",
            agency_name=None,
            agency_url="http://example.com",
            agency_timezone="Asia/Tokyo",
            agency_lang="ja",
        )])
    assert storage.select_agencies() == []


def test_mixed_batch_is_a_binding_error(storage, trips, routes):
    with pytest.raises(BindingError):
        storage.insert_routes([routes[0], trips[0]])
    assert storage.select_routes() == []


def test_insert_dispatches_by_record_type(storage, stops):
    storage.insert(Stop, stops)
    assert len(storage.select_stops()) == 2


def test_insert_rejects_unknown_record_type(storage):
    with pytest.raises(SchemaError):
        storage.insert(Table, [])


def test_relations_must_exist(storage, trips):
    storage.drop_all()

    with pytest.raises(SchemaError):
        storage.insert_trips(trips)
    with pytest.raises(SchemaError):
        storage.select_routes()


def test_memory_store_checks_creation_clauses():
    class Unclausable(Route):
        pass

    Unclausable._create_sql = None
    with pytest.raises(SchemaError, match="creation clause"):
        MemoryGtfs(known_tables=[Unclausable]).create_all()


def test_storage_is_a_context_manager(routes):
    with MemoryGtfs() as store:
        store.create_all()
        store.insert_routes(routes)
        assert len(store.select_routes()) == 2
