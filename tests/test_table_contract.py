"""Tests for the record schema contract and the registry's fail-fast checks."""

from dataclasses import dataclass
from typing import Optional

import pytest

from common.errors import BindingError, DeserializationError, SchemaError
from schemas.common.table import Table, coerce_value, unwrap_optional
from schemas.schedule.routes import Route, RouteType
from schemas.schedule.stops import Stop
from schemas.schedule.trips import Direction, Trip
from schemas.schema_registry import TABLES, validate_table


@dataclass(frozen=True)
class Widget(Table):
    widget_id: str
    size: Optional[int] = None


Widget._table_name = "widgets"
Widget._columns = ("widget_id", "size")
Widget._primary_key = ("widget_id",)


@dataclass(frozen=True)
class Gadget(Table):
    gadget_id: str


Gadget._table_name = "gadgets"
Gadget._columns = ("gadget_id", "colour")
Gadget._create_sql = "gadget_id text primary key, colour text"


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.__name__)
def test_columns_match_fields_in_order(table):
    assert table.column_names() == table.field_names()
    assert len(table.column_names()) == len(table.__dataclass_fields__)


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.__name__)
def test_registered_tables_declare_complete_contract(table):
    validate_table(table)
    assert table.table_name()
    assert table.create_sql().strip()
    assert set(table.primary_key()) <= set(table.column_names())
    assert table.dataframe_model() is not None


@pytest.mark.parametrize("table", TABLES, ids=lambda t: t.__name__)
def test_frame_model_covers_every_column(table):
    frame_columns = list(table.dataframe_model().to_schema().columns)
    assert sorted(frame_columns) == sorted(table.column_names())


def test_table_names_are_unique_and_registered():
    names = [table.table_name() for table in TABLES]
    assert len(names) == len(set(names))
    assert names == ["agency", "stops", "routes", "trips", "stop_times"]


def test_missing_creation_clause_is_a_configuration_error():
    with pytest.raises(SchemaError, match="creation clause"):
        Widget.create_sql()
    with pytest.raises(SchemaError):
        validate_table(Widget)


def test_columns_not_matching_fields_fail_validation():
    with pytest.raises(SchemaError, match="do not match"):
        validate_table(Gadget)


def test_validate_rejects_non_table_types():
    with pytest.raises(SchemaError):
        validate_table(dict)


def test_to_params_encodes_enums_as_integers(trips):
    params = trips[0].to_params()

    assert list(params) == list(Trip.column_names())
    assert params["direction_id"] == 0
    assert type(params["direction_id"]) is int
    assert params["wheelchair_accessible"] == 1
    assert params["trip_headsign"] == "Shimbashi"
    assert params["block_id"] is None


def test_to_params_rejects_mismatched_columns():
    with pytest.raises(BindingError, match="colour"):
        Gadget(gadget_id="G1").to_params()


def test_from_row_rebuilds_typed_record(trips):
    row = dict(trips[0].to_params())

    rebuilt = Trip.from_row(row)

    assert rebuilt == trips[0]
    assert rebuilt.direction_id is Direction.OUTBOUND


def test_from_row_ignores_extra_keys(routes):
    row = dict(routes[0].to_params(), rowid=1)
    assert Route.from_row(row) == routes[0]


def test_from_row_rejects_null_in_required_field(trips):
    row = dict(trips[0].to_params(), route_id=None)
    with pytest.raises(DeserializationError, match="route_id"):
        Trip.from_row(row)


def test_from_row_rejects_missing_column(trips):
    row = dict(trips[0].to_params())
    del row["service_id"]
    with pytest.raises(DeserializationError, match="service_id"):
        Trip.from_row(row)


def test_from_row_rejects_unknown_enum_code(routes):
    row = dict(routes[0].to_params(), route_type=99)
    with pytest.raises(DeserializationError, match="RouteType"):
        Route.from_row(row)


def test_from_row_rejects_type_mismatch(stops):
    row = dict(stops[0].to_params(), stop_lat="north")
    with pytest.raises(DeserializationError, match="stop_lat"):
        Stop.from_row(row)


def test_coerce_value_conversions():
    assert coerce_value(3, RouteType, "route_type") is RouteType.BUS
    assert coerce_value(1, float, "stop_lat") == 1.0
    assert coerce_value(None, Optional[int], "route_sort_order") is None
    with pytest.raises(DeserializationError):
        coerce_value(True, int, "stop_sequence")
    with pytest.raises(DeserializationError):
        coerce_value(1.5, int, "stop_sequence")
    with pytest.raises(DeserializationError):
        coerce_value("3", RouteType, "route_type")


def test_unwrap_optional():
    assert unwrap_optional(Optional[str]) == (str, True)
    assert unwrap_optional(str) == (str, False)
