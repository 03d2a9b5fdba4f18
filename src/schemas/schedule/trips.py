"""
Trips Table Schema
=================

Record type and frame model for the GTFS trips table.
https://www.gtfs.jp/developpers-guide/format-reference.html#trips
"""

import enum
from dataclasses import dataclass
from typing import Optional

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from schemas.common.table import Table
from schemas.schedule.routes import RouteId

# Trip identifier (ex: 1001_WD_001)
TripId = str

# Service identifier from calendar.txt (ex: WD)
ServiceId = str


class Direction(enum.IntEnum):
    OUTBOUND = 0
    INBOUND = 1


class WheelchairAccessible(enum.IntEnum):
    UNKNOWN = 0
    ALLOW = 1
    DENY = 2


class BikesAllowed(enum.IntEnum):
    UNKNOWN = 0
    ALLOW = 1
    DENY = 2


@dataclass(frozen=True)
class Trip(Table):
    """A single scheduled run of a vehicle along a route."""

    route_id: RouteId
    service_id: ServiceId
    trip_id: TripId
    trip_headsign: Optional[str] = None
    trip_short_name: Optional[str] = None
    direction_id: Optional[Direction] = None
    block_id: Optional[str] = None
    shape_id: Optional[str] = None
    wheelchair_accessible: Optional[WheelchairAccessible] = None
    bikes_allowed: Optional[BikesAllowed] = None
    jp_trip_desc: Optional[str] = None
    jp_trip_desc_symbol: Optional[str] = None
    jp_office_id: Optional[str] = None


class TripsFrame(pa.DataFrameModel):
    """
    Pandera DataFrameModel for trips.txt.
    Table-specific field definitions with proper validation.
    """

    # Trip identification
    route_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the route")
    service_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the service")
    trip_id:				Series[str]				= pa.Field(nullable=False, unique=True, description="Unique identifier for the trip")

    # Trip information
    trip_headsign:			Series[str]				= pa.Field(nullable=True,  description="Text that appears on signage identifying the trip's destination")
    trip_short_name:		Series[str]				= pa.Field(nullable=True,  description="Short text or number that identifies the trip to passengers")
    direction_id:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[m.value for m in Direction], description="Direction of travel (0=outbound, 1=inbound)")

    # Trip attributes
    block_id:				Series[str]				= pa.Field(nullable=True,  description="Block identifier for the trip")
    shape_id:				Series[str]				= pa.Field(nullable=True,  description="Shape identifier for the trip")
    wheelchair_accessible:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[m.value for m in WheelchairAccessible], description="Wheelchair accessibility (0=unknown, 1=allow, 2=deny)")
    bikes_allowed:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[m.value for m in BikesAllowed], description="Bicycle allowance (0=unknown, 1=allow, 2=deny)")

    # GTFS-JP extensions
    jp_trip_desc:			Series[str]				= pa.Field(nullable=True,  description="Trip description")
    jp_trip_desc_symbol:	Series[str]				= pa.Field(nullable=True,  description="Trip description symbol")
    jp_office_id:			Series[str]				= pa.Field(nullable=True,  description="Operating office identifier")

    class Config:
        strict = False
        coerce = False


# Table configuration
Trip._table_name = "trips"
Trip._columns = (
    "route_id",
    "service_id",
    "trip_id",
    "trip_headsign",
    "trip_short_name",
    "direction_id",
    "block_id",
    "shape_id",
    "wheelchair_accessible",
    "bikes_allowed",
    "jp_trip_desc",
    "jp_trip_desc_symbol",
    "jp_office_id",
)
Trip._primary_key = ("trip_id",)
# direction_id, wheelchair_accessible and bikes_allowed hold Direction /
# WheelchairAccessible / BikesAllowed codes
Trip._create_sql = """
    route_id text not null,
    service_id text not null,
    trip_id text not null primary key,
    trip_headsign text,
    trip_short_name text,
    direction_id int,
    block_id text,
    shape_id text,
    wheelchair_accessible int,
    bikes_allowed int,
    jp_trip_desc text,
    jp_trip_desc_symbol text,
    jp_office_id text
"""
Trip._dataframe_model = TripsFrame

__all__ = [
    'BikesAllowed',
    'Direction',
    'ServiceId',
    'Trip',
    'TripId',
    'TripsFrame',
    'WheelchairAccessible',
]
