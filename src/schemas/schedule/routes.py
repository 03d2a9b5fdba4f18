"""
Routes Table Schema
==================

Record type and frame model for the GTFS routes table.
"""

import enum
from dataclasses import dataclass
from typing import Optional

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from schemas.common.table import Table
from schemas.schedule.agency import AgencyId

# Route identifier (ex: 1001)
RouteId = str


class RouteType(enum.IntEnum):
    TRAM = 0
    SUBWAY = 1
    RAIL = 2
    BUS = 3
    FERRY = 4
    CABLE_TRAM = 5
    AERIAL_LIFT = 6
    FUNICULAR = 7
    TROLLEYBUS = 11
    MONORAIL = 12


@dataclass(frozen=True)
class Route(Table):
    """A group of trips displayed to riders as a single service."""

    route_id: RouteId
    agency_id: AgencyId
    route_type: RouteType
    route_short_name: Optional[str] = None
    route_long_name: Optional[str] = None
    route_desc: Optional[str] = None
    route_url: Optional[str] = None
    route_color: Optional[str] = None
    route_text_color: Optional[str] = None
    route_sort_order: Optional[int] = None
    jp_parent_route_id: Optional[str] = None


class RoutesFrame(pa.DataFrameModel):
    """
    Pandera DataFrameModel for routes.txt.
    Table-specific field definitions with proper validation.
    """

    # Route identification
    route_id:				Series[str]				= pa.Field(nullable=False, unique=True, description="Unique identifier for the route")
    agency_id:				Series[str]				= pa.Field(nullable=False, description="Agency identifier this route belongs to")
    route_type:				Series[pd.Int64Dtype]	= pa.Field(nullable=False, isin=[m.value for m in RouteType], description="Type of transportation used on the route")

    # Route names and descriptions
    route_short_name:		Series[str]				= pa.Field(nullable=True,  description="Short name of the route")
    route_long_name:		Series[str]				= pa.Field(nullable=True,  description="Full name of the route")
    route_desc:				Series[str]				= pa.Field(nullable=True,  description="Description of the route")

    # Route presentation
    route_url:				Series[str]				= pa.Field(nullable=True,  description="URL of a web page about the route")
    route_color:			Series[str]				= pa.Field(nullable=True,  description="Route color designation (hex color)")
    route_text_color:		Series[str]				= pa.Field(nullable=True,  description="Route text color designation (hex color)")
    route_sort_order:		Series[pd.Int64Dtype]	= pa.Field(nullable=True,  ge=0, description="Order for sorting routes in lists")
    jp_parent_route_id:		Series[str]				= pa.Field(nullable=True,  description="Parent route identifier (GTFS-JP)")

    class Config:
        strict = False
        coerce = False


# Table configuration
Route._table_name = "routes"
Route._columns = (
    "route_id",
    "agency_id",
    "route_type",
    "route_short_name",
    "route_long_name",
    "route_desc",
    "route_url",
    "route_color",
    "route_text_color",
    "route_sort_order",
    "jp_parent_route_id",
)
Route._primary_key = ("route_id",)
# route_type holds a RouteType code
Route._create_sql = """
    route_id text not null primary key,
    agency_id text not null,
    route_type int not null,
    route_short_name text,
    route_long_name text,
    route_desc text,
    route_url text,
    route_color text,
    route_text_color text,
    route_sort_order int,
    jp_parent_route_id text
"""
Route._dataframe_model = RoutesFrame

__all__ = [
    'Route',
    'RouteId',
    'RouteType',
    'RoutesFrame',
]
