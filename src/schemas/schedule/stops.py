"""
Stops Table Schema
=================

Record type and frame model for the GTFS stops table.
"""

import enum
from dataclasses import dataclass
from typing import Optional

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from schemas.common.table import Table

StopId = str


class LocationType(enum.IntEnum):
    STOP = 0
    STATION = 1
    ENTRANCE = 2
    GENERIC_NODE = 3
    BOARDING_AREA = 4


class WheelchairBoarding(enum.IntEnum):
    UNKNOWN = 0
    POSSIBLE = 1
    NOT_POSSIBLE = 2


@dataclass(frozen=True)
class Stop(Table):
    """A stop, station or station entrance."""

    stop_id: StopId
    stop_name: str
    stop_lat: float
    stop_lon: float
    stop_code: Optional[str] = None
    stop_desc: Optional[str] = None
    zone_id: Optional[str] = None
    stop_url: Optional[str] = None
    location_type: Optional[LocationType] = None
    parent_station: Optional[StopId] = None
    stop_timezone: Optional[str] = None
    wheelchair_boarding: Optional[WheelchairBoarding] = None
    platform_code: Optional[str] = None


class StopsFrame(pa.DataFrameModel):
    """
    Pandera DataFrameModel for stops.txt.
    """

    # Stop identification
    stop_id:				Series[str]				= pa.Field(nullable=False, unique=True, description="Unique identifier for the stop")
    stop_name:				Series[str]				= pa.Field(nullable=False, description="Name of the stop")
    stop_lat:				Series[float]			= pa.Field(nullable=False, ge=-90, le=90, description="Latitude of the stop")
    stop_lon:				Series[float]			= pa.Field(nullable=False, ge=-180, le=180, description="Longitude of the stop")

    # Stop information
    stop_code:				Series[str]				= pa.Field(nullable=True,  description="Short text or number that identifies the stop")
    stop_desc:				Series[str]				= pa.Field(nullable=True,  description="Description of the stop")
    zone_id:				Series[str]				= pa.Field(nullable=True,  description="Fare zone identifier for the stop")
    stop_url:				Series[str]				= pa.Field(nullable=True,  description="URL of a web page about the stop")

    # Stop attributes
    location_type:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[m.value for m in LocationType], description="Type of location (0=stop, 1=station, 2=entrance, 3=generic, 4=boarding area)")
    parent_station:			Series[str]				= pa.Field(nullable=True,  description="Identifier of the parent station")
    stop_timezone:			Series[str]				= pa.Field(nullable=True,  description="Timezone of the stop")
    wheelchair_boarding:	Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[m.value for m in WheelchairBoarding], description="Wheelchair boarding (0=unknown, 1=possible, 2=not possible)")
    platform_code:			Series[str]				= pa.Field(nullable=True,  description="Platform identifier for the stop")

    class Config:
        strict = False
        coerce = False


# Table configuration
Stop._table_name = "stops"
Stop._columns = (
    "stop_id",
    "stop_name",
    "stop_lat",
    "stop_lon",
    "stop_code",
    "stop_desc",
    "zone_id",
    "stop_url",
    "location_type",
    "parent_station",
    "stop_timezone",
    "wheelchair_boarding",
    "platform_code",
)
Stop._primary_key = ("stop_id",)
# location_type and wheelchair_boarding hold LocationType / WheelchairBoarding codes
Stop._create_sql = """
    stop_id text not null primary key,
    stop_name text not null,
    stop_lat real not null,
    stop_lon real not null,
    stop_code text,
    stop_desc text,
    zone_id text,
    stop_url text,
    location_type int,
    parent_station text,
    stop_timezone text,
    wheelchair_boarding int,
    platform_code text
"""
Stop._dataframe_model = StopsFrame

__all__ = [
    'LocationType',
    'Stop',
    'StopId',
    'StopsFrame',
    'WheelchairBoarding',
]
