"""
Stop Times Table Schema
======================

Record type and frame model for the GTFS stop_times table.
"""

import enum
from dataclasses import dataclass
from typing import Optional

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from schemas.common.table import Table
from schemas.schedule.stops import StopId
from schemas.schedule.trips import TripId


class PickupType(enum.IntEnum):
    REGULAR = 0
    NONE = 1
    PHONE_AGENCY = 2
    COORDINATE_WITH_DRIVER = 3


class DropOffType(enum.IntEnum):
    REGULAR = 0
    NONE = 1
    PHONE_AGENCY = 2
    COORDINATE_WITH_DRIVER = 3


class Timepoint(enum.IntEnum):
    APPROXIMATE = 0
    EXACT = 1


@dataclass(frozen=True)
class StopTime(Table):
    """Arrival and departure of a trip at one stop."""

    trip_id: TripId
    stop_id: StopId
    stop_sequence: int
    arrival_time: Optional[str] = None
    departure_time: Optional[str] = None
    stop_headsign: Optional[str] = None
    pickup_type: Optional[PickupType] = None
    drop_off_type: Optional[DropOffType] = None
    shape_dist_traveled: Optional[float] = None
    timepoint: Optional[Timepoint] = None


class StopTimesFrame(pa.DataFrameModel):
    """
    Pandera DataFrameModel for stop_times.txt.
    Table-specific field definitions with proper validation.
    """

    # Trip and stop identification
    trip_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the trip")
    stop_id:				Series[str]				= pa.Field(nullable=False, description="Unique identifier for the stop")
    stop_sequence:			Series[pd.Int64Dtype]	= pa.Field(nullable=False, ge=0, description="Order of stops for this trip")

    # Time information (HH:MM:SS, may exceed 24:00:00)
    arrival_time:			Series[str]				= pa.Field(nullable=True,  str_matches=r"^\d{1,2}:\d{2}:\d{2}$", description="Arrival time at the stop")
    departure_time:			Series[str]				= pa.Field(nullable=True,  str_matches=r"^\d{1,2}:\d{2}:\d{2}$", description="Departure time from the stop")

    # Stop attributes
    stop_headsign:			Series[str]				= pa.Field(nullable=True,  description="Text that appears on signage identifying the trip's destination")
    pickup_type:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[m.value for m in PickupType], description="Pickup method (0=regular, 1=none, 2=phone agency, 3=coordinate with driver)")
    drop_off_type:			Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[m.value for m in DropOffType], description="Drop off method (0=regular, 1=none, 2=phone agency, 3=coordinate with driver)")
    shape_dist_traveled:	Series[float]			= pa.Field(nullable=True,  ge=0, description="Distance traveled along the shape from the first stop")
    timepoint:				Series[pd.Int64Dtype]	= pa.Field(nullable=True,  isin=[m.value for m in Timepoint], description="Whether times are exact (0=approximate, 1=exact)")

    class Config:
        strict = False
        coerce = False
        unique = ["trip_id", "stop_sequence"]


# Table configuration
StopTime._table_name = "stop_times"
StopTime._columns = (
    "trip_id",
    "stop_id",
    "stop_sequence",
    "arrival_time",
    "departure_time",
    "stop_headsign",
    "pickup_type",
    "drop_off_type",
    "shape_dist_traveled",
    "timepoint",
)
StopTime._primary_key = ("trip_id", "stop_sequence")
# pickup_type, drop_off_type and timepoint hold PickupType / DropOffType / Timepoint codes
StopTime._create_sql = """
    trip_id text not null,
    stop_id text not null,
    stop_sequence int not null,
    arrival_time text,
    departure_time text,
    stop_headsign text,
    pickup_type int,
    drop_off_type int,
    shape_dist_traveled real,
    timepoint int,
    primary key (trip_id, stop_sequence)
"""
StopTime._dataframe_model = StopTimesFrame

__all__ = [
    'DropOffType',
    'PickupType',
    'StopTime',
    'StopTimesFrame',
    'Timepoint',
]
