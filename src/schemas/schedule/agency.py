"""
Agency Table Schema
==================

Record type and frame model for the GTFS agency table.
https://www.gtfs.jp/developpers-guide/format-reference.html#agency
"""

from dataclasses import dataclass
from typing import Optional

import pandera.pandas as pa
from pandera.typing import Series

from schemas.common.table import Table

# Agency identifier (ex: 8000020130001, 8000020130001_1)
AgencyId = str


@dataclass(frozen=True)
class Agency(Table):
    """A transit operator."""

    agency_id: AgencyId
    agency_name: str
    agency_url: str
    agency_timezone: str
    agency_lang: str
    agency_phone: Optional[str] = None
    agency_fare_url: Optional[str] = None
    agency_email: Optional[str] = None


class AgencyFrame(pa.DataFrameModel):
    """
    Pandera DataFrameModel for agency.txt.
    Table-specific field definitions with proper validation.
    """

    # Agency identification
    agency_id:				Series[str]				= pa.Field(nullable=False, unique=True, description="Unique identifier for the agency")
    agency_name:			Series[str]				= pa.Field(nullable=False, description="Full name of the agency")
    agency_url:				Series[str]				= pa.Field(nullable=False, description="URL of the agency's website")
    agency_timezone:		Series[str]				= pa.Field(nullable=False, description="Timezone of the agency")
    agency_lang:			Series[str]				= pa.Field(nullable=False, description="Primary language used by the agency")

    # Contact details
    agency_phone:			Series[str]				= pa.Field(nullable=True,  description="Voice telephone number of the agency")
    agency_fare_url:		Series[str]				= pa.Field(nullable=True,  description="URL of a web page with fare information")
    agency_email:			Series[str]				= pa.Field(nullable=True,  description="Email address of the agency")

    class Config:
        strict = False  # Extra columns are dropped before validation
        coerce = False  # Numeric columns are coerced before validation


# Table configuration
Agency._table_name = "agency"
Agency._columns = (
    "agency_id",
    "agency_name",
    "agency_url",
    "agency_timezone",
    "agency_lang",
    "agency_phone",
    "agency_fare_url",
    "agency_email",
)
Agency._primary_key = ("agency_id",)
Agency._create_sql = """
    agency_id text not null primary key,
    agency_name text not null,
    agency_url text not null,
    agency_timezone text not null,
    agency_lang text not null,
    agency_phone text,
    agency_fare_url text,
    agency_email text
"""
Agency._dataframe_model = AgencyFrame

__all__ = [
    'Agency',
    'AgencyFrame',
    'AgencyId',
]
