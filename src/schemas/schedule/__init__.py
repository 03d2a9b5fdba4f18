"""
Schedule GTFS Table Schemas
===========================

Record types for the GTFS Schedule tables that hibou imports.
Each record type is a frozen dataclass carrying its table contract
and the pandera frame model used to validate its flat file.
"""

from .agency import Agency
from .stops import Stop
from .routes import Route
from .trips import Trip
from .stop_times import StopTime

__all__ = [
    'Agency',
    'Route',
    'Stop',
    'StopTime',
    'Trip',
]
