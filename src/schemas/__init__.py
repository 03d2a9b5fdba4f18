"""
Centralized Schema Definitions
============================

This module provides centralized schema definitions for GTFS data processing.

Schedule schemas define the record types, table contracts and frame models
of the GTFS Schedule tables.
"""

from .schedule import *

__version__ = "1.0.0"
