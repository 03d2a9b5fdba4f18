"""Storage capability interface and its in-memory adapter."""

from .base import GtfsStorage
from .memory import MemoryGtfs

__all__ = [
    'GtfsStorage',
    'MemoryGtfs',
]
