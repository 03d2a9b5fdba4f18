"""Logging utility configuration for hibou.

This module provides a centralized logger for the GTFS import and query tool.
The logger writes to stdout with a consistent format across all modules.

Usage:
    from common.logging_utils import logger
    logger.info("Your message here")
"""

import logging
import sys
from typing import Union

# Create a logger with a specific name for the GTFS tool
logger = logging.getLogger("hibou")

# Configure the logger only if it doesn't already have handlers
# This prevents duplicate handlers when the module is imported multiple times
if not logger.hasHandlers():
    handler = logging.StreamHandler(sys.stdout)

    # Format: "INFO - Your log message here"
    formatter = logging.Formatter(
        fmt='%(levelname)s - %(message)s'
    )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.setLevel(logging.INFO)
logger.propagate = True


def set_log_level(level: Union[int, str]) -> None:
    """Change the level of the shared logger (accepts ``"DEBUG"`` or ``logging.DEBUG``)."""
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
