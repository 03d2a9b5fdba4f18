"""Environment-driven settings for the command-line front end."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    database: str = "hibou.db"
    output_format: str = "csv"
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read settings from ``HIBOU_*`` environment variables, falling back to defaults."""
    defaults = Settings()
    return Settings(
        database=os.getenv("HIBOU_DATABASE") or defaults.database,
        output_format=(os.getenv("HIBOU_FORMAT") or defaults.output_format).lower(),
        log_level=(os.getenv("HIBOU_LOG_LEVEL") or defaults.log_level).upper(),
    )
