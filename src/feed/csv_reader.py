# src/feed/csv_reader.py
"""GTFS flat-file reader: one ``<table_name>.txt`` per record type."""

from __future__ import annotations

from pathlib import Path
from typing import List, Type, TypeVar, Union

import pandas as pd
from pandera.errors import SchemaError as FrameSchemaError
from pandera.errors import SchemaErrors as FrameSchemaErrors

from common.errors import DeserializationError, FeedError
from common.logging_utils import logger
from common.timing import Timer
from schemas.common.schema_utils import clean_and_validate_dataframe, dataframe_to_rows
from schemas.common.table import Table

T = TypeVar("T", bound=Table)


def init(gtfs_dir: Union[str, Path]) -> "GtfsCsv":
    """Open a directory of extracted GTFS text files."""
    path = Path(gtfs_dir)
    if not path.is_dir():
        raise FeedError(f"GTFS directory not found: {path}")
    return GtfsCsv(path)


class GtfsCsv:
    """Reads and validates GTFS text files from a directory."""

    def __init__(self, gtfs_dir: Union[str, Path]) -> None:
        self._dir = Path(gtfs_dir)

    @property
    def directory(self) -> Path:
        return self._dir

    def path_for(self, table: Type[Table]) -> Path:
        return self._dir / f"{table.table_name()}.txt"

    def read_frame(self, table: Type[Table]) -> pd.DataFrame:
        """Load the raw file with every column as text; only empty cells are null."""
        path = self.path_for(table)
        if not path.is_file():
            raise FeedError(f"GTFS file not found: {path}")

        try:
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                na_values=[""],
                encoding="utf-8-sig",
            )
        except (OSError, ValueError) as exc:
            raise FeedError(f"Failed to read {path}: {exc}") from exc

        df.columns = [str(column).strip() for column in df.columns]
        return df

    def read(self, table: Type[T]) -> List[T]:
        """Read, validate and convert the file behind ``table`` into records."""
        model = table.dataframe_model()
        if model is None:
            raise FeedError(f"{table.__name__} has no frame model to validate {table.table_name()}.txt")

        with Timer() as timer:
            df_raw = self.read_frame(table)
            try:
                df = clean_and_validate_dataframe(df_raw, model)
            except (FrameSchemaError, FrameSchemaErrors) as exc:
                raise FeedError(f"{self.path_for(table).name} failed validation: {exc}") from exc
            except (TypeError, ValueError) as exc:
                raise FeedError(f"{self.path_for(table).name} has malformed values: {exc}") from exc

            try:
                records = [table.from_row(row) for row in dataframe_to_rows(df)]
            except DeserializationError as exc:
                raise FeedError(f"{self.path_for(table).name}: {exc}") from exc

        logger.debug(
            "Read %d records from %s in %.2fs",
            len(records),
            self.path_for(table).name,
            timer.duration,
        )
        return records
