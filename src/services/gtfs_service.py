"""Import pipeline: rebuild the store from a GTFS source."""

from __future__ import annotations

from typing import Dict, List, Protocol, Sequence, Type, TypeVar

from common.logging_utils import logger
from common.timing import Timer
from schemas.common.table import Table
from schemas.schema_registry import TABLES
from storage.base import GtfsStorage

T = TypeVar("T", bound=Table)


class RecordSource(Protocol):
    """Anything that can produce a batch of records for a record type."""

    def read(self, table: Type[T]) -> List[T]:
        ...


class GtfsService:
    """Drops, recreates and fills every relation from a record source."""

    def __init__(self, storage: GtfsStorage, source: RecordSource) -> None:
        self._storage = storage
        self._source = source

    def drop_tables(self) -> None:
        self._storage.drop_all()

    def create_tables(self) -> None:
        self._storage.create_all()

    def insert_tables(self, tables: Sequence[Type[Table]] = TABLES) -> Dict[str, int]:
        """Read each table from the source and insert it as one batch.

        Stops at the first failure; batches already inserted stay committed.

        Returns:
            Rows inserted per table name.
        """
        counts: Dict[str, int] = {}

        with Timer() as total:
            for table in tables:
                with Timer() as read_timer:
                    records = self._source.read(table)
                with Timer() as insert_timer:
                    self._storage.insert(table, records)

                counts[table.table_name()] = len(records)
                logger.info(
                    "Table loaded: table=%s rows=%d read=%.2fs insert=%.2fs",
                    table.table_name(),
                    len(records),
                    read_timer.duration,
                    insert_timer.duration,
                )

        logger.info(
            "Import complete: tables=%d rows=%d duration=%.2fs",
            len(counts),
            sum(counts.values()),
            total.duration,
        )
        return counts

    def rebuild(self) -> Dict[str, int]:
        """Destructive rebuild: drop, create, then insert every table."""
        self.drop_tables()
        self.create_tables()
        return self.insert_tables()
