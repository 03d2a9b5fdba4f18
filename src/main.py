#  Command-line entry point for hibou
"""
hibou: import a GTFS feed into SQLite and read it back.

Usage:
    hibou make-db path/to/gtfs --database hibou.db
    hibou get trips --route-id 1001 --format json
"""

import argparse
import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Type

from common.config import Settings, get_settings
from common.errors import FeedError, StorageError
from common.logging_utils import logger, set_log_level
from database import gtfs_db
from feed import csv_reader
from output.writer import Format, write_records
from schemas.common.table import Table
from schemas.schedule import Agency, Route, Stop, StopTime, Trip
from services.fetch_service import AgencyService, RouteService, StopService, StopTimeService, TripService
from services.gtfs_service import GtfsService
from storage.base import GtfsStorage

Fetcher = Callable[[GtfsStorage, argparse.Namespace], Sequence[Table]]

ENTITIES: Dict[str, Tuple[Type[Table], Fetcher]] = {
    "agencies": (Agency, lambda storage, args: AgencyService(storage).fetch()),
    "stops": (Stop, lambda storage, args: StopService(storage).fetch()),
    "routes": (Route, lambda storage, args: RouteService(storage).fetch(args.route_id)),
    "trips": (Trip, lambda storage, args: TripService(storage).fetch(args.route_id)),
    "stop-times": (StopTime, lambda storage, args: StopTimeService(storage).fetch()),
}

# Entities that support lookup by route
ROUTE_FILTERED = ("routes", "trips")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hibou", description="GTFS to SQLite import and query tool")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    make_db = subparsers.add_parser("make-db", help="Rebuild the database from a GTFS directory")
    make_db.add_argument("gtfs_dir", help="Directory containing the extracted GTFS text files")
    make_db.add_argument("-d", "--database", default=settings.database, help="Database file (default: %(default)s)")

    get = subparsers.add_parser("get", help="Print stored records")
    get.add_argument("entity", choices=sorted(ENTITIES))
    get.add_argument("-d", "--database", default=settings.database, help="Database file (default: %(default)s)")
    get.add_argument(
        "-f",
        "--format",
        default=settings.output_format,
        choices=[fmt.value for fmt in Format],
        help="Output format (default: %(default)s)",
    )
    get.add_argument("--route-id", default=None, help="Only routes/trips for this route")

    return parser


def run_make_db(args: argparse.Namespace) -> int:
    source = csv_reader.init(args.gtfs_dir)
    with gtfs_db.init(args.database) as storage:
        counts = GtfsService(storage, source).rebuild()
    logger.info("Database %s built: rows=%d", args.database, sum(counts.values()))
    return 0


def run_get(args: argparse.Namespace) -> int:
    table, fetch = ENTITIES[args.entity]
    with gtfs_db.init(args.database) as storage:
        records = fetch(storage, args)
    write_records(table, records, Format(args.format))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.command == "get" and args.route_id is not None and args.entity not in ROUTE_FILTERED:
        parser.error(f"--route-id is only supported for: {', '.join(ROUTE_FILTERED)}")

    # Defaults come from the environment and bypass argparse choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    if args.command == "get" and args.format not in [fmt.value for fmt in Format]:
        parser.error(f"invalid output format {args.format!r}")

    set_log_level(args.log_level)

    handlers = {
        "make-db": run_make_db,
        "get": run_get,
    }
    try:
        return handlers[args.command](args)
    except (StorageError, FeedError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
