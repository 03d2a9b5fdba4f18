"""Render record sequences as CSV or JSON."""

from __future__ import annotations

import enum
import sys
from typing import Optional, Sequence, TextIO, Type

import pandas as pd

from schemas.common.table import Table


class Format(str, enum.Enum):
    CSV = "csv"
    JSON = "json"


def records_to_dataframe(table: Type[Table], records: Sequence[Table]) -> pd.DataFrame:
    """One row per record in declared column order; values keep their Python types."""
    rows = [record.to_params() for record in records]
    return pd.DataFrame(rows, columns=list(table.column_names()), dtype=object)


def write_records(
    table: Type[Table],
    records: Sequence[Table],
    fmt: Format = Format.CSV,
    stream: Optional[TextIO] = None,
) -> None:
    """Write ``records`` to ``stream`` (stdout by default) in ``fmt``."""
    stream = stream if stream is not None else sys.stdout
    df = records_to_dataframe(table, records)

    if Format(fmt) is Format.CSV:
        df.to_csv(stream, index=False, lineterminator="\n")
    else:
        stream.write(df.to_json(orient="records", force_ascii=False))
        stream.write("\n")
