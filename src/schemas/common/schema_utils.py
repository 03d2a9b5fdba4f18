"""
Schema Utilities
================

Utility functions for shaping raw GTFS frames against pandera schemas
before they are turned into typed records.
"""

from typing import Any, Dict, List

import pandas as pd

from common.logging_utils import logger


def _columns_of_kind(schema_class, prefix: str) -> List[str]:
    """Names of schema columns whose dtype string starts with ``prefix`` (e.g. 'int', 'float')."""
    schema_instance = schema_class.to_schema()
    names = []
    for col_name, col_schema in schema_instance.columns.items():
        dtype = getattr(col_schema, "dtype", None)
        if dtype is None:
            continue
        dtypes_to_check = [str(dtype).lower()]
        alias = getattr(dtype, "str_alias", None)
        if alias is not None:
            dtypes_to_check.append(str(alias).lower())
        if any(s.startswith(prefix) for s in dtypes_to_check):
            names.append(col_name)
    return names


def add_missing_schema_fields(df: pd.DataFrame, schema_class) -> pd.DataFrame:
    """
    Add fields that are defined in the schema but missing from the DataFrame.
    Optional GTFS files routinely omit optional columns; they are added as null text.

    Args:
        df: Input DataFrame
        schema_class: Pandera DataFrameModel class

    Returns:
        DataFrame with missing schema fields added as null columns
    """
    result_df = df.copy()
    schema_instance = schema_class.to_schema()

    added_fields = []
    for field_name in schema_instance.columns.keys():
        if field_name not in result_df.columns:
            # Same text dtype read_csv(dtype=str) gives; numeric columns are coerced afterwards
            result_df[field_name] = pd.Series([None] * len(result_df), index=result_df.index, dtype=str)
            added_fields.append(field_name)

    if added_fields:
        logger.debug("Added %d missing schema fields for %s: %s", len(added_fields), schema_class.__name__, added_fields)

    return result_df


def drop_extra_columns_not_in_schema(df: pd.DataFrame, schema_class) -> pd.DataFrame:
    """
    Drop columns from the DataFrame that don't appear in the schema.

    Args:
        df: Input DataFrame
        schema_class: Pandera DataFrameModel class

    Returns:
        DataFrame with only columns that exist in the schema
    """
    schema_columns = set(schema_class.to_schema().columns.keys())
    extra_columns = [col for col in df.columns if col not in schema_columns]

    if not extra_columns:
        return df

    logger.info("Dropped %d extra columns not in %s: %s", len(extra_columns), schema_class.__name__, extra_columns)
    return df.drop(columns=extra_columns)


def coerce_numeric_fields(df: pd.DataFrame, schema_class) -> pd.DataFrame:
    """
    Coerce integer-typed columns to pandas nullable Int64 and float-typed columns to float64.

    - Text that is not numeric raises ``ValueError``.
    - Integer values with fractional parts become NA to avoid silent truncation;
      the schema's nullability check then decides whether that is acceptable.

    Args:
        df: Input DataFrame with text columns
        schema_class: Pandera DataFrameModel class

    Returns:
        DataFrame with numeric fields coerced
    """
    result_df = df.copy()

    for c in _columns_of_kind(schema_class, "int"):
        if c in result_df.columns:
            ser = pd.to_numeric(result_df[c], errors="raise")
            ser = ser.where(ser.isna() | ((ser % 1) == 0))
            result_df[c] = ser.astype("float64").astype("Int64")

    for c in _columns_of_kind(schema_class, "float"):
        if c in result_df.columns:
            result_df[c] = pd.to_numeric(result_df[c], errors="raise").astype("float64")

    return result_df


def order_columns_by_schema(df: pd.DataFrame, schema_class) -> pd.DataFrame:
    """
    Order DataFrame columns to match the order they appear in the schema.

    Args:
        df: Input DataFrame
        schema_class: Pandera DataFrameModel class

    Returns:
        DataFrame with columns ordered according to schema field order
    """
    schema_columns = list(schema_class.to_schema().columns.keys())
    ordered_columns = [col for col in schema_columns if col in df.columns]
    return df[ordered_columns]


def clean_and_validate_dataframe(df: pd.DataFrame, schema_class) -> pd.DataFrame:
    """
    Clean and validate a raw GTFS DataFrame against a pandera schema class.

    Args:
        df: Raw DataFrame read with every column as text
        schema_class: Pandera DataFrameModel class

    Returns:
        Processed and validated DataFrame

    Raises:
        ValueError: a numeric column holds non-numeric text
        pandera.errors.SchemaError: the frame fails validation
    """
    # 1. Add missing columns and drop extra ones
    df = add_missing_schema_fields(df, schema_class)
    df = drop_extra_columns_not_in_schema(df, schema_class)

    # 2. Coerce numeric fields
    df = coerce_numeric_fields(df, schema_class)

    # 3. Sort DataFrame columns to match schema order
    df = order_columns_by_schema(df, schema_class)

    # 4. Final validation using Pandera
    return schema_class.to_schema().validate(df)


def dataframe_to_rows(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a validated frame into plain row dicts, mapping every NA flavour to ``None``."""
    rows = []
    for record in df.to_dict(orient="records"):
        rows.append({key: (None if _is_missing(value) else value) for key, value in record.items()})
    return rows


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


__all__ = [
    "add_missing_schema_fields",
    "clean_and_validate_dataframe",
    "coerce_numeric_fields",
    "dataframe_to_rows",
    "drop_extra_columns_not_in_schema",
    "order_columns_by_schema",
]
