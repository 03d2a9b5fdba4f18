"""
Table Contract
==============

Base class every importable GTFS record type derives from.

A record type is a frozen dataclass whose fields map one-to-one onto the
columns of its backing relation. Table metadata is attached to the class
after its definition, mirroring how frame models carry their table config:

    Trip._table_name = "trips"
    Trip._columns = ("route_id", "service_id", "trip_id", ...)
    Trip._create_sql = "trip_id text primary key, ..."
"""

import dataclasses
import enum
import functools
import numbers
import typing
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, TypeVar

from common.errors import BindingError, DeserializationError, SchemaError

T = TypeVar("T", bound="Table")

_NONE_TYPE = type(None)


class Table:
    """Schema contract: storage name, ordered columns and creation clause."""

    _table_name: ClassVar[str] = ""
    _columns: ClassVar[Tuple[str, ...]] = ()
    _create_sql: ClassVar[Optional[str]] = None
    _primary_key: ClassVar[Tuple[str, ...]] = ()
    _dataframe_model: ClassVar[Optional[type]] = None

    @classmethod
    def table_name(cls) -> str:
        return cls._table_name

    @classmethod
    def column_names(cls) -> Tuple[str, ...]:
        return cls._columns

    @classmethod
    def create_sql(cls) -> str:
        """Column definitions and constraints, without the ``CREATE TABLE`` envelope."""
        if not cls._create_sql or not cls._create_sql.strip():
            raise SchemaError(
                f"{cls.__name__} does not declare a creation clause for table '{cls._table_name}'"
            )
        return cls._create_sql

    @classmethod
    def primary_key(cls) -> Tuple[str, ...]:
        return cls._primary_key

    @classmethod
    def dataframe_model(cls) -> Optional[type]:
        return cls._dataframe_model

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(field.name for field in dataclasses.fields(cls))

    def to_params(self) -> Dict[str, Any]:
        """Named insert parameters keyed by column, enum members encoded as integers."""
        columns = self.column_names()
        fields = self.field_names()
        if set(columns) != set(fields):
            missing = sorted(set(columns) - set(fields))
            extra = sorted(set(fields) - set(columns))
            raise BindingError(
                f"{type(self).__name__} fields do not match columns of '{self.table_name()}' "
                f"(missing={missing}, unexpected={extra})"
            )
        return {column: encode_value(getattr(self, column)) for column in columns}

    @classmethod
    def from_row(cls: Type[T], row: Mapping[str, Any]) -> T:
        """Rebuild a record from a row mapping, checking nulls, types and enum codes."""
        types = field_types(cls)
        values = {}
        for column in cls.column_names():
            if column not in row:
                raise DeserializationError(
                    f"Row from '{cls.table_name()}' has no value for column '{column}'"
                )
            if column not in types:
                raise DeserializationError(
                    f"{cls.__name__} has no field for column '{column}'"
                )
            values[column] = coerce_value(row[column], types[column], column)
        return cls(**values)


@functools.lru_cache(maxsize=None)
def field_types(cls: type) -> Dict[str, Any]:
    hints = typing.get_type_hints(cls)
    return {field.name: hints[field.name] for field in dataclasses.fields(cls)}


def unwrap_optional(annotation: Any) -> Tuple[Any, bool]:
    """Return ``(inner_type, nullable)`` for ``Optional[X]`` or a plain ``X``."""
    if typing.get_origin(annotation) is typing.Union:
        args = typing.get_args(annotation)
        inner = [arg for arg in args if arg is not _NONE_TYPE]
        if len(inner) == 1 and len(args) == 2:
            return inner[0], True
    return annotation, False


def encode_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    return value


def coerce_value(value: Any, annotation: Any, column: str) -> Any:
    """Convert a raw stored value into the Python type declared for ``column``."""
    inner, nullable = unwrap_optional(annotation)

    if value is None:
        if nullable:
            return None
        raise DeserializationError(f"Unexpected null in non-nullable column '{column}'")

    if isinstance(inner, type) and issubclass(inner, enum.IntEnum):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise DeserializationError(
                f"Column '{column}' expects an integer {inner.__name__} code, got {value!r}"
            )
        try:
            return inner(int(value))
        except ValueError as exc:
            raise DeserializationError(
                f"Unknown {inner.__name__} code {value!r} in column '{column}'"
            ) from exc

    if inner is str:
        if isinstance(value, str):
            return value
    elif inner is int:
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            return int(value)
    elif inner is float:
        if isinstance(value, numbers.Real) and not isinstance(value, bool):
            return float(value)
    else:
        raise DeserializationError(f"Unsupported field type {inner!r} for column '{column}'")

    raise DeserializationError(
        f"Column '{column}' expects {inner.__name__}, got {type(value).__name__} {value!r}"
    )


__all__ = [
    "Table",
    "coerce_value",
    "encode_value",
    "field_types",
    "unwrap_optional",
]
