"""Core type definitions for srcsync."""

from enum import Enum
from typing import TypeAlias

TableName: TypeAlias = str
ColumnName: TypeAlias = str
ProviderTypeName: TypeAlias = str

__all__ = [
    "TableName",
    "ColumnName",
    "ProviderTypeName",
    "CanonicalType",
    "ChangeType",
    "Suppression",
    "DataSourceKind",
]


class CanonicalType(Enum):
    """Semantic data types a modeled column can be declared as."""

    BINARY = "Binary"
    STRING = "String"
    DOUBLE = "Double"
    DECIMAL = "Decimal"
    INT64 = "Int64"
    DATETIME = "DateTime"
    BOOLEAN = "Boolean"

    @classmethod
    def from_name(cls, name: str) -> "CanonicalType":
        """Look up a canonical type by its name, ignoring case."""
        wanted = name.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"Unknown data type: {name!r}")


class ChangeType(Enum):
    """Kinds of discrepancy between a source query and the model."""

    SOURCE_COLUMN_ADDED = "source_column_added"
    SOURCE_COLUMN_NOT_FOUND = "source_column_not_found"
    DATA_TYPE_CHANGE = "data_type_change"
    SOURCE_QUERY_ERROR = "source_query_error"
    PARTITION_INCONSISTENCY = "partition_inconsistency"


class Suppression(Enum):
    """Per-object settings that silence one class of detected change."""

    IGNORE_SOURCE_COLUMN_ADDED = "ignore_source_column_added"
    IGNORE_DATA_TYPE_CHANGE = "ignore_data_type_change"
    IGNORE_MISSING_SOURCE_COLUMN = "ignore_missing_source_column"


class DataSourceKind(Enum):
    """How a data source is accessed."""

    PROVIDER = "provider"
    STRUCTURED = "structured"
