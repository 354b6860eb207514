"""Detected discrepancies between source queries and the model.

Each kind of change is its own frozen dataclass carrying only the fields that
kind needs. ``MetadataChange`` is the union of all of them.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from srcsync.exceptions import UnknownChangeTypeError
from srcsync.model.models import DataColumn, Partition, Table
from srcsync.types import CanonicalType, ChangeType, ColumnName, ProviderTypeName

__all__ = [
    "SourceColumnAdded",
    "SourceColumnNotFound",
    "DataTypeChange",
    "SourceQueryError",
    "PartitionInconsistency",
    "MetadataChange",
    "describe_change",
]


@dataclass(frozen=True)
class SourceColumnAdded:
    """Source query returns a column no model column is mapped from."""

    table: Table
    source_column: ColumnName
    source_type: CanonicalType
    provider_type: ProviderTypeName
    change_type: ChangeType = field(default=ChangeType.SOURCE_COLUMN_ADDED, init=False)


@dataclass(frozen=True)
class SourceColumnNotFound:
    """Model column refers to a source column the query does not return."""

    table: Table
    column: DataColumn
    change_type: ChangeType = field(
        default=ChangeType.SOURCE_COLUMN_NOT_FOUND, init=False
    )


@dataclass(frozen=True)
class DataTypeChange:
    """Source column maps to a different type than the model column declares."""

    table: Table
    column: DataColumn
    source_column: ColumnName
    source_type: CanonicalType
    provider_type: ProviderTypeName
    change_type: ChangeType = field(default=ChangeType.DATA_TYPE_CHANGE, init=False)


@dataclass(frozen=True)
class SourceQueryError:
    """Source query could not be described."""

    table: Table
    source_query: str
    change_type: ChangeType = field(default=ChangeType.SOURCE_QUERY_ERROR, init=False)


@dataclass(frozen=True)
class PartitionInconsistency:
    """Partition's query returns a different schema than the primary partition."""

    table: Table
    partition: Partition
    source_query: str
    change_type: ChangeType = field(
        default=ChangeType.PARTITION_INCONSISTENCY, init=False
    )


MetadataChange = Union[
    SourceColumnAdded,
    SourceColumnNotFound,
    DataTypeChange,
    SourceQueryError,
    PartitionInconsistency,
]


def _describe_data_type_change(change: DataTypeChange) -> str:
    return (
        f"Column {change.column.full_name} is imported as "
        f"{change.column.data_type.value} but the source type should normally "
        f"map to {change.source_type.value}."
    )


def _describe_source_column_added(change: SourceColumnAdded) -> str:
    return (
        f"Column named '{change.source_column}' exists in the source query for "
        f"table '{change.table.name}', but is not mapped to any model column."
    )


def _describe_source_column_not_found(change: SourceColumnNotFound) -> str:
    return (
        f"Column {change.column.full_name} refers to source column "
        f"{change.column.source_column} which does not seem to exist in the "
        "source query."
    )


def _describe_source_query_error(change: SourceQueryError) -> str:
    return (
        f"Unable to retrieve column metadata for table '{change.table.name}'. "
        "Check partition query."
    )


def _describe_partition_inconsistency(change: PartitionInconsistency) -> str:
    return (
        f'Source query on partition "{change.partition.name}" returns metadata '
        "which differs from other partitions on table "
        f"'{change.table.name}'. This may cause errors during processing."
    )


_DESCRIBERS: dict[ChangeType, Callable[[Any], str]] = {
    ChangeType.DATA_TYPE_CHANGE: _describe_data_type_change,
    ChangeType.SOURCE_COLUMN_ADDED: _describe_source_column_added,
    ChangeType.SOURCE_COLUMN_NOT_FOUND: _describe_source_column_not_found,
    ChangeType.SOURCE_QUERY_ERROR: _describe_source_query_error,
    ChangeType.PARTITION_INCONSISTENCY: _describe_partition_inconsistency,
}


def describe_change(change: MetadataChange) -> str:
    """Render a change as a human-readable message.

    Raises:
        UnknownChangeTypeError: If the change's kind has no message.
    """
    change_type = getattr(change, "change_type", None)
    describer = _DESCRIBERS.get(change_type)
    if describer is None:
        raise UnknownChangeTypeError(
            change_type, f"Cannot describe change of type {change_type!r}"
        )
    return describer(change)
