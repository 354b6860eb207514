"""Column schema snapshots taken from a partition's source query."""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol, Sequence

from srcsync.model.models import Partition
from srcsync.schema.type_mapping import map_provider_type
from srcsync.types import CanonicalType, ColumnName, ProviderTypeName

logger = logging.getLogger(__name__)


class SchemaProvider(Protocol):
    """Protocol for anything that can describe the columns a query returns.

    Returns None when the query cannot be executed or yields no schema; it
    must not raise for a bad query.
    """

    def get_schema(
        self, query: str
    ) -> Optional[Sequence[tuple[ColumnName, ProviderTypeName]]]: ...


@dataclass(frozen=True)
class SnapshotColumn:
    """One column of a source query result."""

    name: ColumnName
    mapped_type: CanonicalType
    provider_type: ProviderTypeName


class SchemaSnapshot:
    """Ordered, case-insensitive mapping of source column names to types."""

    def __init__(self, columns: Iterable[SnapshotColumn] = ()) -> None:
        self._columns: dict[str, SnapshotColumn] = {}
        for column in columns:
            self.add(column)

    @staticmethod
    def _key(name: str) -> str:
        return name.casefold()

    def add(self, column: SnapshotColumn) -> None:
        """Insert a column, replacing any existing one with the same name."""
        self._columns[self._key(column.name)] = column

    def get(self, name: str) -> Optional[SnapshotColumn]:
        return self._columns.get(self._key(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._columns

    def __iter__(self) -> Iterator[SnapshotColumn]:
        return iter(self._columns.values())

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        cols = ", ".join(f"{c.name}: {c.mapped_type.value}" for c in self)
        return f"SchemaSnapshot({cols})"


def build_snapshot(
    partition: Partition, provider: SchemaProvider
) -> Optional[SchemaSnapshot]:
    """Describe the partition's query and map every column to a canonical type.

    Returns None when the partition's data source cannot run queries or the
    provider could not produce a schema. An empty snapshot means the query
    succeeded with zero columns.
    """
    if not partition.data_source.is_query_capable:
        logger.debug(
            f"Partition '{partition.name}' uses non-query data source "
            f"'{partition.data_source.name}'"
        )
        return None

    schema = provider.get_schema(partition.query)
    if schema is None:
        logger.debug(f"No schema returned for partition '{partition.name}'")
        return None

    snapshot = SchemaSnapshot(
        SnapshotColumn(
            name=col_name,
            mapped_type=map_provider_type(provider_type),
            provider_type=provider_type,
        )
        for col_name, provider_type in schema
    )
    logger.debug(
        f"Partition '{partition.name}' source query returned {len(snapshot)} columns"
    )
    return snapshot
