"""Shared test helpers for srcsync tests."""

from typing import Optional

from srcsync.model.models import DataColumn, DataSource, Partition, Table
from srcsync.types import CanonicalType, DataSourceKind, Suppression


class FakeSchemaProvider:
    """Schema provider answering from a query -> columns mapping.

    Queries not in the mapping are reported as absent schemas. Every call is
    recorded in ``calls``.
    """

    def __init__(self, schemas: Optional[dict[str, list[tuple[str, str]]]] = None):
        self.schemas = schemas or {}
        self.calls: list[str] = []

    def get_schema(self, query: str) -> Optional[list[tuple[str, str]]]:
        self.calls.append(query)
        return self.schemas.get(query)


def make_source(
    name: str = "warehouse", kind: DataSourceKind = DataSourceKind.PROVIDER
) -> DataSource:
    return DataSource(name=name, kind=kind)


def make_column(
    name: str,
    data_type: CanonicalType = CanonicalType.STRING,
    source_column: str = "",
    suppressions: tuple[Suppression, ...] = (),
    expression: Optional[str] = None,
) -> DataColumn:
    """Helper to create a DataColumn with defaults."""
    return DataColumn(
        name=name,
        data_type=data_type,
        source_column=source_column,
        expression=expression,
        suppressions=frozenset(suppressions),
    )


def make_table(
    name: str,
    columns: list[DataColumn] | None = None,
    queries: list[str] | None = None,
    source: DataSource | None = None,
    suppressions: tuple[Suppression, ...] = (),
) -> Table:
    """Helper to create a Table with one partition per query."""
    source = source or make_source()
    queries = queries if queries is not None else [f"SELECT * FROM {name.lower()}"]
    partitions = [
        Partition(name=f"{name}_{i}" if i else name, data_source=source, query=q)
        for i, q in enumerate(queries)
    ]
    return Table(
        name=name,
        columns=columns or [],
        partitions=partitions,
        suppressions=frozenset(suppressions),
    )
