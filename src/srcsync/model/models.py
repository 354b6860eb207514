"""Tabular model representation classes."""

from dataclasses import dataclass, field
from typing import Optional

from srcsync.types import CanonicalType, DataSourceKind, Suppression


@dataclass
class DataSource:
    """A named connection that partitions read from."""

    name: str
    kind: DataSourceKind = DataSourceKind.PROVIDER

    @property
    def is_query_capable(self) -> bool:
        """Only provider sources can describe the schema of an arbitrary query."""
        return self.kind is DataSourceKind.PROVIDER


@dataclass(eq=False)
class DataColumn:
    """Column definition.

    A column with an expression is calculated inside the model and has no
    source column; it is excluded from reconciliation. Columns compare and
    hash by identity, so two columns with the same name stay distinct.
    """

    name: str
    data_type: CanonicalType
    source_column: str = ""
    expression: Optional[str] = None
    suppressions: frozenset[Suppression] = frozenset()
    table: Optional["Table"] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Default the source column to the column name for data columns."""
        if not self.source_column and self.expression is None:
            self.source_column = self.name

    @property
    def is_data_column(self) -> bool:
        return self.expression is None

    @property
    def full_name(self) -> str:
        """Qualified 'Table'[Column] form used in messages."""
        table_name = self.table.name if self.table is not None else ""
        return f"'{table_name}'[{self.name}]"

    def is_suppressed(self, suppression: Suppression) -> bool:
        return suppression in self.suppressions


@dataclass
class Partition:
    """A slice of a table loaded by one query against one data source."""

    name: str
    data_source: DataSource
    query: str
    table: Optional["Table"] = field(default=None, repr=False, compare=False)


@dataclass
class Table:
    """Table definition.

    Partitions are ordered; the first one is the primary partition whose
    source query is compared column by column against the model.
    """

    name: str
    columns: list[DataColumn] = field(default_factory=list)
    partitions: list[Partition] = field(default_factory=list)
    suppressions: frozenset[Suppression] = frozenset()

    def __post_init__(self) -> None:
        for column in self.columns:
            column.table = self
        for partition in self.partitions:
            partition.table = self

    def __hash__(self) -> int:
        """Hash based on name only for dict/set usage."""
        return hash(self.name)

    @property
    def data_columns(self) -> list[DataColumn]:
        """Columns backed by a source column, in model order."""
        return [c for c in self.columns if c.is_data_column]

    @property
    def primary_partition(self) -> Optional[Partition]:
        return self.partitions[0] if self.partitions else None

    def get_column(self, name: str) -> Optional[DataColumn]:
        """Get a column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def is_suppressed(self, suppression: Suppression) -> bool:
        return suppression in self.suppressions


@dataclass
class Model:
    """Complete model definition."""

    data_sources: dict[str, DataSource] = field(default_factory=dict)
    tables: list[Table] = field(default_factory=list)

    def get_table(self, name: str) -> Optional[Table]:
        """Get a table by name."""
        for table in self.tables:
            if table.name == name:
                return table
        return None

    def get_data_source(self, name: str) -> Optional[DataSource]:
        """Get a data source by name."""
        return self.data_sources.get(name)

    def tables_using(self, data_source: DataSource) -> list[Table]:
        """Tables whose primary partition reads from exactly this data source."""
        return [
            t
            for t in self.tables
            if t.primary_partition is not None
            and t.primary_partition.data_source is data_source
        ]
