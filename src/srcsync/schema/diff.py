"""Compare a partition's source query against the model's data columns."""

import logging

from srcsync.model.models import DataColumn, Partition, Table
from srcsync.schema.changes import (
    DataTypeChange,
    MetadataChange,
    SourceColumnAdded,
    SourceColumnNotFound,
    SourceQueryError,
)
from srcsync.schema.snapshot import SchemaProvider, SnapshotColumn, build_snapshot
from srcsync.types import Suppression

logger = logging.getLogger(__name__)


def references_source_column(reference: str, source_name: str) -> bool:
    """True if a model column reference names the source column.

    The reference may be the bare name or the name wrapped in brackets, in any
    case.
    """
    wanted = reference.casefold()
    return wanted in (source_name.casefold(), f"[{source_name}]".casefold())


class ColumnDiffer:
    """Compare one partition's source schema with its table's data columns."""

    def __init__(self, provider: SchemaProvider) -> None:
        self._provider = provider

    def diff(self, partition: Partition) -> list[MetadataChange]:
        """Return changes in discovery order.

        A partition whose query cannot be described yields a single
        SourceQueryError and nothing else.
        """
        table = partition.table
        snapshot = build_snapshot(partition, self._provider)
        if snapshot is None:
            return [SourceQueryError(table=table, source_query=partition.query)]

        changes: list[MetadataChange] = []
        matched: set[DataColumn] = set()

        for source_col in snapshot:
            model_cols = self._find_columns(table, source_col.name)

            if not model_cols:
                if not table.is_suppressed(Suppression.IGNORE_SOURCE_COLUMN_ADDED):
                    changes.append(
                        SourceColumnAdded(
                            table=table,
                            source_column=source_col.name,
                            source_type=source_col.mapped_type,
                            provider_type=source_col.provider_type,
                        )
                    )

            for model_col in model_cols:
                matched.add(model_col)
                changes.extend(self._diff_column(table, model_col, source_col))

        for model_col in table.data_columns:
            if model_col in matched:
                continue
            if model_col.is_suppressed(Suppression.IGNORE_MISSING_SOURCE_COLUMN):
                continue
            changes.append(SourceColumnNotFound(table=table, column=model_col))

        logger.debug(
            f"Partition '{partition.name}' of table '{table.name}': "
            f"{len(changes)} changes"
        )
        return changes

    def _find_columns(self, table: Table, source_name: str) -> list[DataColumn]:
        """Data columns mapped from a source column, with or without brackets."""
        return [
            col
            for col in table.data_columns
            if references_source_column(col.source_column, source_name)
        ]

    def _diff_column(
        self, table: Table, model_col: DataColumn, source_col: SnapshotColumn
    ) -> list[MetadataChange]:
        if model_col.data_type == source_col.mapped_type:
            return []
        if model_col.is_suppressed(Suppression.IGNORE_DATA_TYPE_CHANGE):
            return []
        return [
            DataTypeChange(
                table=table,
                column=model_col,
                source_column=source_col.name,
                source_type=source_col.mapped_type,
                provider_type=source_col.provider_type,
            )
        ]
