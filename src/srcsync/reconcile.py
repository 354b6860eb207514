"""Reconcile model tables with their source queries."""

import logging

from srcsync.model.models import DataSource, Model, Partition, Table
from srcsync.schema.changes import MetadataChange
from srcsync.schema.consistency import PartitionConsistencyChecker
from srcsync.schema.diff import ColumnDiffer
from srcsync.schema.snapshot import SchemaProvider

logger = logging.getLogger(__name__)


class Reconciler:
    """Detect changes at partition, table and data source granularity.

    Nothing is cached between calls; every call describes the source queries
    again through the provider.
    """

    def __init__(self, provider: SchemaProvider) -> None:
        self._differ = ColumnDiffer(provider)
        self._checker = PartitionConsistencyChecker(provider)

    def reconcile_partition(self, partition: Partition) -> list[MetadataChange]:
        """Compare one partition's source query against its table's columns."""
        return self._differ.diff(partition)

    def reconcile_table(self, table: Table) -> list[MetadataChange]:
        """Diff the primary partition, then check partition consistency.

        Only the primary partition is diffed column by column. The remaining
        partitions are compared with it only when that diff came back clean.
        """
        primary = table.primary_partition
        if primary is None:
            return []

        changes = self.reconcile_partition(primary)
        if not changes and len(table.partitions) > 1:
            changes.extend(self._checker.check(table))

        logger.debug(f"Table '{table.name}': {len(changes)} changes")
        return changes

    def reconcile_data_source(
        self, model: Model, data_source: DataSource
    ) -> list[MetadataChange]:
        """Reconcile every table whose primary partition reads from the source."""
        changes: list[MetadataChange] = []
        tables = model.tables_using(data_source)
        logger.info(
            f"Checking {len(tables)} table(s) using data source '{data_source.name}'"
        )
        for table in tables:
            changes.extend(self.reconcile_table(table))
        return changes

    def reconcile_model(self, model: Model) -> list[MetadataChange]:
        """Reconcile every table of the model in model order."""
        changes: list[MetadataChange] = []
        for table in model.tables:
            changes.extend(self.reconcile_table(table))
        return changes
