"""Check that every partition of a table returns the same source schema."""

import logging
from typing import Optional

from srcsync.model.models import Partition, Table
from srcsync.schema.changes import MetadataChange, PartitionInconsistency
from srcsync.schema.snapshot import SchemaProvider, SchemaSnapshot, build_snapshot

logger = logging.getLogger(__name__)


class PartitionConsistencyChecker:
    """Compare each secondary partition's schema with the primary partition's.

    At most one PartitionInconsistency is reported per partition. A differing
    column count is enough evidence on its own; columns are only compared when
    the counts agree.
    """

    def __init__(self, provider: SchemaProvider) -> None:
        self._provider = provider

    def check(self, table: Table) -> list[MetadataChange]:
        changes: list[MetadataChange] = []
        if len(table.partitions) < 2:
            return changes

        primary = build_snapshot(table.primary_partition, self._provider)

        for partition in table.partitions[1:]:
            other = build_snapshot(partition, self._provider)
            if not self._is_consistent(primary, other):
                logger.debug(
                    f"Partition '{partition.name}' differs from primary partition "
                    f"of table '{table.name}'"
                )
                changes.append(self._inconsistency(table, partition))

        return changes

    def _is_consistent(
        self, primary: Optional[SchemaSnapshot], other: Optional[SchemaSnapshot]
    ) -> bool:
        # A partition whose schema is unknown cannot be shown to agree.
        if primary is None or other is None:
            return False
        if len(primary) != len(other):
            return False

        for column in other:
            expected = primary.get(column.name)
            if expected is None or expected.mapped_type != column.mapped_type:
                return False
        return True

    def _inconsistency(self, table: Table, partition: Partition) -> PartitionInconsistency:
        return PartitionInconsistency(
            table=table, partition=partition, source_query=partition.query
        )
