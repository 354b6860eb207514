"""Source schema snapshots, diffing and consistency checks."""

from srcsync.schema.changes import (
    DataTypeChange,
    MetadataChange,
    PartitionInconsistency,
    SourceColumnAdded,
    SourceColumnNotFound,
    SourceQueryError,
    describe_change,
)
from srcsync.schema.consistency import PartitionConsistencyChecker
from srcsync.schema.diff import ColumnDiffer
from srcsync.schema.snapshot import (
    SchemaProvider,
    SchemaSnapshot,
    SnapshotColumn,
    build_snapshot,
)
from srcsync.schema.type_mapping import map_provider_type

__all__ = [
    "ColumnDiffer",
    "DataTypeChange",
    "MetadataChange",
    "PartitionConsistencyChecker",
    "PartitionInconsistency",
    "SchemaProvider",
    "SchemaSnapshot",
    "SnapshotColumn",
    "SourceColumnAdded",
    "SourceColumnNotFound",
    "SourceQueryError",
    "build_snapshot",
    "describe_change",
    "map_provider_type",
]
