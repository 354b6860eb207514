"""srcsync - reconcile tabular model columns with their source queries."""

from srcsync.reconcile import Reconciler
from srcsync.types import CanonicalType, ChangeType, DataSourceKind, Suppression

__all__ = [
    "CanonicalType",
    "ChangeType",
    "DataSourceKind",
    "Reconciler",
    "Suppression",
]
