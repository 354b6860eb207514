"""Tabular model definition modules."""

from srcsync.model.loader import load_model, parse_model
from srcsync.model.models import DataColumn, DataSource, Model, Partition, Table

__all__ = [
    "DataColumn",
    "DataSource",
    "Model",
    "Partition",
    "Table",
    "load_model",
    "parse_model",
]
