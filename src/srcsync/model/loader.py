"""Load model definitions from YAML files."""

from pathlib import Path

import yaml

from srcsync.exceptions import ModelLoadError
from srcsync.model.models import DataColumn, DataSource, Model, Partition, Table
from srcsync.types import CanonicalType, DataSourceKind, Suppression

VALID_MODEL_FIELDS = {"data_sources", "tables"}

VALID_DATA_SOURCE_FIELDS = {"name", "kind", "description"}

VALID_TABLE_FIELDS = {"table", "description", "columns", "partitions", "suppress"}

VALID_COLUMN_FIELDS = {
    "name",
    "data_type",
    "source_column",
    "expression",
    "suppress",
    "description",
}

VALID_PARTITION_FIELDS = {"name", "data_source", "query"}


def load_model(model_path: Path) -> Model:
    """Load a model from a single YAML file."""
    if not model_path.is_file():
        raise ModelLoadError(f"Model file does not exist: {model_path}")

    with open(model_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ModelLoadError(f"Invalid YAML in {model_path}: {e}") from e

    if data is None:
        raise ModelLoadError(f"Empty YAML file: {model_path}")
    if not isinstance(data, dict):
        raise ModelLoadError(f"Model file must contain a mapping: {model_path}")

    return parse_model(data)


def parse_model(data: dict) -> Model:
    """Parse a model definition from a dictionary."""
    _check_fields(data, VALID_MODEL_FIELDS, "model definition")

    data_sources: dict[str, DataSource] = {}
    for ds_data in data.get("data_sources") or []:
        data_source = _parse_data_source(ds_data)
        if data_source.name in data_sources:
            raise ModelLoadError(f"Duplicate data source name '{data_source.name}'")
        data_sources[data_source.name] = data_source

    tables: list[Table] = []
    seen: set[str] = set()
    for table_data in data.get("tables") or []:
        table = _parse_table(table_data, data_sources)
        if table.name in seen:
            raise ModelLoadError(f"Duplicate table name '{table.name}'")
        seen.add(table.name)
        tables.append(table)

    return Model(data_sources=data_sources, tables=tables)


def _check_fields(data: dict, valid: set[str], what: str) -> None:
    unknown_fields = set(data.keys()) - valid
    if unknown_fields:
        raise ModelLoadError(
            f"Unknown field(s) in {what}: {', '.join(sorted(unknown_fields))}"
        )


def _parse_suppressions(values: list | None, owner: str) -> frozenset[Suppression]:
    suppressions = set()
    for value in values or []:
        try:
            suppressions.add(Suppression(str(value).lower()))
        except ValueError:
            valid = ", ".join(s.value for s in Suppression)
            raise ModelLoadError(
                f"Unknown suppression '{value}' on {owner}. Valid values: {valid}"
            ) from None
    return frozenset(suppressions)


def _parse_data_source(data: dict) -> DataSource:
    _check_fields(data, VALID_DATA_SOURCE_FIELDS, "data source definition")

    name = data.get("name")
    if not name:
        raise ModelLoadError("Data source definition missing 'name' field")

    kind_value = str(data.get("kind", DataSourceKind.PROVIDER.value)).lower()
    try:
        kind = DataSourceKind(kind_value)
    except ValueError:
        raise ModelLoadError(
            f"Data source '{name}' has unknown kind '{kind_value}'"
        ) from None

    return DataSource(name=name, kind=kind)


def _parse_table(data: dict, data_sources: dict[str, DataSource]) -> Table:
    _check_fields(data, VALID_TABLE_FIELDS, "table definition")

    name = data.get("table")
    if not name:
        raise ModelLoadError("Table definition missing 'table' field")

    columns = [_parse_column(col, name) for col in data.get("columns") or []]

    seen = set()
    for col in columns:
        if col.name in seen:
            raise ModelLoadError(f"Duplicate column name '{col.name}' in table '{name}'")
        seen.add(col.name)

    partitions = [
        _parse_partition(p, name, data_sources) for p in data.get("partitions") or []
    ]
    if not partitions:
        raise ModelLoadError(f"Table '{name}' must have at least one partition")

    return Table(
        name=name,
        columns=columns,
        partitions=partitions,
        suppressions=_parse_suppressions(data.get("suppress"), f"table '{name}'"),
    )


def _parse_column(data: dict, table_name: str) -> DataColumn:
    _check_fields(data, VALID_COLUMN_FIELDS, "column definition")

    name = data.get("name")
    if not name:
        raise ModelLoadError(f"Column definition in table '{table_name}' missing 'name' field")

    type_name = data.get("data_type")
    if not type_name:
        raise ModelLoadError(f"Column '{name}' missing 'data_type' field")
    try:
        data_type = CanonicalType.from_name(str(type_name))
    except ValueError as e:
        raise ModelLoadError(f"Column '{name}': {e}") from e

    return DataColumn(
        name=name,
        data_type=data_type,
        source_column=data.get("source_column") or "",
        expression=data.get("expression"),
        suppressions=_parse_suppressions(data.get("suppress"), f"column '{name}'"),
    )


def _parse_partition(
    data: dict, table_name: str, data_sources: dict[str, DataSource]
) -> Partition:
    _check_fields(data, VALID_PARTITION_FIELDS, "partition definition")

    name = data.get("name") or table_name

    ds_name = data.get("data_source")
    if not ds_name:
        raise ModelLoadError(f"Partition '{name}' missing 'data_source' field")
    data_source = data_sources.get(ds_name)
    if data_source is None:
        raise ModelLoadError(
            f"Partition '{name}' refers to undeclared data source '{ds_name}'"
        )

    return Partition(name=name, data_source=data_source, query=data.get("query") or "")
