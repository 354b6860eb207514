"""Command-line interface for srcsync."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from srcsync.config import Config
from srcsync.exceptions import ConfigError
from srcsync.model.loader import load_model
from srcsync.model.models import Model
from srcsync.reconcile import Reconciler
from srcsync.schema.changes import MetadataChange, describe_change
from srcsync.schema.snapshot import SchemaProvider


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="srcsync",
        description="Check tabular model columns against their source queries",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate model file")
    validate_parser.add_argument("--model-path", type=Path)

    check_parser = subparsers.add_parser(
        "check", help="Compare model columns with source query schemas"
    )
    check_parser.add_argument("--model-path", type=Path)
    check_parser.add_argument("--profile", help="Databricks config profile")
    scope = check_parser.add_mutually_exclusive_group()
    scope.add_argument("--table", help="Only check this table")
    scope.add_argument(
        "--data-source", help="Only check tables whose first partition uses this source"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    if args.command == "validate":
        return cmd_validate(args)
    elif args.command == "check":
        return cmd_check(args)
    else:
        print(f"Command '{args.command}' not yet implemented", file=sys.stderr)
        return 1


def _model_path(args: argparse.Namespace, config: Config) -> Path:
    return args.model_path if args.model_path is not None else Path(config.model_path)


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate model file."""
    try:
        config = Config.from_env()
        model = load_model(_model_path(args, config))
        print(f"Validated {len(model.tables)} tables:")
        for table in model.tables:
            print(
                f"  - {table.name} ({len(table.data_columns)} data columns, "
                f"{len(table.partitions)} partitions)"
            )
        return 0
    except Exception as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return 1


def run_check(
    model: Model,
    provider: SchemaProvider,
    *,
    table_name: Optional[str] = None,
    data_source_name: Optional[str] = None,
) -> list[MetadataChange]:
    """Reconcile the requested scope of the model.

    Raises:
        ValueError: If the named table or data source is not in the model.
    """
    reconciler = Reconciler(provider)

    if table_name is not None:
        table = model.get_table(table_name)
        if table is None:
            raise ValueError(f"Table '{table_name}' not found in model")
        return reconciler.reconcile_table(table)

    if data_source_name is not None:
        data_source = model.get_data_source(data_source_name)
        if data_source is None:
            raise ValueError(f"Data source '{data_source_name}' not found in model")
        return reconciler.reconcile_data_source(model, data_source)

    return reconciler.reconcile_model(model)


def cmd_check(args: argparse.Namespace) -> int:
    """Compare model columns with source query schemas."""
    try:
        from srcsync.databricks.client import DatabricksClient
        from srcsync.databricks.provider import DatabricksSchemaProvider

        config = Config.from_env(profile=args.profile)
        model = load_model(_model_path(args, config))
        config.validate_for_db_ops()

        with DatabricksClient(
            host=config.databricks_host,
            token=config.databricks_token,
            profile=config.profile,
        ) as client:
            changes = run_check(
                model,
                DatabricksSchemaProvider(client),
                table_name=args.table,
                data_source_name=args.data_source,
            )

        if not changes:
            print("No changes detected")
            return 0

        print(f"Found {len(changes)} changes:")
        for change in changes:
            print(f"  {change.change_type.value}: {describe_change(change)}")
        return 1
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"Check error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
