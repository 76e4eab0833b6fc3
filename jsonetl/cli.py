"""Command-line entry point running the whole extract-and-load process."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .config_loader import load_config
from .connection import Connection
from .extraction import extract_data, get_json_records
from .insert_values import InsertValues
from .query_executor import QueryExecutor
from .schema_manager import SchemaManager

DEFAULT_CONFIG_PATH = "../config/config.json"

# Opens a DB-API connection from a connection string; installed by the embedding
# application, since no database driver ships with the package.
connector: Callable[[str], Any] | None = None


def run_etl(config: Mapping[str, Any], connection: Connection) -> None:
    """Create the configured schema and load the source data through ``connection``."""
    source = config["dataSource"]
    started = time.perf_counter()
    data = extract_data(source["filePath"])
    elapsed_us = int((time.perf_counter() - started) * 1_000_000)
    if data is None:
        raise RuntimeError("The JSON data file could not be loaded.")
    print(f"Time spent reading the JSON: {elapsed_us} microseconds")

    executor = QueryExecutor(connection.raw_connection)
    schema_manager = SchemaManager(executor)
    insert_values = InsertValues(executor)

    load_order = list(config["globalOptions"]["loadOrder"])
    root_path = source["rootPath"]
    schema_manager.create_tables(config["tables"], load_order)
    schema_manager.create_relationships(config["relationships"])

    for table_name in load_order:
        records = get_json_records(data, table_name, root_path)
        insert_values.batch_insert(table_name, records, config["tables"][table_name])

    insert_values.process_relationships(config, config["relationships"], data, root_path)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ETL described by a configuration file; return the exit status."""
    parser = argparse.ArgumentParser(description="Load JSON data into a relational database.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="configuration file")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        if connector is None:
            raise RuntimeError("No database driver is available to connect with.")
        with Connection.from_config(config["database"], connector) as connection:
            run_etl(config, connection)
        print("\nETL process completed successfully")
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())