"""Loading of extracted records into tables and junction tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .extraction import get_value_from_json
from .utility import create_natural_key_map, join, split_string_by_delimiter

_log = logging.getLogger(__name__)

_DEFAULT_BATCH_SIZE = 1000


class InsertError(RuntimeError):
    """Raised when records cannot be inserted."""


def _elements(value: Any) -> list[Any]:
    """Items of a JSON value as iterated element-wise."""
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return [value[key] for key in sorted(value)]
    return [value]


def _batch_size(table_config: Mapping[str, Any]) -> int:
    size = table_config.get("batchSize", _DEFAULT_BATCH_SIZE)
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError("batchSize must be an integer")
    if size < 1:
        raise ValueError("batchSize must be positive")
    return size


class InsertValues:
    """Builds and runs INSERT statements through a query executor."""

    def __init__(self, executor: Any) -> None:
        self.executor = executor

    def lookup_id(self, table: str, natural_key: Mapping[str, str]) -> str:
        """Return the id of the row of ``table`` matching ``natural_key``, or ``""``."""
        if not natural_key:
            _log.error("Invalid natural key: it must hold key-value pairs.")
            return ""
        conditions = " AND ".join(
            f"{column} = '{value}'" for column, value in sorted(natural_key.items())
        )
        query = f"SELECT id FROM {table} WHERE {conditions}"
        try:
            return self.executor.execute_query_returning_id(query)
        except Exception:
            _log.warning(
                "No ID found for table %s with keys: %s",
                table,
                ", ".join(f"{column}={value}" for column, value in sorted(natural_key.items())),
            )
            return ""

    def _render_row(self, record: Any, columns: Iterable[Mapping[str, Any]]) -> str | None:
        values = []
        for column in columns:
            if "lookup" in column:
                key_text = get_value_from_json(record, column["jsonPath"])
                key_values = split_string_by_delimiter(key_text, " ")
                natural_key = create_natural_key_map(column["lookup"]["naturalKey"], key_values)
                value = self.lookup_id(column["lookup"]["table"], natural_key)
                if not value:
                    return None
            else:
                value = get_value_from_json(record, column["jsonPath"])
                col_type = column["type"]
                if not isinstance(col_type, str):
                    raise TypeError("column type must be a string")
                if col_type == "jsonb":
                    value = f"'{value}'::jsonb"
                elif col_type != "int":
                    value = f"'{value}'"
            values.append(value)
        return "(" + join(values, ", ") + ")"

    def _flush(self, base_query: str, rows: list[str]) -> None:
        self.executor.execute_query(base_query + join(rows, ", ") + ";")

    def batch_insert(
        self, table: str, records: Iterable[Any], table_config: Mapping[str, Any]
    ) -> None:
        """Insert ``records`` into ``table`` in batches inside one transaction.

        Records whose foreign-key lookup fails are skipped. Any error rolls
        the transaction back and is raised as ``InsertError``.
        """
        try:
            self.executor.execute_query("BEGIN")
            batch_size = _batch_size(table_config)
            columns = list(table_config["columns"])
            names = []
            for column in columns:
                name = column["name"]
                if not isinstance(name, str):
                    raise TypeError("column name must be a string")
                names.append(name)
            base_query = f"INSERT INTO {table} (" + join(names, ", ") + ") VALUES "

            pending: list[str] = []
            count = 0
            for record in records:
                row = self._render_row(record, columns)
                if row is None:
                    continue
                pending.append(row)
                count += 1
                if count % batch_size == 0:
                    self._flush(base_query, pending)
                    pending = []
            if count % batch_size != 0:
                self._flush(base_query, pending)
        except Exception as exc:
            self.executor.execute_query("ROLLBACK")
            raise InsertError(f"Error in batch_insert: {exc!r}") from exc
        self.executor.execute_query("COMMIT")

    def _natural_key(self, record: Any, keys: Iterable[Any]) -> dict[str, str]:
        natural_key = {}
        for key in keys:
            if not isinstance(key, str):
                raise TypeError("natural key names must be strings")
            natural_key[key] = get_value_from_json(record, key)
        return natural_key

    def _junction_records(
        self, config: Mapping[str, Any], rel: Mapping[str, Any], data: Any, root_path: str
    ) -> list[dict[str, str]]:
        from_table = rel["fromTable"]
        to_table = rel["toTable"]
        columns_config = list(rel["columns"])
        to_data_path = rel["dataPath"]
        from_keys = config["tables"][from_table]["naturalKey"]
        to_keys = config["tables"][to_table]["naturalKey"]

        junction_records = []
        for from_record in _elements(data[root_path][from_table]):
            from_id = self.lookup_id(from_table, self._natural_key(from_record, from_keys))
            if not from_id:
                _log.warning("Skipping record of %s", from_table)
                continue
            targets = from_record.get(to_data_path) if isinstance(from_record, dict) else None
            for to_data in _elements(targets):
                to_id = self.lookup_id(to_table, self._natural_key(to_data, to_keys))
                if not to_id:
                    _log.warning("Skipping relationship to %s", to_table)
                    continue
                junction_record = {}
                for col_config in columns_config:
                    col_name = col_config["name"]
                    if "_id" in col_name:
                        source_table = col_config["source"]["table"]
                        junction_record[col_name] = from_id if source_table == from_table else to_id
                    else:
                        junction_record[col_name] = get_value_from_json(
                            to_data, col_config["jsonPath"]
                        )
                junction_records.append(junction_record)
        return junction_records

    def process_relationships(
        self,
        config: Mapping[str, Any],
        relationships_config: Iterable[Mapping[str, Any]],
        data: Any,
        root_path: str,
    ) -> None:
        """Fill the junction tables of many-to-many relationships."""
        try:
            for rel in relationships_config:
                if rel["type"] != "MANY_TO_MANY":
                    continue
                junction_table = rel["junctionTable"]
                records = self._junction_records(config, rel, data, root_path)
                self.batch_insert(junction_table, records, rel)
        except Exception as exc:
            raise InsertError(f"Error processing relationships: {exc}") from exc