"""Creation and truncation of tables described by configuration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .utility import join


class SchemaError(RuntimeError):
    """Raised when a schema statement cannot be built."""


def _column_definition(column: Mapping[str, Any]) -> str:
    name = column["name"]
    col_type = column["type"]
    if not isinstance(name, str) or not isinstance(col_type, str):
        raise TypeError("column name and type must be strings")
    return f"{name} {col_type}"


def _create_statement(table_name: str, elements: Sequence[str]) -> str:
    return f"CREATE TABLE IF NOT EXISTS {table_name} (\n    " + join(elements, ",\n    ") + "\n);"


class SchemaManager:
    """Issues DDL statements through a query executor."""

    def __init__(self, executor: Any) -> None:
        self.executor = executor

    def create_table(self, table_name: str, table_data: Mapping[str, Any]) -> None:
        """Create one table from its column configuration."""
        try:
            generated_pk = table_data["generatedPK"]
            if not isinstance(generated_pk, bool):
                raise TypeError("generatedPK must be a boolean")
            elements = ["id SERIAL PRIMARY KEY"] if generated_pk else []
            for column in table_data["columns"]:
                definition = _column_definition(column)
                if column.get("unique") is True:
                    definition += " UNIQUE"
                if "lookup" in column:
                    definition += f" REFERENCES {column['lookup']['table']}(id)"
                elements.append(definition)
        except (KeyError, TypeError, AttributeError) as exc:
            raise SchemaError(f"Error creating tables: {exc!r}") from exc
        self.executor.execute_query(_create_statement(table_name, elements))

    def create_tables(self, tables_config: Mapping[str, Any], load_order: Iterable[str]) -> None:
        """Create every table named in ``load_order``, in that order."""
        for table in load_order:
            try:
                table_data = tables_config[table]
            except (KeyError, TypeError) as exc:
                raise SchemaError(f"Error creating tables: {exc!r}") from exc
            self.create_table(table, table_data)

    def create_relationships(self, relationships_config: Iterable[Mapping[str, Any]]) -> None:
        """Create the junction tables of many-to-many relationships."""
        for rel in relationships_config:
            try:
                if rel.get("type") != "MANY_TO_MANY":
                    continue
                columns = []
                for col in rel["columns"]:
                    definition = _column_definition(col)
                    if "source" in col:
                        definition += f" REFERENCES {col['source']['table']}(id)"
                    columns.append(definition)
                query = _create_statement(rel["junctionTable"], columns)
            except (KeyError, TypeError, AttributeError) as exc:
                raise SchemaError(f"Error creating relationships: {exc!r}") from exc
            self.executor.execute_query(query)

    def truncate_tables(self, tables: Sequence[str]) -> None:
        """Empty the given tables, restarting identities and cascading."""
        if not tables:
            raise SchemaError("Error truncating tables: table list is empty, nothing to truncate.")
        self.executor.execute_query(f"TRUNCATE {join(tables, ', ')} RESTART IDENTITY CASCADE;")