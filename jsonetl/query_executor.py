"""Execution of SQL statements over a DB-API connection."""

from __future__ import annotations

import logging
from typing import Any

_log = logging.getLogger(__name__)


class QueryError(RuntimeError):
    """Raised when a query expected to return an id fails."""


class QueryExecutor:
    """Runs SQL text on a DB-API connection."""

    def __init__(self, connection: Any) -> None:
        if connection is None:
            raise ValueError("The database connection is null.")
        self._conn = connection

    def execute_query(self, query: str) -> bool:
        """Run a statement; failures are logged and reported as ``False``."""
        cursor = self._conn.cursor()
        try:
            cursor.execute(query)
        except Exception as exc:
            _log.error("Query error: %s", exc)
            return False
        finally:
            cursor.close()
        return True

    def execute_query_returning_id(self, query: str) -> str:
        """Run a query and return the first column of its first row as text."""
        cursor = self._conn.cursor()
        try:
            try:
                cursor.execute(query)
            except Exception as exc:
                raise QueryError(f"Query error (RETURNING id): {exc}") from exc
            if not cursor.description:
                raise QueryError(f"The query {query} returned no ID.")
            row = cursor.fetchone()
        finally:
            cursor.close()
        if row is None or len(row) == 0:
            raise QueryError(f"The query {query} returned no ID.")
        if row[0] is None:
            raise QueryError("The returned ID is NULL.")
        return str(row[0])

    def execute_select_query(self, query: str) -> list[tuple[Any, ...]] | None:
        """Run a SELECT and return all rows, or ``None`` if it fails."""
        cursor = self._conn.cursor()
        try:
            cursor.execute(query)
            if not cursor.description:
                _log.error("SELECT query error: statement returned no rows")
                return None
            return [tuple(row) for row in cursor.fetchall()]
        except Exception as exc:
            _log.error("SELECT query error: %s", exc)
            return None
        finally:
            cursor.close()