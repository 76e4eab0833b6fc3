"""Database connection setup from explicit parameters or configuration."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

_log = logging.getLogger(__name__)

_CONFIG_KEYS = ("host", "dbname", "user", "password", "port")


class ConnectionError_(RuntimeError):
    """Raised when the database connection cannot be established."""


def build_conninfo(host: str, dbname: str, user: str, password: str, port: str) -> str:
    """Build a key=value connection string."""
    return f"host={host} dbname={dbname} user={user} password={password} port={port}"


class Connection:
    """An open database connection created by a DB-API ``connect`` callable.

    ``connect`` receives the connection string and returns a connection
    object; for the ETL it should run in autocommit mode, since
    transactions are driven by explicit ``BEGIN``/``COMMIT`` statements.
    """

    def __init__(
        self,
        host: str,
        dbname: str,
        user: str,
        password: str,
        port: str,
        connect: Callable[[str], Any],
    ) -> None:
        self.dbname = dbname
        conninfo = build_conninfo(host, dbname, user, password, port)
        try:
            raw = connect(conninfo)
        except Exception as exc:
            raise ConnectionError_(f"Database connection failed: {exc}") from exc
        if raw is None:
            raise ConnectionError_("Database connection failed: no connection returned")
        self._raw = raw
        _log.info("Connected to database %s", dbname)

    @classmethod
    def from_config(
        cls, db_config: Mapping[str, Any], connect: Callable[[str], Any]
    ) -> "Connection":
        """Connect using the ``host``, ``dbname``, ``user``, ``password`` and ``port`` entries."""
        params: dict[str, str] = {}
        for key in _CONFIG_KEYS:
            if key not in db_config:
                raise ConnectionError_(f"Database configuration error: missing key '{key}'")
            value = db_config[key]
            if not isinstance(value, str):
                raise ConnectionError_(
                    f"Database configuration error: '{key}' must be a string"
                )
            params[key] = value
        return cls(connect=connect, **params)

    @property
    def raw_connection(self) -> Any:
        """The underlying driver connection, or ``None`` once closed."""
        return self._raw

    @property
    def closed(self) -> bool:
        return self._raw is None

    def close(self) -> None:
        """Close the connection; further calls do nothing."""
        if self._raw is not None:
            self._raw.close()
            self._raw = None
            _log.info("Connection closed")

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()