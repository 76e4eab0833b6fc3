"""Reading source JSON and pulling records and values out of it."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

_log = logging.getLogger(__name__)


def extract_data(path: str | Path) -> Any:
    """Parse the JSON document at ``path``; return ``None`` if it cannot be opened."""
    try:
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)
    except OSError:
        _log.error("Could not open the JSON file %s", path)
        return None


def _contains(value: Any, key: str) -> bool:
    return isinstance(value, dict) and key in value


def _elements(value: Any) -> list[Any]:
    """Items of a JSON value as iterated element-wise."""
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return [value[key] for key in sorted(value)]
    return [value]


def get_json_records(data: Any, source_path: str, root_path: str = "") -> list[Any]:
    """Collect the records found at a dotted ``source_path`` under ``root_path``."""
    current = data[root_path] if root_path else data
    first, dot, rest = source_path.partition(".")
    if dot:
        if _contains(current, first):
            return get_json_records(current[first], rest, "")
        return []
    if _contains(current, source_path):
        return _elements(current[source_path])
    _log.error("Path not found - %s", source_path)
    return []


def get_value_from_json(record: Any, json_path: str) -> str:
    """Return the field ``json_path`` of ``record`` as text, or ``""`` if absent.

    Strings lose their surrounding quotes; other values are given in
    compact JSON form.
    """
    if not _contains(record, json_path):
        return ""
    value = json.dumps(
        record[json_path], ensure_ascii=False, separators=(",", ":"), sort_keys=True
    )
    if len(value) > 1 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return value