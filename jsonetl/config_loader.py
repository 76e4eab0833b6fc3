"""Loading of the JSON configuration file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class ConfigError(RuntimeError):
    """Raised when the configuration cannot be read or parsed."""


def load_config(path: str | Path) -> Any:
    """Read and parse the JSON configuration at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError("Could not open the configuration file") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid configuration JSON: {exc}") from exc