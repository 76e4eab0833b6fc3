"""Named value transformations driven by configuration."""

from __future__ import annotations

import string
from collections.abc import Mapping
from typing import Any

_C_SPACE = " \t\n\v\f\r"
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class TransformationError(RuntimeError):
    """Raised when a transformation is unknown or cannot be applied."""


def apply_transformation(
    value: str, transform_name: str, transformations_config: Mapping[str, Any]
) -> str:
    """Apply the transformation named ``transform_name`` to ``value``.

    Supported logics are ``split_by_space`` and ``trim_uppercase``; any
    other logic leaves the value unchanged.
    """
    if transform_name not in transformations_config:
        raise TransformationError(f"Transformation not defined: {transform_name}")
    logic = transformations_config[transform_name]["logic"]

    if logic == "split_by_space":
        head, space, tail = value.partition(" ")
        if not space:
            raise TransformationError(f"Cannot split the full name: {value}")
        return f"{head}_{tail}"
    if logic == "trim_uppercase":
        return value.strip(_C_SPACE).translate(_ASCII_UPPER)
    return value