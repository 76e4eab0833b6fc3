"""String and mapping helpers shared by the ETL stages."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def replace_spaces_with_underscore(text: str) -> str:
    """Return ``text`` with every space replaced by an underscore."""
    return text.replace(" ", "_")


def convert_id_to_int(identifier: str) -> int:
    """Parse the leading integer of ``identifier`` as a 32-bit signed int.

    Leading whitespace is skipped and trailing characters are ignored.
    Raises ``ValueError`` if no number is found or it does not fit.
    """
    match = _LEADING_INT.match(identifier)
    if match is None:
        raise ValueError(f"The ID '{identifier}' is not a valid number.")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"The ID '{identifier}' is out of range for int.")
    return number


def join(elements: Iterable[str], delimiter: str) -> str:
    """Join ``elements`` with ``delimiter`` between each pair."""
    return delimiter.join(elements)


def split_string_by_delimiter(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty tokens.

    If the delimiter does not occur, the whole text is returned as the
    single element, even when it is empty.
    """
    if not delimiter:
        raise ValueError("The delimiter cannot be empty.")
    if delimiter not in text:
        return [text]
    return [token for token in text.split(delimiter) if token]


def transform_json(value: str, keys: Iterable[str]) -> dict[str, str]:
    """Build a mapping that assigns ``value`` to every key."""
    return {key: value for key in keys}


def create_natural_key_map(keys: Sequence[str], values: Sequence[str]) -> dict[str, str]:
    """Pair ``keys`` with ``values`` into a mapping ordered by key.

    A repeated key keeps its last value. Raises ``ValueError`` when the
    two sequences differ in length.
    """
    if len(keys) != len(values):
        raise ValueError("The number of keys does not match the number of values.")
    pairs = dict(zip(keys, values))
    return dict(sorted(pairs.items()))