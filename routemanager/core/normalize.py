"""Name canonicalization used as the only join key between datasets."""
from __future__ import annotations

from typing import Any


def to_text(value: Any) -> str:
    """Convert a raw cell value into comparable text.

    Spreadsheet readers hand back ints and floats for numeric cells, so whole
    floats such as ``9876543210.0`` are rendered without the trailing ``.0``.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_name(value: Any) -> str:
    """Lowercase, trim, and collapse internal whitespace runs to one space."""

    return " ".join(to_text(value).lower().split())
