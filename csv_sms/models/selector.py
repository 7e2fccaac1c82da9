from __future__ import annotations

from dataclasses import dataclass
from typing import Union

"""Column selector variants for locating the phone column.

The CLI accepts either a zero-based column position or a header name, never
both. Each choice is its own type so callers match on the variant instead of
checking two optional fields.
"""

__all__ = [
    "ByName",
    "ByIndex",
    "ColumnSelector",
]


@dataclass(frozen=True)
class ByName:
    """Select the phone column by header name."""
    name: str


@dataclass(frozen=True)
class ByIndex:
    """Select the phone column by zero-based position in the header row."""
    index: int = 0


ColumnSelector = Union[ByName, ByIndex]
