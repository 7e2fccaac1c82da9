from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .selector import ByIndex, ColumnSelector

"""Config dataclasses for a CSV -> SMS run.

``SendSettings`` holds the tunables that may come from the YAML settings file;
``SendRequest`` holds the per-invocation inputs handed over by the CLI.
"""

__all__ = [
    "StripMode",
    "Credentials",
    "SendSettings",
    "SendRequest",
]

DEFAULT_MAX_WORKERS = 8


class StripMode(Enum):
    """How separators are removed from phone numbers before prefixing.

    - FIRST: remove only the first hyphen and the first space
    - ALL: remove every hyphen and space; leave numbers already carrying '+' unprefixed
    """
    FIRST = "first"
    ALL = "all"


@dataclass(frozen=True)
class Credentials:
    """Provider account credentials."""
    account_sid: str
    auth_token: str = field(repr=False)


@dataclass(frozen=True)
class SendSettings:
    max_workers: int = DEFAULT_MAX_WORKERS  # concurrent provider calls
    strip_mode: StripMode = StripMode.FIRST
    strict_column: bool = False  # verify a named column exists in the header row


@dataclass(frozen=True)
class SendRequest:
    csv_path: str
    credentials: Credentials
    from_number: str
    body: str
    selector: ColumnSelector = ByIndex(0)
