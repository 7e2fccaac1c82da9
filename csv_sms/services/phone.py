from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import AbsentColumnError
from ..models.config_models import StripMode

"""Phone number normalization.

Turns local numbers such as ``050-1234567`` into the dialable international
form ``+9720501234567``. The country prefix is fixed.

Two strip modes exist:

- ``StripMode.FIRST`` removes only the first hyphen and the first space and
  always prefixes. ``05-2-1234567`` becomes ``+972052-1234567`` and running the
  result through again yields ``+972+972052-1234567``.
- ``StripMode.ALL`` removes every hyphen and space and leaves numbers that
  already start with ``+`` unprefixed, so normalizing twice is a no-op.
"""

__all__ = [
    "COUNTRY_PREFIX",
    "AbsentColumnError",
    "normalize_number",
    "normalize_phones",
]

COUNTRY_PREFIX = "972"

logger = logging.getLogger(__name__)


def normalize_number(value: str, mode: StripMode = StripMode.FIRST) -> str:
    """Normalize one non-empty phone value."""
    if mode is StripMode.ALL:
        stripped = value.replace("-", "").replace(" ", "")
        if stripped.startswith("+"):
            return stripped
        return f"+{COUNTRY_PREFIX}{stripped}"
    return f"+{COUNTRY_PREFIX}{value.replace('-', '', 1).replace(' ', '', 1)}"


def normalize_phones(
    rows: Iterable[dict[str, str]],
    key: str,
    mode: StripMode = StripMode.FIRST,
) -> list[dict[str, str]]:
    """Drop rows with an empty phone cell and normalize the rest.

    Returns new row dicts in input order; the input rows are left untouched.

    Raises:
        AbsentColumnError: a row has no ``key`` at all
    """
    normalized: list[dict[str, str]] = []
    for i, row in enumerate(rows):
        if key not in row:
            raise AbsentColumnError(key, i + 1)
        value = row[key]
        if value == "":
            continue
        new_row = dict(row)
        new_row[key] = normalize_number(value, mode)
        logger.debug(f"row {i + 1}: {value!r} -> {new_row[key]!r}")
        normalized.append(new_row)
    return normalized
