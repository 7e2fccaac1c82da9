from __future__ import annotations

from collections.abc import Mapping

from ..errors import ColumnResolutionError
from ..models.selector import ByIndex, ByName, ColumnSelector

__all__ = [
    "ColumnResolutionError",
    "resolve_header",
]


def resolve_header(first_row: Mapping[str, str], selector: ColumnSelector, *, strict: bool = False) -> str:
    """Return the header name of the phone column.

    ``ByName`` is taken as-is unless ``strict`` is set, in which case the name
    must be one of ``first_row``'s headers. ``ByIndex`` picks the header at that
    position in the row's key order (the order of the CSV header line).

    Raises:
        ColumnResolutionError: index out of range, or unknown name in strict mode
    """
    headers = list(first_row.keys())
    if isinstance(selector, ByName):
        if strict and selector.name not in headers:
            raise ColumnResolutionError(f"column '{selector.name}' not found in headers {headers}")
        return selector.name
    if isinstance(selector, ByIndex):
        if not 0 <= selector.index < len(headers):
            raise ColumnResolutionError(
                f"column index {selector.index} out of range (0..{len(headers) - 1}) for headers {headers}"
            )
        return headers[selector.index]
    raise ColumnResolutionError(f"unsupported column selector: {selector!r}")
