from __future__ import annotations

"""Exception hierarchy shared by the pipeline stages.

Stage errors (CSV format, configuration) abort the whole run before any message
is sent. ``SendError`` is row-scoped: the dispatcher records it as a failed
outcome and moves on.
"""

__all__ = [
    "CsvSmsError",
    "CsvFormatError",
    "ConfigurationError",
    "ColumnResolutionError",
    "AbsentColumnError",
    "ConfigError",
    "SendError",
]


class CsvSmsError(Exception):
    """Base class for all application errors."""


class CsvFormatError(CsvSmsError):
    """Raised when the input cannot be parsed as header + comma separated rows."""


class ConfigurationError(CsvSmsError):
    """Raised for invalid run configuration detected before dispatch."""


class ColumnResolutionError(ConfigurationError):
    """Raised when the column selector does not designate an existing header."""


class AbsentColumnError(ConfigurationError):
    """Raised when a row has no value at all for the phone column.

    Distinct from an empty cell: empty cells are dropped silently, an absent
    key means the selected column name is not part of the CSV header.
    """

    def __init__(self, key: str, row_number: int) -> None:
        super().__init__(f"column '{key}' not present in row {row_number}")
        self.key = key
        self.row_number = row_number


class ConfigError(ConfigurationError):
    """Raised for an unreadable or invalid settings file, or missing credentials."""


class SendError(CsvSmsError):
    """Provider refused or failed to accept a single message."""

    def __init__(self, message: str, code: int | None = None, status: int | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.status = status
