from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Send progress display with tqdm (TTY only).

A single bar counts completed sends. In non-TTY environments (CI, redirected
output) the bar is disabled so log lines are not interleaved with ANSI
control sequences.
"""

__all__ = [
    "SendProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Return True if stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class SendProgressTracker:
    """Progress bar over completed provider calls."""

    def __init__(self, total: int, *, description: str = "Sending SMS") -> None:
        self.total = total
        self.description = description
        self.sent = 0
        self.failed = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total,
                desc=description,
                unit="msg",
                disable=False,
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def record(self, success: bool) -> None:
        """Count one completed send (either outcome)."""
        if success:
            self.sent += 1
        else:
            self.failed += 1
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(sent=self.sent, failed=self.failed)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> SendProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
