from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .send_outcome import SendOutcome, SendStatus

"""Aggregated results of a dispatch and of a whole pipeline run.

These feed the SUMMARY line and the CLI exit code.
"""


@dataclass(frozen=True)
class DispatchResult:
    """All per-row outcomes of one dispatch, ordered by row position."""
    outcomes: list[SendOutcome] = field(default_factory=list)

    @property
    def sent(self) -> int:
        return sum(1 for o in self.outcomes if o.status is SendStatus.SENT)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.status is SendStatus.FAILED)

    @property
    def total(self) -> int:
        return len(self.outcomes)


@dataclass(frozen=True)
class PipelineResult:
    """Summary of one CSV -> SMS run."""
    parsed_rows: int  # data rows read from the CSV
    dropped_rows: int  # rows with an empty phone cell
    dispatch: DispatchResult
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float

    @property
    def sent(self) -> int:
        return self.dispatch.sent

    @property
    def failed(self) -> int:
        return self.dispatch.failed
