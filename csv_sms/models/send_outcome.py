from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from enum import Enum

"""Per-message send outcome.

State transitions: pending → (sent | failed). An outcome is created once the
provider call returns or raises and is never updated afterwards; there is no
retry.
"""

__all__ = [
    "SendStatus",
    "SendOutcome",
]


class SendStatus(Enum):
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


@dataclass(frozen=True)
class SendOutcome:
    """Result of one provider call.

    Attributes:
        index: Position of the row in the dispatched list (0-based)
        to: Destination number as sent to the provider
        status: SENT or FAILED
        message_sid: Provider-assigned message identifier (SENT only)
        error: Error description (FAILED only)
        error_code: Provider error code when the provider supplied one
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
    """
    index: int
    to: str
    status: SendStatus
    message_sid: str | None = None
    error: str | None = None
    error_code: int | None = None
    timestamp: str = ""

    @staticmethod
    def _now() -> str:
        return datetime.now(UTC).isoformat().replace("+00:00", "Z")

    @classmethod
    def sent(cls, index: int, to: str, message_sid: str) -> SendOutcome:
        return cls(index=index, to=to, status=SendStatus.SENT, message_sid=message_sid, timestamp=cls._now())

    @classmethod
    def failed(cls, index: int, to: str, error: str, error_code: int | None = None) -> SendOutcome:
        return cls(
            index=index,
            to=to,
            status=SendStatus.FAILED,
            error=error,
            error_code=error_code,
            timestamp=cls._now(),
        )

    @property
    def ok(self) -> bool:
        return self.status is SendStatus.SENT

    def to_json_line(self) -> str:
        """Serialize to a single JSON line (used for the per-row error dump)."""
        data = asdict(self)
        data["status"] = self.status.value
        return json.dumps(data, ensure_ascii=False)
