from __future__ import annotations

import json

from csv_sms.models.processing_result import DispatchResult
from csv_sms.models.send_outcome import SendOutcome, SendStatus


def test_sent_outcome():
    o = SendOutcome.sent(0, "+9720501234567", "SM1")
    assert o.ok
    assert o.status is SendStatus.SENT
    assert o.message_sid == "SM1"
    assert o.error is None
    assert o.timestamp.endswith("Z")


def test_failed_outcome_json_line():
    o = SendOutcome.failed(3, "+972bad", "invalid number", error_code=21211)
    assert not o.ok
    data = json.loads(o.to_json_line())
    assert data["status"] == "failed"
    assert data["index"] == 3
    assert data["error_code"] == 21211
    assert set(data.keys()) == {"index", "to", "status", "message_sid", "error", "error_code", "timestamp"}


def test_dispatch_result_counts():
    result = DispatchResult(
        outcomes=[
            SendOutcome.sent(0, "a", "SM1"),
            SendOutcome.failed(1, "b", "boom"),
            SendOutcome.sent(2, "c", "SM2"),
        ]
    )
    assert (result.total, result.sent, result.failed) == (3, 2, 1)
