from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from ..errors import SendError
from ..models.config_models import DEFAULT_MAX_WORKERS, Credentials
from ..models.processing_result import DispatchResult
from ..models.send_outcome import SendOutcome
from ..provider.twilio_client import MessagingClient, create_twilio_client
from .progress import SendProgressTracker

"""Concurrent SMS dispatch.

Every row is submitted to a bounded thread pool up front, so sends do not wait
on each other, and the dispatch only returns after each submitted send has
either succeeded or failed. A failure is confined to its own row.
"""

__all__ = [
    "ClientFactory",
    "Dispatcher",
]

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Credentials], MessagingClient]


class Dispatcher:
    """Send one message per normalized row through a messaging client.

    Args:
        client_factory: builds the provider client from credentials; called
            once per dispatch and the client is shared by all workers
        max_workers: upper bound on concurrent provider calls
    """

    def __init__(self, client_factory: ClientFactory = create_twilio_client, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.client_factory = client_factory
        self.max_workers = max_workers

    def dispatch(
        self,
        credentials: Credentials,
        rows: Sequence[dict[str, str]],
        key: str,
        from_: str,
        body: str,
    ) -> DispatchResult:
        if not rows:
            return DispatchResult(outcomes=[])

        client = self.client_factory(credentials)
        outcomes: list[SendOutcome] = []
        logger.debug(f"dispatching {len(rows)} messages with max_workers={self.max_workers}")

        with SendProgressTracker(len(rows)) as progress, ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="sms-send"
        ) as pool:
            futures: dict[Future[SendOutcome], int] = {
                pool.submit(_send_one, client, i, row[key], from_, body): i for i, row in enumerate(rows)
            }
            for fut in as_completed(futures):
                outcome = fut.result()
                progress.record(outcome.ok)
                outcomes.append(outcome)

        outcomes.sort(key=lambda o: o.index)
        return DispatchResult(outcomes=outcomes)


def _send_one(client: MessagingClient, index: int, to: str, from_: str, body: str) -> SendOutcome:
    """Run one provider call and turn its result into an outcome.

    Never raises: every error becomes a FAILED outcome.
    """
    try:
        sid = client.send(to=to, from_=from_, body=body)
    except SendError as e:
        outcome = SendOutcome.failed(index, to, str(e), error_code=e.code)
        logger.error(f"send failed: {outcome.to_json_line()}")
        return outcome
    except Exception as e:  # client bug or transport error; still row-scoped
        outcome = SendOutcome.failed(index, to, f"{type(e).__name__}: {e}")
        logger.error(f"send failed: {outcome.to_json_line()}")
        return outcome
    logger.info(f"SENT to {to} - messageID: {sid}")
    return SendOutcome.sent(index, to, sid)
