from __future__ import annotations

import logging
from datetime import UTC, datetime

from ..csvio.reader import read_csv_rows
from ..models.config_models import SendRequest, SendSettings
from ..models.processing_result import DispatchResult, PipelineResult
from .column_resolver import resolve_header
from .dispatcher import ClientFactory, Dispatcher
from .phone import normalize_phones
from ..provider.twilio_client import create_twilio_client

"""Pipeline orchestration: CSV -> rows -> phone column -> normalized rows -> sends.

Stage errors (OSError / CsvFormatError while reading, ConfigurationError while
resolving or normalizing) propagate to the caller before any message is sent.
Send errors never propagate; they are counted in the returned result.
"""

__all__ = [
    "run_pipeline",
]

logger = logging.getLogger(__name__)


def run_pipeline(
    request: SendRequest,
    settings: SendSettings | None = None,
    client_factory: ClientFactory = create_twilio_client,
) -> PipelineResult:
    """Run one CSV -> SMS job and wait for every send to finish."""
    settings = settings or SendSettings()
    start_time = datetime.now(UTC)

    rows = read_csv_rows(request.csv_path)
    if not rows:
        logger.warning(f"no data rows in {request.csv_path}; nothing to send")
        return _finish(start_time, parsed=0, dropped=0, dispatch=DispatchResult())

    key = resolve_header(rows[0], request.selector, strict=settings.strict_column)
    logger.info(f"Phone column: {key}")

    normalized = normalize_phones(rows, key, settings.strip_mode)
    dropped = len(rows) - len(normalized)
    if dropped:
        logger.info(f"Skipped {dropped} rows with empty '{key}'")

    dispatcher = Dispatcher(client_factory=client_factory, max_workers=settings.max_workers)
    dispatch = dispatcher.dispatch(request.credentials, normalized, key, request.from_number, request.body)
    return _finish(start_time, parsed=len(rows), dropped=dropped, dispatch=dispatch)


def _finish(start_time: datetime, *, parsed: int, dropped: int, dispatch: DispatchResult) -> PipelineResult:
    end_time = datetime.now(UTC)
    return PipelineResult(
        parsed_rows=parsed,
        dropped_rows=dropped,
        dispatch=dispatch,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )
