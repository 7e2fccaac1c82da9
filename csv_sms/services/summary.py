from __future__ import annotations

from ..models.processing_result import PipelineResult

"""SUMMARY line rendering.

Format:
SUMMARY rows={parsed} dropped={dropped} sent={sent} failed={failed} elapsed_sec={elapsed}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for very small numbers
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.2f}".rstrip("0").rstrip(".")


def render_summary_line(result: PipelineResult) -> str:
    """Render the SUMMARY line for a finished run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from csv_sms.models.processing_result import DispatchResult
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> r = PipelineResult(parsed_rows=3, dropped_rows=1, dispatch=DispatchResult(),
        ...                    start_time=t, end_time=t, elapsed_seconds=1.5)
        >>> render_summary_line(r)
        'SUMMARY rows=3 dropped=1 sent=0 failed=0 elapsed_sec=1.5'
    """
    return (
        f"SUMMARY rows={result.parsed_rows} "
        f"dropped={result.dropped_rows} "
        f"sent={result.sent} "
        f"failed={result.failed} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
