from __future__ import annotations

from ..models.run_result import RunResult

"""SUMMARY line rendering for the end of a run."""


def _format_seconds(seconds: float) -> str:
    # 指数表記を避ける
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: RunResult) -> str:
    """Render a SUMMARY line from a RunResult.

    Format:
    SUMMARY identifiers={n} pages={p} rows_per_page={r} last_page_rows={l}
    output={file name} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = RunResult(
        ...     total_identifiers=25, page_count=2, rows_per_page=20, last_page_rows=5,
        ...     output_path=Path("/tmp/out-20240101-100000.docx"),
        ...     start_time=start, end_time=end, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY identifiers=25 pages=2 rows_per_page=20 last_page_rows=5 output=out-20240101-100000.docx elapsed_sec=2'
    """
    return (
        f"SUMMARY identifiers={result.total_identifiers} "
        f"pages={result.page_count} "
        f"rows_per_page={result.rows_per_page} "
        f"last_page_rows={result.last_page_rows} "
        f"output={result.output_path.name} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
