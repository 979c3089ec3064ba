from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

"""Run result model aggregated by the pipeline and rendered into the SUMMARY line."""

__all__ = [
    "RunResult",
]


@dataclass(frozen=True)
class RunResult:
    """Outcome of one successful report run."""
    total_identifiers: int  # 読み取った識別子数
    page_count: int
    rows_per_page: int
    last_page_rows: int
    output_path: Path  # 生成された .docx
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float  # end - start
