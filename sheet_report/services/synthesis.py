from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from ..models.report import PageRecord, RowRecord
from .progress import PageProgress
from .random_values import generate_value

"""Row and page synthesis.

Rows pair three independent biased samples with the identifier at the same
global position. Pages are sliced by the number of identifiers remaining from
their start index, so the final page holds exactly what is left.
"""

__all__ = [
    "synthesize_rows",
    "synthesize_pages",
]

logger = logging.getLogger(__name__)


def synthesize_rows(
    row_count: int,
    identifiers: Sequence[str] | None,
    start_index: int,
    rng: random.Random | None = None,
) -> tuple[RowRecord, ...]:
    """Generate ``row_count`` rows starting at global identifier ``start_index``.

    ``q4`` is the identifier at ``start_index + i`` when one exists, else None.
    """
    rows: list[RowRecord] = []
    for i in range(row_count):
        index = start_index + i
        code = identifiers[index] if identifiers is not None and index < len(identifiers) else None
        rows.append(
            RowRecord(
                q1=generate_value(rng),
                q2=generate_value(rng),
                q3=generate_value(rng),
                q4=code,
            )
        )
    return tuple(rows)


def synthesize_pages(
    page_count: int,
    rows_per_page: int,
    identifiers: Sequence[str],
    rng: random.Random | None = None,
) -> list[PageRecord]:
    """Build ``page_count`` pages of up to ``rows_per_page`` rows each.

    Page ``p`` covers identifiers ``[p*rows_per_page, (p+1)*rows_per_page)``.
    A page past the end of the identifiers is kept but left empty.
    """
    pages: list[PageRecord] = []
    with PageProgress(page_count) as progress:
        for page_index in range(page_count):
            start = page_index * rows_per_page
            remaining = len(identifiers) - start
            row_count = max(0, min(rows_per_page, remaining))
            if row_count == 0:
                logger.debug(f"page {page_index + 1} starts past the last identifier; left empty")
            pages.append(
                PageRecord(
                    page_index=page_index + 1,
                    rows=synthesize_rows(row_count, identifiers, start, rng),
                )
            )
            progress.advance(row_count)
    return pages
