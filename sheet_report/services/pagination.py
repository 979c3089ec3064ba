from __future__ import annotations

import math
from collections.abc import Sequence

from ..models.report import PaginationParams

"""Pagination arithmetic for the synthesized report (fixed 20 rows per page)."""

__all__ = [
    "ROWS_PER_PAGE",
    "paginate",
]

ROWS_PER_PAGE = 20


def paginate(identifiers: Sequence[str]) -> PaginationParams:
    """Derive page count and last-page size from the identifier count.

    An exact multiple of ``ROWS_PER_PAGE`` yields a full final page rather than
    a trailing empty one; the same fallback gives ``last_page_rows=20`` for an
    empty list (which the extractor rejects before it gets here).
    """
    total = len(identifiers)
    return PaginationParams(
        page_count=math.ceil(total / ROWS_PER_PAGE),
        rows_per_page=ROWS_PER_PAGE,
        total_items=total,
        last_page_rows=total % ROWS_PER_PAGE or ROWS_PER_PAGE,
    )
