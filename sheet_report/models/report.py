from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

"""Report data models: rows, pages, pagination parameters and the payload.

The payload keeps a single canonical ``pages`` sequence. The two legacy views
(``rows`` for flat-list templates, ``pages_rest`` for page-break templates)
are derived from it on access and never stored.
"""

__all__ = [
    "PaginationParams",
    "RowRecord",
    "PageRecord",
    "ReportPayload",
]


@dataclass(frozen=True)
class PaginationParams:
    """Page layout derived from the identifier count.

    ``last_page_rows`` is informational; synthesis slices by remaining identifiers.
    """
    page_count: int
    rows_per_page: int
    total_items: int
    last_page_rows: int


@dataclass(frozen=True)
class RowRecord:
    """One synthesized table row: three biased samples plus an optional identifier."""
    q1: float
    q2: float
    q3: float
    q4: str | None = None  # None = 対応する識別子なし (placeholder 文字列は使わない)

    def to_context(self) -> dict[str, Any]:
        ctx: dict[str, Any] = {"q1": self.q1, "q2": self.q2, "q3": self.q3}
        # Absent key renders as empty text in Jinja2
        if self.q4 is not None:
            ctx["q4"] = self.q4
        return ctx


@dataclass(frozen=True)
class PageRecord:
    page_index: int  # 1-based
    rows: tuple[RowRecord, ...] = ()

    def to_context(self) -> dict[str, Any]:
        return {
            "pageIndex": self.page_index,
            "rows": [r.to_context() for r in self.rows],
        }


@dataclass(frozen=True)
class ReportPayload:
    """Data handed to the templating engine.

    Template field names (``pages``, ``rows``, ``pagesRest``, ``pageIndex``,
    ``q1``..``q4``) are a fixed contract with existing templates.
    """
    pages: tuple[PageRecord, ...] = field(default_factory=tuple)

    @property
    def rows(self) -> tuple[RowRecord, ...]:
        """First page rows, for templates that loop over a single flat list."""
        if not self.pages:
            return ()
        return self.pages[0].rows

    @property
    def pages_rest(self) -> tuple[PageRecord, ...]:
        """Pages after the first, so templates can emit a break before each one."""
        return self.pages[1:]

    def to_context(self) -> dict[str, Any]:
        return {
            "pages": [p.to_context() for p in self.pages],
            "rows": [r.to_context() for r in self.rows],
            "pagesRest": [p.to_context() for p in self.pages_rest],
        }
