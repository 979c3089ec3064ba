from __future__ import annotations

from collections.abc import Iterable

from ..models.report import PageRecord, ReportPayload

__all__ = [
    "assemble",
]


def assemble(pages: Iterable[PageRecord]) -> ReportPayload:
    """Package synthesized pages into the payload handed to the templating engine.

    ``rows`` and ``pagesRest`` are views derived from ``pages`` by the payload
    itself; an empty page list is valid and yields empty views.
    """
    return ReportPayload(pages=tuple(pages))
