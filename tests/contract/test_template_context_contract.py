from __future__ import annotations

import random

from sheet_report.services.assembly import assemble
from sheet_report.services.pagination import paginate
from sheet_report.services.synthesis import synthesize_pages

"""Template context contract: field names and nesting existing templates rely on."""

ROW_KEYS = {"q1", "q2", "q3", "q4"}


def _context(n: int) -> dict:
    codes = [f"K{i}" for i in range(n)]
    params = paginate(codes)
    pages = synthesize_pages(params.page_count, params.rows_per_page, codes, random.Random(42))
    return assemble(pages).to_context()


def test_top_level_keys():
    assert set(_context(3)) == {"pages", "rows", "pagesRest"}


def test_page_and_row_shape():
    ctx = _context(45)
    for page in ctx["pages"]:
        assert set(page) == {"pageIndex", "rows"}
        for row in page["rows"]:
            assert set(row) == ROW_KEYS
            assert isinstance(row["q4"], str)
            for key in ("q1", "q2", "q3"):
                assert isinstance(row[key], float)


def test_legacy_rows_alias_first_page():
    ctx = _context(45)
    assert ctx["rows"] == ctx["pages"][0]["rows"]
    assert len(ctx["rows"]) == 20


def test_pages_rest_skips_first_page():
    ctx = _context(45)
    assert ctx["pagesRest"] == ctx["pages"][1:]
    assert [p["pageIndex"] for p in ctx["pagesRest"]] == [2, 3]


def test_single_page_context():
    ctx = _context(5)
    assert len(ctx["pages"]) == 1
    assert ctx["pagesRest"] == []
    assert [r["q4"] for r in ctx["rows"]] == ["K0", "K1", "K2", "K3", "K4"]
