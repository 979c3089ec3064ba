from __future__ import annotations

import random
from unittest.mock import patch

from sheet_report.models.report import PageRecord, RowRecord
from sheet_report.services.pagination import paginate
from sheet_report.services.synthesis import synthesize_pages, synthesize_rows


def _codes(n: int) -> list[str]:
    return [f"P{i}" for i in range(n)]


def _build(n: int, seed: int = 0) -> list[PageRecord]:
    codes = _codes(n)
    params = paginate(codes)
    return synthesize_pages(params.page_count, params.rows_per_page, codes, random.Random(seed))


def test_row_counts_sum_to_identifier_count():
    for n in (1, 7, 19, 20, 21, 39, 40, 41, 95):
        pages = _build(n)
        assert sum(len(p.rows) for p in pages) == n
        for p in pages[:-1]:
            assert len(p.rows) == 20
        assert 1 <= len(pages[-1].rows) <= 20


def test_exactly_one_full_page_for_twenty():
    pages = _build(20)
    assert len(pages) == 1
    assert len(pages[0].rows) == 20


def test_twenty_one_spills_one_row_to_second_page():
    pages = _build(21)
    assert [len(p.rows) for p in pages] == [20, 1]
    assert pages[1].rows[0].q4 == "P20"


def test_page_boundary_for_twenty_five_identifiers():
    pages = _build(25)
    assert pages[0].rows[19].q4 == "P19"
    assert [r.q4 for r in pages[1].rows] == ["P20", "P21", "P22", "P23", "P24"]


def test_pages_numbered_from_one_in_order():
    pages = _build(61)
    assert [p.page_index for p in pages] == [1, 2, 3, 4]


def test_row_order_mirrors_identifier_order_with_duplicates():
    codes = ["B", "A", "B", "C"]
    pages = synthesize_pages(1, 20, codes, random.Random(3))
    assert [r.q4 for r in pages[0].rows] == codes


def test_three_independent_draws_per_row():
    values = iter([0.1, 0.2, 0.3, 0.4, 0.5, 0.6])
    with patch("sheet_report.services.synthesis.generate_value", side_effect=lambda rng=None: next(values)):
        rows = synthesize_rows(2, ["X", "Y"], 0)
    assert rows == (
        RowRecord(q1=0.1, q2=0.2, q3=0.3, q4="X"),
        RowRecord(q1=0.4, q2=0.5, q3=0.6, q4="Y"),
    )


def test_rows_past_identifiers_have_no_code():
    rows = synthesize_rows(3, ["only"], 0, random.Random(1))
    assert rows[0].q4 == "only"
    assert rows[1].q4 is None
    assert rows[2].q4 is None


def test_page_beyond_identifiers_is_empty():
    pages = synthesize_pages(3, 20, _codes(25), random.Random(1))
    assert [len(p.rows) for p in pages] == [20, 5, 0]
    assert pages[2].page_index == 3


def test_zero_pages():
    assert synthesize_pages(0, 20, [], random.Random(1)) == []


def test_sample_values_in_range():
    for page in _build(60, seed=11):
        for row in page.rows:
            for v in (row.q1, row.q2, row.q3):
                assert -2.0 <= v <= 2.0
