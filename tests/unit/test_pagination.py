from __future__ import annotations

import math

import pytest

from sheet_report.services.pagination import ROWS_PER_PAGE, paginate


def _codes(n: int) -> list[str]:
    return [f"C{i:03d}" for i in range(n)]


@pytest.mark.parametrize(
    ("total", "pages", "last"),
    [
        (1, 1, 1),
        (19, 1, 19),
        (20, 1, 20),
        (21, 2, 1),
        (40, 2, 20),
        (45, 3, 5),
    ],
)
def test_paginate_counts(total: int, pages: int, last: int):
    params = paginate(_codes(total))
    assert params.page_count == pages
    assert params.last_page_rows == last
    assert params.total_items == total
    assert params.rows_per_page == ROWS_PER_PAGE == 20


def test_paginate_page_count_is_ceiling():
    for n in range(1, 101):
        assert paginate(_codes(n)).page_count == math.ceil(n / 20)


def test_paginate_empty_list_does_not_fail():
    params = paginate([])
    assert params.page_count == 0
    # modulo fallback は空リストでも満ページ扱い
    assert params.last_page_rows == 20
