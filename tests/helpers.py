"""Workbook and template builders shared by the test suites."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
from docx import Document

HEADER = ["No", "Name", "Qty", "Code"]

TEMPLATE_PARAGRAPHS = [
    "Inspection report",
    "{% for row in rows %}{{ row.q4 }};{% endfor %}",
    "{% for page in pages %}[{{ page.pageIndex }}:{{ page.rows|length }}]{% endfor %}",
    "rest={{ pagesRest|length }}",
]


def write_workbook(path: Path, sheets: dict[str, list[list[object]]]) -> Path:
    with pd.ExcelWriter(path) as writer:
        for sheet, rows in sheets.items():
            df = pd.DataFrame(rows)
            df.to_excel(writer, sheet_name=sheet, header=False, index=False)
    return path


def code_rows(codes: list[object]) -> list[list[object]]:
    """Header row plus one data row per code in column D."""
    rows: list[list[object]] = [list(HEADER)]
    for i, code in enumerate(codes, start=1):
        rows.append([i, f"item-{i}", i * 10, code])
    return rows


def write_template(path: Path, paragraphs: list[str] | None = None) -> Path:
    doc = Document()
    for text in paragraphs or TEMPLATE_PARAGRAPHS:
        doc.add_paragraph(text)
    doc.save(str(path))
    return path


def docx_text(path: Path) -> list[str]:
    return [p.text for p in Document(str(path)).paragraphs]
