#!/usr/bin/env python3
"""Generate a sample identifier workbook and .docx template for manual runs.

The workbook follows the layout the report reader expects:
- Row 1: Header row
- Row 2+: Data rows, product code in the 4th column (some left blank)

The template uses both payload shapes: the legacy flat ``rows`` table for the
first page, then one table per entry of ``pagesRest`` behind a page break.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd
from docx import Document
from docx.enum.text import WD_BREAK

HEADER = ["No", "Name", "Qty", "Code"]
COLUMNS = [("Code", "q4"), ("Q1", "q1"), ("Q2", "q2"), ("Q3", "q3")]


def create_workbook(output_path: Path, count: int, blank_ratio: float = 0.05, seed: int = 42) -> int:
    """Write ``count`` data rows; roughly ``blank_ratio`` of them get an empty code cell.

    Returns:
        Number of non-blank codes written
    """
    rng = np.random.default_rng(seed)
    rows: list[list[object]] = [HEADER]
    written = 0
    for i in range(1, count + 1):
        if rng.random() < blank_ratio:
            code = None
        else:
            code = f"PC-{rng.integers(10000, 99999)}"
            written += 1
        rows.append([i, f"Item {i}", int(rng.integers(1, 500)), code])

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name="Sheet1", header=False, index=False)
    return written


def _add_row_table(doc, loop_expr: str) -> None:
    # docxtpl の行ループ: {%tr ... %} 行は出力時に取り除かれる
    table = doc.add_table(rows=4, cols=len(COLUMNS))
    table.style = "Table Grid"
    for cell, (title, _) in zip(table.rows[0].cells, COLUMNS):
        cell.text = title
    table.rows[1].cells[0].text = f"{{%tr for row in {loop_expr} %}}"
    for cell, (_, key) in zip(table.rows[2].cells, COLUMNS):
        cell.text = f"{{{{ row.{key} }}}}"
    table.rows[3].cells[0].text = "{%tr endfor %}"


def create_template(output_path: Path) -> None:
    doc = Document()
    doc.add_heading("Inspection report", level=1)
    doc.add_paragraph("Page 1")
    _add_row_table(doc, "rows")

    doc.add_paragraph("{%p for page in pagesRest %}")
    doc.add_paragraph().add_run().add_break(WD_BREAK.PAGE)
    doc.add_paragraph("Page {{ page.pageIndex }}")
    _add_row_table(doc, "page.rows")
    doc.add_paragraph("{%p endfor %}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(output_path))


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a sample workbook and template for sheet-report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 45 codes -> 3 pages
  %(prog)s --count 45

  # Custom output locations
  %(prog)s --excel data/codes.xlsx --template data/template.docx --count 120
        """,
    )
    parser.add_argument("--excel", type=Path, default=Path("test.xlsx"), help="Workbook path (default: test.xlsx)")
    parser.add_argument("--template", type=Path, default=Path("template.docx"), help="Template path (default: template.docx)")
    parser.add_argument("--count", type=int, default=45, help="Number of data rows (default: 45)")
    parser.add_argument("--blank-ratio", type=float, default=0.05, help="Share of rows with an empty code (default: 0.05)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.count <= 0:
        print("Error: --count must be positive", file=sys.stderr)
        return 1
    if not 0 <= args.blank_ratio < 1:
        print("Error: --blank-ratio must be in [0, 1)", file=sys.stderr)
        return 1

    try:
        written = create_workbook(args.excel, args.count, args.blank_ratio, args.seed)
        create_template(args.template)
    except Exception as e:
        print(f"Error generating sample inputs: {e}", file=sys.stderr)
        return 1

    print(f"Created workbook: {args.excel} ({written} codes in {args.count} rows)")
    print(f"Created template: {args.template}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
