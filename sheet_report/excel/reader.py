from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

import pandas as pd

from ..errors import (
    EmptySheetError,
    InsufficientRowsError,
    MissingIdentifierColumnError,
    NoIdentifiersError,
    NoSheetsError,
    SpreadsheetError,
    SpreadsheetNotFoundError,
    SpreadsheetReadError,
    UnsupportedFormatError,
)

"""Identifier extraction from the first sheet of an Excel workbook.

Layout:
- Row 1: header (ignored)
- Row 2+: data rows
- Column D (0-indexed 3): identifier, one per row

Each validation failure raises its own SpreadsheetError subclass so the CLI
can tell the user exactly what is wrong with the file.
"""

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "IDENTIFIER_COLUMN",
    "read_first_sheet",
    "extract_identifiers",
    "read_identifiers",
]

SUPPORTED_EXTENSIONS = (".xlsx", ".xls")
IDENTIFIER_COLUMN = 3  # 4列目
HEADER_ROWS = 1

logger = logging.getLogger(__name__)


def read_first_sheet(path: Path) -> pd.DataFrame:
    """Read the first sheet of ``path`` as a raw, header-less DataFrame.

    NA-string conversion is disabled so codes such as ``NA`` or ``null`` stay
    text; empty cells come back as ``""`` or NaN depending on the engine.
    """
    xls = pd.ExcelFile(path)
    try:
        if not xls.sheet_names:
            raise NoSheetsError(f"spreadsheet has no sheets: {path}")
        name = xls.sheet_names[0]
        logger.debug(f"reading sheet '{name}' from {path}")
        return xls.parse(name, header=None, dtype=object, keep_default_na=False, na_values=[])
    finally:
        xls.close()


def _is_absent(value: Any) -> bool:
    if value is None or value == "":
        return True
    # pandas は空セルを NaN で返すことがある
    return isinstance(value, float) and math.isnan(value)


def _cell_text(value: Any) -> str:
    # Excel stores integers as floats; render 1234.0 as "1234"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def extract_identifiers(df: pd.DataFrame, source: str = "<sheet>") -> list[str]:
    """Collect non-empty identifiers from the identifier column of a raw sheet.

    Steps:
    1. Validate the sheet has a populated range
    2. Validate header + at least one data row exist
    3. Validate the identifier column exists
    4. Scan data rows in order, skipping absent/blank cells (no dedup, no sort)
    """
    n_rows, n_cols = df.shape
    if n_rows == 0 or n_cols == 0:
        raise EmptySheetError(f"first sheet of {source} has no data")
    if n_rows < HEADER_ROWS + 1:
        raise InsufficientRowsError(
            f"first sheet of {source} needs a header row and at least one data row (found {n_rows} row)"
        )
    if n_cols <= IDENTIFIER_COLUMN:
        raise MissingIdentifierColumnError(
            f"first sheet of {source} has no 4th column (found {n_cols} column(s))"
        )

    identifiers: list[str] = []
    for value in df.iloc[HEADER_ROWS:, IDENTIFIER_COLUMN].tolist():
        if _is_absent(value):
            continue
        text = _cell_text(value)
        if text:
            identifiers.append(text)

    if not identifiers:
        raise NoIdentifiersError(f"no identifiers found in the 4th column of {source}")
    return identifiers


def read_identifiers(path: Path | str) -> list[str]:
    """Read the identifier list from a ``.xlsx``/``.xls`` workbook.

    Raises:
        SpreadsheetError: one of its subclasses for each distinguishable problem
            (missing file, unsupported format, no sheets, empty sheet, too few
            rows, no 4th column, no identifiers). Any other parser failure is
            wrapped in SpreadsheetReadError with the original message.
    """
    path = Path(path)
    if not path.exists():
        raise SpreadsheetNotFoundError(f"spreadsheet not found: {path}")
    ext = path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(
            f"unsupported spreadsheet format: {ext or '(none)'}, use .xlsx or .xls"
        )
    try:
        df = read_first_sheet(path)
        return extract_identifiers(df, source=path.name)
    except SpreadsheetError:
        raise
    except Exception as e:
        raise SpreadsheetReadError(f"failed to read spreadsheet {path}: {e}") from e
