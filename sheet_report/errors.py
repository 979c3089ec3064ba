from __future__ import annotations

"""Error hierarchy for the report generator.

Core functions raise these and never print; the CLI maps each family to a
labeled ERROR line, user guidance and an exit code.
"""

__all__ = [
    "ReportError",
    "SpreadsheetError",
    "SpreadsheetNotFoundError",
    "UnsupportedFormatError",
    "NoSheetsError",
    "EmptySheetError",
    "InsufficientRowsError",
    "MissingIdentifierColumnError",
    "NoIdentifiersError",
    "SpreadsheetReadError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateRenderError",
]


class ReportError(Exception):
    """Base exception for report generation failures."""


class SpreadsheetError(ReportError):
    """Raised when the identifier spreadsheet is missing, unreadable or malformed."""


class SpreadsheetNotFoundError(SpreadsheetError):
    pass


class UnsupportedFormatError(SpreadsheetError):
    pass


class NoSheetsError(SpreadsheetError):
    pass


class EmptySheetError(SpreadsheetError):
    pass


class InsufficientRowsError(SpreadsheetError):
    pass


class MissingIdentifierColumnError(SpreadsheetError):
    pass


class NoIdentifiersError(SpreadsheetError):
    pass


class SpreadsheetReadError(SpreadsheetError):
    """Unexpected failure while parsing the workbook (original message preserved)."""


class TemplateError(ReportError):
    pass


class TemplateNotFoundError(TemplateError):
    pass


class TemplateRenderError(TemplateError):
    """Raised when the docx template cannot be rendered or saved."""
