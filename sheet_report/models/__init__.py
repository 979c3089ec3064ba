"""Domain models for the spreadsheet-driven report generator.

This package contains the report data structures handed to the templating
engine plus the configuration and run result value objects.
"""

from .config_models import FileConfig, RunConfig
from .report import PageRecord, PaginationParams, ReportPayload, RowRecord
from .run_result import RunResult

__all__ = [
    # Configuration models
    "FileConfig",
    "RunConfig",
    # Report models
    "PaginationParams",
    "RowRecord",
    "PageRecord",
    "ReportPayload",
    # Results
    "RunResult",
]
