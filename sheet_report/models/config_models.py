from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

"""Config dataclasses for the report generator.

``FileConfig`` mirrors the optional YAML file; ``RunConfig`` is the fully
resolved value the CLI builds once and passes into the pipeline.
"""

__all__ = [
    "FileConfig",
    "RunConfig",
    "DEFAULT_TEMPLATE",
    "DEFAULT_EXCEL",
    "DEFAULT_OUTPUT",
]

DEFAULT_TEMPLATE = "template.docx"
DEFAULT_EXCEL = "test.xlsx"
DEFAULT_OUTPUT = "output"


@dataclass(frozen=True)
class FileConfig:
    """Values read from ``config/report.yml`` (all optional)."""
    template: str | None = None
    excel: str | None = None
    output: str | None = None


@dataclass(frozen=True)
class RunConfig:
    """Resolved inputs for one run. Never mutated after construction."""
    template: Path  # .docx template path
    excel: Path  # identifier spreadsheet (.xlsx / .xls)
    output: str = DEFAULT_OUTPUT  # output base name; timestamp and .docx are appended
