# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
from typing import Callable

import pytest

from sheet_report.logging.init import reset_logging
from tests.helpers import code_rows, write_template, write_workbook


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        monkeypatch.chdir(p)
        # SHEET_REPORT_* が実行環境に残っていると解決順序のテストが壊れる
        for name in ("SHEET_REPORT_TEMPLATE", "SHEET_REPORT_EXCEL", "SHEET_REPORT_OUTPUT"):
            monkeypatch.delenv(name, raising=False)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def make_workbook(temp_workdir: Path) -> Callable[..., Path]:
    def _make(codes: list[object], name: str = "codes.xlsx") -> Path:
        return write_workbook(temp_workdir / name, {"Sheet1": code_rows(codes)})
    return _make


@pytest.fixture()
def template_path(temp_workdir: Path) -> Path:
    return write_template(temp_workdir / "template.docx")


@pytest.fixture()
def sample_config_yaml() -> str:
    return """template: ./template.docx
excel: ./codes.xlsx
output: monthly
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "report.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
