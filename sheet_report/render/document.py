from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from docxtpl import DocxTemplate

from ..errors import TemplateNotFoundError, TemplateRenderError

"""Word document rendering via docxtpl.

The payload context is substituted into a ``.docx`` template (Jinja2 tags).
Output goes to ``<base>-YYYYMMDD-HHMMSS.docx``; the file is written under a
temporary name first and moved into place only after a successful save.
"""

__all__ = [
    "TIMESTAMP_FMT",
    "OUTPUT_SUFFIX",
    "build_output_path",
    "render_document",
]

TIMESTAMP_FMT = "%Y%m%d-%H%M%S"
OUTPUT_SUFFIX = ".docx"

logger = logging.getLogger(__name__)


def build_output_path(base: str, now: datetime | None = None, directory: Path | None = None) -> Path:
    """Return ``<directory>/<base>-<timestamp>.docx`` (local time, cwd by default)."""
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FMT)
    directory = directory if directory is not None else Path.cwd()
    return (directory / f"{base}-{stamp}{OUTPUT_SUFFIX}").resolve()


def render_document(template_path: Path, context: dict[str, Any], output_path: Path) -> Path:
    """Render ``context`` into ``template_path`` and save it as ``output_path``.

    Raises:
        TemplateNotFoundError: template file does not exist
        TemplateRenderError: tag substitution or saving failed (no output left behind)
    """
    if not template_path.exists():
        raise TemplateNotFoundError(f"template not found: {template_path}")

    part = output_path.with_name(output_path.name + ".part")
    try:
        doc = DocxTemplate(str(template_path))
        # 識別子に & や < が含まれても XML を壊さない
        doc.render(context, autoescape=True)
        doc.save(str(part))
        os.replace(part, output_path)
    except Exception as e:
        if part.exists():
            part.unlink()
        raise TemplateRenderError(f"failed to render {template_path.name}: {e}") from e
    logger.debug(f"saved {output_path}")
    return output_path
