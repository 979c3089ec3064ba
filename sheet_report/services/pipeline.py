from __future__ import annotations

import logging
import random
from datetime import UTC, datetime

from ..errors import TemplateNotFoundError
from ..excel.reader import read_identifiers
from ..models.config_models import RunConfig
from ..models.run_result import RunResult
from ..render.document import build_output_path, render_document
from .assembly import assemble
from .pagination import paginate
from .synthesis import synthesize_pages

"""Pipeline orchestration: spreadsheet -> pages -> payload -> rendered document.

The template is checked before the spreadsheet is touched so a bad template
path fails fast. Errors propagate unchanged; the CLI decides how to report them.
"""

__all__ = [
    "run",
]

logger = logging.getLogger(__name__)


def run(
    config: RunConfig,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> RunResult:
    """Execute one report run.

    Args:
        config: resolved inputs (template, spreadsheet, output base name)
        rng: optional random source for the synthesized values
        now: optional timestamp used in the output file name

    Returns:
        RunResult describing the generated document
    """
    start_time = datetime.now(UTC)

    template = config.template.resolve()
    if not template.exists():
        raise TemplateNotFoundError(f"template not found: {template}")

    logger.info(f"reading spreadsheet: {config.excel}")
    identifiers = read_identifiers(config.excel)
    logger.info(f"read {len(identifiers)} identifiers")

    params = paginate(identifiers)
    logger.info(f"generating {params.page_count} page(s), up to {params.rows_per_page} rows per page")
    pages = synthesize_pages(params.page_count, params.rows_per_page, identifiers, rng)
    payload = assemble(pages)

    output_path = build_output_path(config.output, now=now)
    render_document(template, payload.to_context(), output_path)
    logger.info(f"wrote {output_path.name}")

    end_time = datetime.now(UTC)
    return RunResult(
        total_identifiers=params.total_items,
        page_count=params.page_count,
        rows_per_page=params.rows_per_page,
        last_page_rows=params.last_page_rows,
        output_path=output_path,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )
