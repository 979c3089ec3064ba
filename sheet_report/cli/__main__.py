from __future__ import annotations

import argparse
import os
import sys
import traceback
from collections.abc import Callable
from pathlib import Path

from dotenv import load_dotenv

from sheet_report.config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    build_run_config,
    load_config,
    resolve_setting,
)
from sheet_report.errors import SpreadsheetError, TemplateError
from sheet_report.excel.reader import SUPPORTED_EXTENSIONS
from sheet_report.logging.init import log_summary, set_debug, setup_logging
from sheet_report.models.config_models import DEFAULT_EXCEL, DEFAULT_OUTPUT, DEFAULT_TEMPLATE, FileConfig
from sheet_report.services.pipeline import run
from sheet_report.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env and the optional YAML config
- Resolve template / spreadsheet / output base (flag > env > YAML > default)
- Prompt for missing paths when attached to a terminal
- Run the pipeline once with a frozen RunConfig and print the SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

SPREADSHEET_HINTS = (
    "the spreadsheet path is correct",
    "the file format is .xlsx or .xls",
    "the 4th column holds the product codes",
    "the file is not locked by another program",
)


def _parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    p = argparse.ArgumentParser(
        prog="sheet-report",
        description="Generate a paginated Word report from spreadsheet identifiers",
    )
    p.add_argument("-t", "--template", help="Path to the .docx template")
    p.add_argument("-e", "--excel", help="Path to the identifier spreadsheet (.xlsx/.xls)")
    p.add_argument("-o", "--output", help=f"Output base name (default: {DEFAULT_OUTPUT})")
    p.add_argument("--config", type=Path, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--no-input", action="store_true", help="Never prompt for missing paths")
    # 未知の引数は無視する (従来のランチャー互換)
    return p.parse_known_args(argv)


def _load_env_file(path: Path) -> None:
    """Load .env without overriding variables already set in the process."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _load_file_config(explicit: Path | None) -> FileConfig | None:
    """Load the YAML config; the default path is optional, an explicit one is not."""
    if explicit is not None:
        return load_config(explicit)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return None


def _stdin_is_tty() -> bool:
    return sys.stdin.isatty()


def _ask(question: str, default: str, input_fn: Callable[[str], str]) -> str:
    answer = (input_fn(f"{question} (default: {default}): ") or "").strip()
    return answer or default


def _prompt_paths(
    template: str,
    excel: str,
    logger,
    input_fn: Callable[[str], str] | None = None,
) -> tuple[str, str]:
    """Ask for template and spreadsheet paths until both point at usable files."""
    input_fn = input_fn or input
    while True:
        candidate = _ask("Template path", template, input_fn)
        template = candidate
        if Path(candidate).resolve().exists():
            break
        logger.error(f"template not found: {Path(candidate).resolve()}")

    while True:
        candidate = _ask("Spreadsheet path", excel, input_fn)
        excel = candidate
        resolved = Path(candidate).resolve()
        if not resolved.exists():
            logger.error(f"spreadsheet not found: {resolved}")
            continue
        ext = resolved.suffix.lower()
        if ext in SUPPORTED_EXTENSIONS:
            break
        logger.error(f"unsupported spreadsheet format: {ext or '(none)'}, use .xlsx or .xls")

    return template, excel


def _pause_before_exit(interactive: bool) -> None:
    """Keep a double-clicked Windows console open until Enter is pressed."""
    if not interactive or sys.platform != "win32":
        return
    try:
        input("Press Enter to exit...")
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # [] はそのまま使う (None のときだけ sys.argv を読む)
    if argv is None:
        argv = sys.argv[1:]
    no_args = len(argv) == 0
    args, ignored = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")
    if ignored:
        logger.debug(f"ignored arguments: {ignored}")

    _load_env_file(Path(".env"))
    try:
        file_cfg = _load_file_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    template = resolve_setting("template", args.template, file_cfg, os.environ)
    excel = resolve_setting("excel", args.excel, file_cfg, os.environ)
    output = resolve_setting("output", args.output, file_cfg, os.environ)

    interactive = (
        (no_args or template is None or excel is None)
        and not args.no_input
        and _stdin_is_tty()
    )
    if interactive:
        try:
            template, excel = _prompt_paths(template or DEFAULT_TEMPLATE, excel or DEFAULT_EXCEL, logger)
        except (EOFError, KeyboardInterrupt):
            logger.error("input aborted")
            return EXIT_FATAL

    cfg = build_run_config(template, excel, output)
    logger.debug(f"template={cfg.template} excel={cfg.excel} output={cfg.output}")

    code = EXIT_SUCCESS
    try:
        result = run(cfg)
    except SpreadsheetError as e:
        logger.error(f"spreadsheet: {e}")
        for hint in SPREADSHEET_HINTS:
            logger.info(f"check: {hint}")
        code = EXIT_FATAL
    except TemplateError as e:
        logger.error(f"template: {e}")
        logger.info("check: the template path is correct and the file is a valid .docx")
        code = EXIT_FATAL
    except Exception as e:
        logger.error(f"unexpected: {e}")
        logger.debug(traceback.format_exc())
        code = EXIT_FATAL
    else:
        # log_summary adds the "SUMMARY " prefix
        log_summary(render_summary_line(result)[len("SUMMARY "):])

    _pause_before_exit(interactive)
    return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
