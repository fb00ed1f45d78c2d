from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config.loader import ConfigError, resolve_config
from src.logging.init import log_notification, log_summary, set_debug, setup_logging
from src.models.config_models import OUTPUT_FORMATS
from src.models.processing_result import Notification, ProcessingResult
from src.services.clipboard import ClipboardError, read_clipboard
from src.services.export import render_html, render_table
from src.services.orchestrator import copy_result, process_text
from src.services.summary import render_summary_fields
from src.tabular.reader import TableParseError, inspect_pasted_text

"""CLI entrypoint (python -m src.cli).

Flow:
- Load .env and config
- Read pasted ticket data from the clipboard (or stdin with --stdin)
- Reformat, print the result on stdout, copy the TSV export to the clipboard
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_COPY_FAILED = 2


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv; a broken file only produces a warning."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except Exception as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}", file=sys.stderr)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Reformat pasted incident tickets for the reporting sheet")
    p.add_argument("--config", type=Path, default=None, help="YAML config (default: config/reformat.yml if present)")
    p.add_argument("--stdin", action="store_true", help="Read pasted text from stdin instead of the clipboard")
    p.add_argument("--filled-by", default=None, help="Value for the 'filled by' column")
    p.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default=None, help="Output rendering")
    p.add_argument("--no-copy", action="store_true", help="Do not copy the result to the clipboard")
    p.add_argument("--inspect-data", action="store_true", help="Print matched headers & first rows then exit")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _read_input(use_stdin: bool) -> str:
    if use_stdin:
        return sys.stdin.read()
    return read_clipboard()


def _render(result: ProcessingResult, output_format: str) -> str:
    if output_format == "tsv":
        return result.text
    if output_format == "html":
        return render_html(result.rows) + "\n"
    return render_table(result.rows) + "\n"


def _inspect_data(text: str) -> int:
    try:
        sample = inspect_pasted_text(text)
    except TableParseError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    print(f"HEADERS: {sample.headers}")
    mapped = {field.name: pos for field, pos in sample.column_index.items()}
    print(f"  matched={mapped}")
    for row in sample.rows:
        print(f"  row={row}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read sys.argv when argv is None; [] must mean "no arguments"
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        cfg = resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    filled_by = (args.filled_by if args.filled_by is not None else cfg.filled_by).strip()
    output_format = args.output_format or cfg.output_format
    copy_enabled = cfg.copy_to_clipboard and not args.no_copy

    try:
        text = _read_input(args.stdin)
    except ClipboardError as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(text)

    result = process_text(text, filled_by)
    log_notification(result.notification)
    if not result.ok:
        return EXIT_FATAL

    sys.stdout.write(_render(result, output_format))
    log_summary(render_summary_fields(result, filled_by))

    if not copy_enabled or not result.rows:
        return EXIT_SUCCESS

    copied: Notification = copy_result(result)
    log_notification(copied)
    if copied.ok:
        return EXIT_SUCCESS
    if output_format != "tsv":
        # Leave the export on screen for manual selection
        sys.stdout.write(result.text)
    return EXIT_COPY_FAILED
