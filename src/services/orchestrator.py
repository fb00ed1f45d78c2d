from __future__ import annotations

import logging

from ..models.processing_result import Notification, ProcessingResult
from ..tabular.reader import EmptyInputError, SchemaMismatchError, parse_pasted_text
from .clipboard import ClipboardError, ClipboardWriter, write_clipboard
from .export import render_tab_separated
from .projector import project_rows

logger = logging.getLogger(__name__)

"""Service orchestration for the incident ticket reformatter.

process_text() runs reader -> normalizers -> projector and returns everything
the presentation layer needs in one ProcessingResult. copy_result() takes that
result explicitly; there is no module-level "last result".

Neither function raises on bad input: failures come back as error
notifications and the caller decides what to show.
"""

__all__ = [
    "MSG_COPIED",
    "MSG_COPY_FAILED",
    "MSG_EMPTY_INPUT",
    "MSG_NO_DATA_TO_COPY",
    "MSG_SCHEMA_MISMATCH",
    "copy_result",
    "process_text",
]

MSG_EMPTY_INPUT = "Please paste some data first"
MSG_SCHEMA_MISMATCH = "Error: Could not find required columns. Please check your data format."
MSG_NO_DATA_TO_COPY = "No data to copy"
MSG_COPIED = "Copied to clipboard!"
MSG_COPY_FAILED = "Failed to copy. Please select and copy manually."


def _failed(message: str) -> ProcessingResult:
    return ProcessingResult(rows=(), text="", notification=Notification.error(message))


def process_text(text: str | None, filled_by: str | None = "") -> ProcessingResult:
    """Reformat one paste of ticket data.

    Args:
        text: Raw pasted text (header line + tab-separated data lines)
        filled_by: Operator annotation copied into every output row

    Returns:
        ProcessingResult with the rows, their TSV export and a notification
    """
    if not text or not text.strip():
        return _failed(MSG_EMPTY_INPUT)

    try:
        raw_rows = parse_pasted_text(text)
    except EmptyInputError:
        return _failed(MSG_EMPTY_INPUT)
    except SchemaMismatchError as e:
        logger.debug(f"parse: {e}")
        return _failed(MSG_SCHEMA_MISMATCH)

    rows = tuple(project_rows(raw_rows, filled_by))
    logger.debug(f"parsed raw_rows={len(raw_rows)} output_rows={len(rows)}")
    return ProcessingResult(
        rows=rows,
        text=render_tab_separated(rows),
        notification=Notification.success(f"Processed {len(rows)} rows successfully!"),
    )


def copy_result(result: ProcessingResult, writer: ClipboardWriter | None = None) -> Notification:
    """Copy a result's TSV export to the clipboard.

    Args:
        result: Value returned by process_text()
        writer: Clipboard writer; defaults to write_clipboard

    Returns:
        Success or error notification. The result itself is left untouched.
    """
    if not result.rows:
        return Notification.error(MSG_NO_DATA_TO_COPY)

    write = writer or write_clipboard
    try:
        write(result.text)
    except ClipboardError as e:
        logger.debug(f"copy: {e}")
        return Notification.error(MSG_COPY_FAILED)
    return Notification.success(MSG_COPIED)
