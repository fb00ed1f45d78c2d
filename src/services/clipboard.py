from __future__ import annotations

from collections.abc import Callable

import pyperclip

"""System clipboard access through pyperclip.

A failed write raises ClipboardError and is not retried; the CLI then prints the
export for manual selection instead.
"""

__all__ = [
    "ClipboardError",
    "ClipboardWriter",
    "read_clipboard",
    "write_clipboard",
]

ClipboardWriter = Callable[[str], None]


class ClipboardError(Exception):
    """Raised when the clipboard cannot be read or written."""


def read_clipboard() -> str:
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"clipboard read failed: {e}") from e
    return text or ""


def write_clipboard(text: str) -> None:
    """Copy text to the clipboard unchanged.

    Raises:
        ClipboardError: if pyperclip has no working copy mechanism
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"clipboard write failed: {e}") from e
