from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ..models.ticket_rows import OUTPUT_COLUMNS, OutputRow

"""Serialization and rendering of reformatted rows.

render_tab_separated() is the spreadsheet round-trip format used for the
clipboard. The DataFrame based renderers are the display adapters used by the
CLI; the processing core never depends on them.
"""

__all__ = [
    "EMPTY_PLACEHOLDER",
    "render_html",
    "render_tab_separated",
    "render_table",
    "rows_to_dataframe",
]

EMPTY_PLACEHOLDER = "No data to display"


def render_tab_separated(rows: Sequence[OutputRow]) -> str:
    """Header line plus one tab-separated line per row, each ending in a newline.

    Returns "" for an empty sequence.
    """
    if not rows:
        return ""
    lines = ["\t".join(OUTPUT_COLUMNS)]
    lines.extend("\t".join(row.as_values()) for row in rows)
    return "\n".join(lines) + "\n"


def rows_to_dataframe(rows: Sequence[OutputRow]) -> pd.DataFrame:
    """All-string DataFrame with OUTPUT_COLUMNS as columns."""
    return pd.DataFrame(
        [row.as_values() for row in rows],
        columns=list(OUTPUT_COLUMNS),
        dtype=str,
    )


def render_table(rows: Sequence[OutputRow]) -> str:
    if not rows:
        return EMPTY_PLACEHOLDER
    return rows_to_dataframe(rows).to_string(index=False)


def render_html(rows: Sequence[OutputRow]) -> str:
    """HTML table with escaped cell text (class ``output-table``)."""
    if not rows:
        return f'<div class="placeholder"><p>{EMPTY_PLACEHOLDER}</p></div>'
    return rows_to_dataframe(rows).to_html(
        index=False,
        escape=True,
        classes="output-table",
        border=0,
    )
