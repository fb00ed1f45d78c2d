from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..models.ticket_rows import RawRow

"""Pasted-table reader.

First non-blank line is the header row, every following non-blank line is a
data row, and cells are tab-delimited. Headers are matched case-insensitively
against the canonical names of the known ticket fields; any other column is
ignored.
"""

__all__ = [
    "EmptyInputError",
    "LogicalField",
    "SchemaMismatchError",
    "TableParseError",
    "TableSample",
    "build_column_index",
    "inspect_pasted_text",
    "parse_pasted_text",
]

# "A\n" is two cells stacked vertically, so split explicitly instead of splitlines()
_LINE_SPLIT = re.compile(r"\r?\n")


class TableParseError(Exception):
    """Base class for pasted-table errors."""


class EmptyInputError(TableParseError):
    """Raised when the pasted text holds no non-blank line."""


class SchemaMismatchError(TableParseError):
    """Raised when neither the Number nor the Short description column is present."""


class LogicalField(Enum):
    """Ticket attributes recognised in the header row.

    Member order is the matching order; the value is the canonical header name.
    """
    NUMBER = "Number"
    CALLER = "Caller"
    SHORT_DESCRIPTION = "Short description"
    PRIORITY = "Priority"
    CONFIGURATION_ITEM = "Configuration item"
    STATE = "State"
    ASSIGNMENT_GROUP = "Assignment group"
    ASSIGNED_TO = "Assigned to"
    SLA_DUE = "SLA due"
    OPENED = "Opened"


ColumnIndexMap = dict[LogicalField, int]


@dataclass
class TableSample:
    headers: list[str]
    column_index: ColumnIndexMap
    rows: list[RawRow]  # first rows only


def _non_blank_lines(text: str) -> list[str]:
    return [line for line in _LINE_SPLIT.split(text) if line.strip()]


def _cell(values: list[str], index: int | None) -> str:
    if index is None or index >= len(values):
        return ""
    return values[index].strip()


def build_column_index(headers: list[str]) -> ColumnIndexMap:
    """Map each recognised logical field to its column position.

    The first field (in LogicalField order) whose canonical name equals the
    trimmed header, ignoring case, claims the column. A header repeated later in
    the row moves the field to the later column.
    """
    index: ColumnIndexMap = {}
    for position, header in enumerate(headers):
        wanted = header.strip().lower()
        for field in LogicalField:
            if wanted == field.value.lower():
                index[field] = position
                break
    return index


def _read_row(values: list[str], index: ColumnIndexMap) -> RawRow:
    return RawRow(
        number=_cell(values, index.get(LogicalField.NUMBER)),
        state=_cell(values, index.get(LogicalField.STATE)),
        priority=_cell(values, index.get(LogicalField.PRIORITY)),
        assignment_group=_cell(values, index.get(LogicalField.ASSIGNMENT_GROUP)),
        short_description=_cell(values, index.get(LogicalField.SHORT_DESCRIPTION)),
    )


def _parse(text: str, limit: int | None = None) -> TableSample:
    if not isinstance(text, str):
        raise EmptyInputError("no data")
    lines = _non_blank_lines(text)
    if not lines:
        raise EmptyInputError("no data")

    headers = [h.strip() for h in lines[0].split("\t")]
    index = build_column_index(headers)
    if LogicalField.NUMBER not in index and LogicalField.SHORT_DESCRIPTION not in index:
        raise SchemaMismatchError(f"required columns missing: headers={headers}")

    rows: list[RawRow] = []
    for line in lines[1:]:
        row = _read_row(line.split("\t"), index)
        if row.is_blank:
            continue
        rows.append(row)
        if limit is not None and len(rows) >= limit:
            break
    return TableSample(headers=headers, column_index=index, rows=rows)


def parse_pasted_text(text: str) -> list[RawRow]:
    """Parse pasted tab-separated ticket data into RawRows, preserving order.

    Steps:
    1. Split into lines and drop blank ones (none left -> EmptyInputError)
    2. Match the header row against LogicalField names
    3. Require Number or Short description (else SchemaMismatchError)
    4. Read every data line; short rows yield "" for the missing cells
    5. Skip rows with neither number nor short description

    A header with no data lines is not an error and yields [].
    """
    return _parse(text).rows


def inspect_pasted_text(text: str, limit: int = 3) -> TableSample:
    """Header mapping plus the first ``limit`` kept rows, for diagnostics."""
    return _parse(text, limit=limit)
