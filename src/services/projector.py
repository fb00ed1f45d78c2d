from __future__ import annotations

from collections.abc import Iterable

from ..models.ticket_rows import OutputRow, RawRow
from ..normalize.job_name import extract_job_name
from ..normalize.priority import normalize_priority

"""Row projection: RawRow + derived fields + operator annotation -> OutputRow."""

__all__ = [
    "project_row",
    "project_rows",
]


def project_row(raw: RawRow, filled_by: str | None = "") -> OutputRow:
    return OutputRow(
        number=raw.number or "",
        state=raw.state or "",
        priority=normalize_priority(raw.priority),
        assignment_group=raw.assignment_group or "",
        filled_by=filled_by or "",
        job_name=extract_job_name(raw.short_description),
    )


def project_rows(raws: Iterable[RawRow], filled_by: str | None = "") -> list[OutputRow]:
    """Project every RawRow, keeping input order. Never fails."""
    return [project_row(raw, filled_by) for raw in raws]
