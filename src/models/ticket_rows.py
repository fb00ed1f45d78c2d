from __future__ import annotations

from dataclasses import dataclass

"""Ticket row models for the incident ticket reformatter.

RawRow is what the table reader produces from one pasted line; OutputRow is the
fixed reporting schema handed to the renderers and the clipboard export.
"""

__all__ = [
    "OUTPUT_COLUMNS",
    "OutputRow",
    "RawRow",
]

# Column order of the reporting sheet. Never reordered.
OUTPUT_COLUMNS: tuple[str, ...] = (
    "Number",
    "State",
    "Priority",
    "Assignment group",
    "filled by",
    "Job name",
)


@dataclass(frozen=True)
class RawRow:
    """One pasted ticket line, reduced to the fields the report needs.

    Every field is plain text; a column missing from the paste yields "".
    """
    number: str = ""
    state: str = ""
    priority: str = ""  # raw label, e.g. "3 - Moderate"
    assignment_group: str = ""
    short_description: str = ""  # free text the job name is extracted from

    @property
    def is_blank(self) -> bool:
        """True when the row carries neither a ticket number nor a description."""
        return not self.number and not self.short_description


@dataclass(frozen=True)
class OutputRow:
    """A reformatted row in reporting-sheet order (see OUTPUT_COLUMNS)."""
    number: str
    state: str
    priority: str  # normalized label, e.g. "Medium"
    assignment_group: str
    filled_by: str  # operator annotation, carried through unchanged
    job_name: str  # canonical OMS_ job name or ""

    def as_values(self) -> list[str]:
        """Field values in OUTPUT_COLUMNS order."""
        return [
            self.number,
            self.state,
            self.priority,
            self.assignment_group,
            self.filled_by,
            self.job_name,
        ]
