from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .ticket_rows import OutputRow

"""Processing result models for the incident ticket reformatter.

A ProcessingResult is returned by every processing run and passed explicitly to
the copy step; nothing is kept between runs.
"""


class Severity(Enum):
    """Severity tag attached to every user-facing notification."""
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Message for the operator plus its severity."""
    message: str
    severity: Severity

    @classmethod
    def success(cls, message: str) -> Notification:
        return cls(message=message, severity=Severity.SUCCESS)

    @classmethod
    def error(cls, message: str) -> Notification:
        return cls(message=message, severity=Severity.ERROR)

    @property
    def ok(self) -> bool:
        return self.severity is Severity.SUCCESS


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of processing one paste.

    On failure rows is empty and text is "", so no partial output is shown.
    """
    rows: tuple[OutputRow, ...]  # reformatted rows, input order
    text: str  # tab-separated export of rows ("" when there are none)
    notification: Notification

    @property
    def ok(self) -> bool:
        return self.notification.ok

    @property
    def job_name_count(self) -> int:
        return sum(1 for r in self.rows if r.job_name)
