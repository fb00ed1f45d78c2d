from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for a reformat run."""

SUMMARY_PREFIX = "SUMMARY"


def render_summary_fields(result: ProcessingResult, filled_by: str | None = "") -> str:
    """Render the key=value part of the SUMMARY line.

    Format:
    rows={rows} job_names={found} missing_job_names={missing} filled_by={who}

    An empty filled_by is shown as "-" so the line stays whitespace-delimited.
    The SUMMARY label itself is added by the log formatter.
    """
    total = len(result.rows)
    found = result.job_name_count
    who = "_".join((filled_by or "").split()) or "-"
    return (
        f"rows={total} "
        f"job_names={found} "
        f"missing_job_names={total - found} "
        f"filled_by={who}"
    )


def render_summary_line(result: ProcessingResult, filled_by: str | None = "") -> str:
    """Render the full SUMMARY line for a processing result.

    Examples:
        >>> from src.models import Notification, OutputRow, ProcessingResult
        >>> row = OutputRow("INC1", "New", "High", "Ops", "jd", "OMS_FEED")
        >>> result = ProcessingResult((row,), "", Notification.success("ok"))
        >>> render_summary_line(result, "jd")
        'SUMMARY rows=1 job_names=1 missing_job_names=0 filled_by=jd'
    """
    return f"{SUMMARY_PREFIX} {render_summary_fields(result, filled_by)}"
