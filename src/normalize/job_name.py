from __future__ import annotations

import re

"""Job name extraction from incident short descriptions.

Monitoring alerts put the job identifier after a colon, e.g.::

    UAC Job:wf_StormCaster_DEP_OMS_Feed Application:OMS_STORM_CASTER_DEP_OMS_FEED_Sunday...

The canonical job name is the OMS_ token (here OMS_STORM_CASTER_DEP_OMS_FEED),
upper-cased, with any trailing run-date fragment removed.
"""

__all__ = [
    "DATE_KEYWORDS",
    "extract_job_name",
    "select_candidate",
    "strip_date_suffix",
]

JOB_PREFIX = "OMS_"

# Only an OMS_ token that directly follows a colon (optional whitespace) counts.
# Letters are spelled out instead of IGNORECASE so only ASCII A-Z/a-z match
# (IGNORECASE would fold "ſ" or the Kelvin sign into them); \s still covers NBSP.
JOB_PATTERN = re.compile(r":\s*[Oo][Mm][Ss]_([A-Za-z0-9_]+)")

DAYS_OF_WEEK = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DATE_KEYWORDS = DAYS_OF_WEEK + MONTHS

_KEYWORD_PATTERNS = tuple(
    re.compile(rf"[_-]{keyword}", re.IGNORECASE | re.ASCII) for keyword in DATE_KEYWORDS
)
_YEAR_PATTERN = re.compile(r"[_-][0-9]{4}")


def select_candidate(candidates: list[str]) -> str:
    """Pick the longest fully upper-case candidate, else the longest overall.

    Ties go to the first candidate encountered.
    """
    best = ""
    for text in candidates:
        if text == text.upper() and len(text) > len(best):
            best = text
    if best:
        return best
    for text in candidates:
        if len(text) > len(best):
            best = text
    return best


def strip_date_suffix(candidate: str) -> str:
    """Cut a trailing ``_Sunday`` / ``-March`` / ``_2024`` style fragment.

    Keywords are tried in DATE_KEYWORDS order and the year pattern is retried
    after every keyword miss, so the first iteration that hits either one
    decides the cut. In practice: a Sunday fragment wins over a year, a year
    wins over every other weekday and month.
    """
    for keyword_pattern in _KEYWORD_PATTERNS:
        match = keyword_pattern.search(candidate)
        if match:
            return candidate[: match.start()]
        year = _YEAR_PATTERN.search(candidate)
        if year:
            return candidate[: year.start()]
    return candidate


def extract_job_name(short_description: str | None) -> str:
    """Return the canonical job name found in a short description, or ""."""
    if not short_description or not isinstance(short_description, str):
        return ""

    candidates = [JOB_PREFIX + m.group(1) for m in JOB_PATTERN.finditer(short_description)]
    if not candidates:
        return ""

    return strip_date_suffix(select_candidate(candidates)).upper()
