from __future__ import annotations

import re

__all__ = [
    "normalize_priority",
]

_DIGITS_AND_HYPHENS = re.compile(r"[0-9-]")
_MODERATE = re.compile("moderate", re.IGNORECASE)


def normalize_priority(priority: str | None) -> str:
    """Turn a ticket priority like "3 - Moderate" into a report label ("Medium").

    Digits and hyphens are dropped, "moderate" becomes "Medium" and the result
    is capitalized as a single word ("2 - HIGH" -> "High").
    """
    if not priority or not isinstance(priority, str):
        return ""

    label = _DIGITS_AND_HYPHENS.sub("", priority).strip()
    label = _MODERATE.sub("Medium", label)
    if not label:
        return ""
    return label[0].upper() + label[1:].lower()
