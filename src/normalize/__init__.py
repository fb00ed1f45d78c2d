from .job_name import extract_job_name
from .priority import normalize_priority

__all__ = [
    "extract_job_name",
    "normalize_priority",
]
