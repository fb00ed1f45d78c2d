"""Domain models for the incident ticket reformatter.

This package contains the row, configuration and result types shared by the
table reader, the normalizers, the services and the CLI.
"""

from .config_models import OUTPUT_FORMATS, ReformatConfig
from .processing_result import Notification, ProcessingResult, Severity
from .ticket_rows import OUTPUT_COLUMNS, OutputRow, RawRow

__all__ = [
    # Configuration models
    "OUTPUT_FORMATS",
    "ReformatConfig",
    # Row models
    "OUTPUT_COLUMNS",
    "OutputRow",
    "RawRow",
    # Result models
    "Notification",
    "ProcessingResult",
    "Severity",
]
