from __future__ import annotations

from dataclasses import dataclass

"""Config dataclass for the incident ticket reformatter.

The loader in src/config/loader.py builds this from config/reformat.yml; the
CLI applies environment and command-line overrides on top of it.
"""

OUTPUT_FORMATS = ("table", "tsv", "html")


@dataclass(frozen=True)
class ReformatConfig:
    """Root configuration object for one reformat run."""
    filled_by: str = ""  # default "filled by" annotation
    output_format: str = "table"  # one of OUTPUT_FORMATS
    copy_to_clipboard: bool = True  # export the TSV after processing
