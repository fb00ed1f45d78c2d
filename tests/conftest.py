# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

HEADER = "\t".join([
    "Number", "Caller", "Short description", "Priority", "Configuration item",
    "State", "Assignment group", "Assigned to", "SLA due", "Opened",
])


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("TICKET_REFORMAT_FILLED_BY", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """filled_by: Night shift
output_format: tsv
copy_to_clipboard: true
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "reformat.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def pasted_tickets() -> str:
    """A ServiceNow list export as it arrives from the clipboard."""
    rows = [
        HEADER,
        "\t".join([
            "INC0012345", "UAC Monitor",
            "UAC Job:wf_StormCaster_DEP_OMS_Feed Application:OMS_STORM_CASTER_DEP_OMS_FEED_Sunday...",
            "3 - Moderate", "UAC", "New", "OMS Support", "", "2024-01-08 06:00:00", "2024-01-07 22:14:03",
        ]),
        "\t".join([
            "INC0012346", "Zabbix", "Disk space alert on srv01", "2 - High", "srv01",
            "In Progress", "Infra Ops", "J. Doe", "", "2024-01-07 22:20:11",
        ]),
        "\t".join(["", "", "", "", "", "Closed", "Infra Ops", "", "", ""]),
        "\t".join([
            "INC0012347", "UAC Monitor", "UAC Job:wf_Billing Application:OMS_BILLING_EXPORT_2024_RUN",
            "4 - Low", "UAC", "New", "OMS Support", "", "", "2024-01-08 01:02:03",
        ]),
    ]
    return "\r\n".join(rows) + "\r\n"
