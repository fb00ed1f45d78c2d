from __future__ import annotations

from src.models.processing_result import Severity
from src.services.clipboard import ClipboardError
from src.services.orchestrator import (
    MSG_COPIED,
    MSG_COPY_FAILED,
    MSG_EMPTY_INPUT,
    MSG_NO_DATA_TO_COPY,
    MSG_SCHEMA_MISMATCH,
    copy_result,
    process_text,
)


def test_process_text_success(pasted_tickets: str):
    result = process_text(pasted_tickets, "Night shift")
    assert result.ok
    assert result.notification.message == "Processed 3 rows successfully!"
    assert [r.job_name for r in result.rows] == [
        "OMS_STORM_CASTER_DEP_OMS_FEED",
        "",
        "OMS_BILLING_EXPORT",
    ]
    assert [r.priority for r in result.rows] == ["Medium", "High", "Low"]
    assert all(r.filled_by == "Night shift" for r in result.rows)
    assert result.text.startswith("Number\tState\tPriority\tAssignment group\tfilled by\tJob name\n")
    assert result.job_name_count == 2


def test_process_text_empty_input():
    for text in ("", "   \n  ", None):
        result = process_text(text, "x")
        assert result.notification.severity is Severity.ERROR
        assert result.notification.message == MSG_EMPTY_INPUT
        assert result.rows == ()
        assert result.text == ""


def test_process_text_schema_mismatch():
    result = process_text("Caller\tState\nBob\tNew", "x")
    assert not result.ok
    assert result.notification.message == MSG_SCHEMA_MISMATCH
    assert result.rows == ()


def test_process_text_header_only_is_not_an_error():
    result = process_text("Number\tShort description", "x")
    assert result.ok
    assert result.rows == ()
    assert result.text == ""
    assert result.notification.message == "Processed 0 rows successfully!"


def test_copy_result_success(pasted_tickets: str):
    result = process_text(pasted_tickets, "x")
    written = []
    note = copy_result(result, writer=written.append)
    assert note.ok
    assert note.message == MSG_COPIED
    assert written == [result.text]


def test_copy_result_failure_leaves_result_intact(pasted_tickets: str):
    result = process_text(pasted_tickets, "x")
    rows_before = result.rows

    def broken(_text):
        raise ClipboardError("both mechanisms failed")

    note = copy_result(result, writer=broken)
    assert note.severity is Severity.ERROR
    assert note.message == MSG_COPY_FAILED
    assert result.rows is rows_before


def test_copy_result_without_rows():
    written = []
    note = copy_result(process_text("Number\n", "x"), writer=written.append)
    assert note.message == MSG_NO_DATA_TO_COPY
    assert written == []


def test_copy_result_defaults_to_clipboard_module(monkeypatch, pasted_tickets: str):
    written = []
    monkeypatch.setattr("src.services.orchestrator.write_clipboard", written.append)
    note = copy_result(process_text(pasted_tickets, "x"))
    assert note.ok
    assert len(written) == 1
