"""Unit tests for structured logging utilities in ``observability``."""

from __future__ import annotations

import logging

import pytest

from assert_panic import assert_panic, bind_trace_id, get_logger, panic
from assert_panic.observability import TRACE_ID, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured logs should include the bound trace identifier and contextual fields."""

    caplog.set_level(logging.INFO, logger="assert_panic")
    bind_trace_id("trace-123")
    try:
        log_info("panic-asserted", stage="match", payload_type="str")
    finally:
        bind_trace_id(None)
    record = caplog.records[-1]
    assert getattr(record, "context") == {"trace_id": "trace-123", "stage": "match", "payload_type": "str"}


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_make_event_merges_optional_payload() -> None:
    event = make_event("guard", int, {"silent": False})
    assert event == {"stage": "guard", "payload_type": "int", "silent": False}


def test_make_event_without_payload_type() -> None:
    assert make_event("guard", None) == {"stage": "guard", "payload_type": None}


def test_pipeline_emits_debug_events(caplog: pytest.LogCaptureFixture) -> None:
    """Each stage should report its decision through the package logger."""

    caplog.set_level(logging.DEBUG, logger="assert_panic")
    assert_panic(lambda: panic("at the Disco"), str, "at the Disco", silent=False)
    messages = [record.getMessage() for record in caplog.records]
    assert "panic_captured" in messages
    assert "panic_asserted" in messages
    captured = next(record for record in caplog.records if record.getMessage() == "panic_captured")
    assert getattr(captured, "context")["payload_type"] == "str"
    assert captured.levelno == logging.DEBUG
