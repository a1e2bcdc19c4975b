"""Structured logging helpers for the capture-and-match pipeline.

Purpose
    Keep every emission of logging data predictable and contextual without
    forcing test suites to adopt a specific logging backend.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for structured event payloads.

System Integration
    Used by the guard, the hook suppressor, the settings loader and the
    composition root so each stage reports what it decided with the same
    metadata. The domain layer stays free from logging concerns.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("assert_panic_trace_id", default=None)
"""Current trace identifier propagated through logging helpers.

Why
    Lets a test suite correlate every pipeline event of one test case (for
    example with the pytest node id) without threading identifiers manually.
"""

_LOGGER: Final[logging.Logger] = logging.getLogger("assert_panic")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('tests/test_demo.py::test_disco')
    >>> TRACE_ID.get()
    'tests/test_demo.py::test_disco'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the trace context."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry that includes the trace context."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry that includes the trace context."""

    _emit(logging.ERROR, message, fields)


def make_event(
    stage: str,
    payload_type: type | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for a pipeline stage.

    Inputs
        stage: Pipeline stage name (``"guard"``, ``"extract"``, ``"match"``, ``"hooks"``).
        payload_type: Runtime type of the captured payload, if one exists.
        payload: Optional mapping with extra diagnostic detail.

    Examples
    --------
    >>> make_event('extract', str, {'expected': 'int'})
    {'stage': 'extract', 'payload_type': 'str', 'expected': 'int'}
    """

    event = _base_event(stage, payload_type)
    return _merge_payload(event, payload)


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Attach the current trace identifier to the provided structured fields."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context


def _base_event(stage: str, payload_type: type | None) -> dict[str, Any]:
    """Create the minimal event payload containing stage and payload type."""

    return {"stage": stage, "payload_type": None if payload_type is None else payload_type.__qualname__}


def _merge_payload(event: dict[str, Any], payload: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge optional diagnostic data into the event payload when provided."""

    if payload:
        event |= dict(payload)
    return event
