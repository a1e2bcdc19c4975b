"""Payload extraction.

Narrow a :class:`CapturedPanic` to the type the caller expects or raise a
:class:`TypeMismatch` naming both the expected type and the runtime type of the
payload. The payload value itself never appears in the message.
"""

from __future__ import annotations

from typing import Any

from ..domain.captured import CapturedPanic, ExpectedType, type_name
from ..domain.errors import TypeMismatch
from ..domain.modes import MatchMode
from ..observability import log_debug, make_event


def type_mismatch_message(
    captured: CapturedPanic,
    expected_type: ExpectedType,
    mode: MatchMode = MatchMode.TYPE_ONLY,
    expected: Any = None,
) -> str:
    """Render the diagnostic for a payload that is not an *expected_type*.

    Examples
    --------
    >>> from assert_panic.domain.errors import Panic
    >>> captured = CapturedPanic.from_exception(Panic("at the Disco"))
    >>> type_mismatch_message(captured, int)
    "Expected a `int` panic but found one with <class 'str'>"
    >>> type_mismatch_message(captured, int, MatchMode.EQUALS, 2)
    "Expected a `int` panic equal to 2 but found one with <class 'str'>"
    """

    qualifier = "" if mode is MatchMode.TYPE_ONLY else f" {mode.value} {expected!r}"
    return f"Expected a `{type_name(expected_type)}` panic{qualifier} but found one with {captured.payload_type!r}"


def extract(
    captured: CapturedPanic,
    expected_type: ExpectedType,
    mode: MatchMode = MatchMode.TYPE_ONLY,
    expected: Any = None,
) -> Any:
    """Return the payload of *captured* viewed as *expected_type*.

    *mode* and *expected* only enrich the diagnostic; no comparison happens
    here.

    Raises
    ------
    TypeMismatch
        When the payload is not an instance of *expected_type*.
    """

    narrowed = captured.narrow(expected_type)
    if narrowed.ok:
        return narrowed.value
    log_debug(
        "panic_type_mismatch",
        **make_event("extract", captured.payload_type, {"expected_type": type_name(expected_type)}),
    )
    raise TypeMismatch(type_mismatch_message(captured, expected_type, mode, expected))
