"""Testing diagnostics that keep panic scenarios observable and predictable.

Purpose
    Provide deterministic operations for the capture-and-match pipeline so CLI
    end-to-end tests and documentation examples do not need ad-hoc lambdas.

Contents
    - ``FAILURE_MESSAGE``: stable message used when forcing a failure.
    - ``i_should_fail``: raises ``RuntimeError`` with ``FAILURE_MESSAGE``.
    - ``i_should_panic``: raises :class:`~assert_panic.domain.errors.Panic` with
      ``FAILURE_MESSAGE`` as payload.
    - ``i_should_panic_with_number``: panics with an ``int`` payload.
    - ``i_should_panic_with_bytes``: panics with the UTF-8 encoded message.
    - ``i_should_panic_with_flag``: panics with a ``False`` payload.
    - ``i_should_not_panic``: returns normally.
    - ``CallCounter``: zero-argument factory that records how often it ran.

System Integration
    Referenced by ``assert-panic check`` targets in the CLI tests and by the
    ``fail`` command.
"""

from __future__ import annotations

from typing import Any, Final

from .domain.errors import Panic

FAILURE_MESSAGE: Final[str] = "i should fail"
"""Stable message emitted by the failing helpers.

Why
    End-to-end tests assert on the exact wording to guarantee deterministic
    output during regression checks.
"""

PANIC_NUMBER: Final[int] = 1


def i_should_fail() -> None:
    """Raise a deterministic :class:`RuntimeError` for failure-path testing.

    Examples
    --------
    >>> i_should_fail()
    Traceback (most recent call last):
    ...
    RuntimeError: i should fail
    """

    raise RuntimeError(FAILURE_MESSAGE)


def i_should_panic() -> None:
    """Panic with :data:`FAILURE_MESSAGE` as a ``str`` payload."""

    raise Panic(FAILURE_MESSAGE)


def i_should_panic_with_number() -> None:
    """Panic with :data:`PANIC_NUMBER` as an ``int`` payload."""

    raise Panic(PANIC_NUMBER)


def i_should_panic_with_bytes() -> None:
    """Panic with :data:`FAILURE_MESSAGE` encoded as a ``bytes`` payload."""

    raise Panic(FAILURE_MESSAGE.encode())


def i_should_panic_with_flag() -> None:
    raise Panic(False)


def i_should_not_panic() -> str:
    """Return normally so callers can exercise the ``did not panic`` path."""

    return "ok"


class CallCounter:
    """Zero-argument factory that returns ``value`` and counts its invocations.

    Examples
    --------
    >>> counter = CallCounter("expected")
    >>> counter(), counter.calls
    ('expected', 1)
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> Any:
        self.calls += 1
        return self.value
