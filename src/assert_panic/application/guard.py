"""Guarded invocation.

Purpose
-------
Run a caller-supplied operation behind a barrier that turns a panic into a
returned :class:`CapturedPanic` and the absence of a panic into a
:class:`NotRaised` diagnostic.

Contents
    - ``catch_panic``: the barrier itself.
    - ``did_not_panic_message``: diagnostic text for the normal-completion path.

System Role
-----------
First stage of the pipeline assembled in :mod:`assert_panic.core`. Any
``Exception`` counts as a panic, including diagnostics raised by a nested
``assert_panic`` call. ``BaseException`` subclasses outside ``Exception``
(``KeyboardInterrupt``, ``SystemExit``, test-runner control flow) propagate.
"""

from __future__ import annotations

from contextlib import ExitStack
from typing import Any, Callable

from ..adapters.hooks.default import HookSuppressor
from ..domain.captured import CapturedPanic
from ..domain.errors import NotRaised
from ..observability import log_debug, make_event

NOT_RAISED_PREFIX = "assert_panic argument did not panic"


def did_not_panic_message(result: Any) -> str:
    """Return the diagnostic for an operation that returned *result*.

    Examples
    --------
    >>> did_not_panic_message(None)
    'assert_panic argument did not panic: None'
    """

    return f"{NOT_RAISED_PREFIX}: {result!r}"


def catch_panic(operation: Callable[[], Any], *, silent: bool = False) -> CapturedPanic:
    """Invoke *operation* and return the panic it raised.

    Parameters
    ----------
    operation:
        Zero-argument callable expected to raise.
    silent:
        Suppress the default reporting hooks for the duration of the call.

    Raises
    ------
    NotRaised
        When *operation* returns normally. Hooks are restored before the
        diagnostic leaves this function.

    Examples
    --------
    >>> captured = catch_panic(lambda: int("disco"))
    >>> captured.payload_type
    <class 'ValueError'>
    >>> catch_panic(lambda: 42)
    Traceback (most recent call last):
    ...
    assert_panic.domain.errors.NotRaised: assert_panic argument did not panic: 42
    """

    with ExitStack() as stack:
        if silent:
            stack.enter_context(HookSuppressor())
        try:
            result = operation()
        except Exception as exc:  # noqa: BLE001 - every exception is a panic here
            captured = CapturedPanic.from_exception(exc)
            log_debug("panic_captured", **make_event("guard", captured.payload_type, {"silent": silent}))
            return captured
    log_debug("panic_not_raised", **make_event("guard", None, {"silent": silent}))
    raise NotRaised(did_not_panic_message(result))
