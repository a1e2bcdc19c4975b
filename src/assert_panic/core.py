"""Composition root for ``assert_panic``.

Purpose
-------
Assemble the capture-and-match pipeline (guard → extract → match) behind the
public call surface and own the process-wide settings.

Contents
--------
* :func:`assert_panic` – the four call forms (capture, type, mode + value,
  value shorthand).
* :func:`panics` / :class:`PanicExpectation` – the same checks for a ``with``
  block.
* :func:`configure` / :func:`current_settings` / :func:`reset_settings` –
  settings management (explicit argument > ``configure`` > environment).
* :func:`_parse_comparison` / :func:`_verify` – internal helpers shared by both
  call styles.

System Role
-----------
The only module that knows the order of the stages. The expected value is
resolved after a panic is confirmed and before narrowing, exactly once.
Capability checks run before the guarded operation so a misconfigured
assertion cannot mask a real panic.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, Callable, overload

from .adapters.env.default import DefaultEnvLoader
from .adapters.hooks.default import HookSuppressor
from .application.extract import extract
from .application.guard import catch_panic, did_not_panic_message
from .application.match import match
from .application.ports import require_capability
from .domain.captured import CapturedPanic, ExpectedType, type_name
from .domain.errors import NotRaised, Panic
from .domain.modes import MatchMode, resolve_expected
from .domain.settings import Settings
from .observability import log_debug, make_event

_MISSING: Any = object()
_SETTINGS: Settings | None = None


def current_settings() -> Settings:
    """Return the effective settings, loading them from the environment on first use.

    Examples
    --------
    >>> isinstance(current_settings(), Settings)
    True
    """

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = DefaultEnvLoader().load()
    return _SETTINGS


def configure(*, silent: bool | None = None) -> Settings:
    """Override process-wide settings and return the new effective value.

    Parameters left as ``None`` keep their current value.

    Examples
    --------
    >>> previous = current_settings()
    >>> configure(silent=True).silent
    True
    >>> configure(silent=previous.silent) == previous
    True
    """

    global _SETTINGS
    changes = {"silent": silent} if silent is not None else {}
    _SETTINGS = current_settings().with_overrides(**changes)
    log_debug("settings_configured", stage="settings", silent=_SETTINGS.silent)
    return _SETTINGS


def reset_settings() -> None:
    """Drop overrides so the next lookup re-reads the environment."""

    global _SETTINGS
    _SETTINGS = None


def panic(payload: Any) -> None:
    """Raise a :class:`Panic` carrying *payload*.

    Examples
    --------
    >>> panic(1)
    Traceback (most recent call last):
    ...
    assert_panic.domain.errors.Panic: 1
    """

    raise Panic(payload)


@overload
def assert_panic(operation: Callable[[], Any], *, silent: bool | None = None) -> CapturedPanic: ...


@overload
def assert_panic(
    operation: Callable[[], Any],
    expected_type: ExpectedType,
    *comparison: Any,
    silent: bool | None = None,
) -> None: ...


def assert_panic(
    operation: Callable[[], Any],
    expected_type: Any = _MISSING,
    *comparison: Any,
    silent: bool | None = None,
) -> CapturedPanic | None:
    """Assert that *operation* panics and optionally what it panics with.

    Call forms
    ----------
    ``assert_panic(op)``
        Returns the :class:`CapturedPanic`. The only form with a result.
    ``assert_panic(op, T)``
        The payload must be an instance of ``T``.
    ``assert_panic(op, T, mode, expected)``
        ``mode`` is ``MatchMode.EQUALS``, ``STARTS_WITH`` or ``CONTAINS``.
    ``assert_panic(op, T, expected)``
        Shorthand for ``MatchMode.EQUALS``.

    *expected* may be wrapped in :func:`assert_panic.lazy`; it is then computed
    only when *op* panicked, and at most once. ``silent`` overrides the
    configured hook suppression for this call.

    Raises
    ------
    NotRaised
        *op* returned normally.
    TypeMismatch
        Neither the payload nor the exception is a ``T``.
    ContentMismatch
        The payload is a ``T`` but fails the comparison.
    CapabilityError
        ``T`` cannot support the requested mode (raised before *op* runs), or
        a text payload is compared with an expected value of another kind.

    Examples
    --------
    >>> assert_panic(lambda: panic("at the Disco")).payload
    'at the Disco'
    >>> assert_panic(lambda: panic("at the Disco"), str, MatchMode.STARTS_WITH, "at")
    >>> assert_panic(
    ...     lambda: assert_panic(lambda: None),
    ...     str,
    ...     MatchMode.STARTS_WITH,
    ...     "assert_panic argument did not panic",
    ... )
    >>> assert_panic(lambda: panic(1), int, 2)
    Traceback (most recent call last):
    ...
    assert_panic.domain.errors.ContentMismatch: Expected a panic equal to 2 but found 1
    """

    if expected_type is _MISSING:
        return catch_panic(operation, silent=_resolve_silent(silent))

    _check_expected_type(expected_type)
    mode, expected = _parse_comparison(comparison)
    require_capability(expected_type, mode)
    captured = catch_panic(operation, silent=_resolve_silent(silent))
    _verify(captured, expected_type, mode, expected)
    return None


def panics(
    expected_type: Any = _MISSING,
    *comparison: Any,
    silent: bool | None = None,
) -> "PanicExpectation":
    """Return a context manager asserting that its block panics.

    Accepts the same arguments as :func:`assert_panic` minus the operation.
    The captured panic is available as ``.captured`` after the block.

    Examples
    --------
    >>> with panics(str, MatchMode.CONTAINS, "Disco") as expectation:
    ...     panic("at the Disco")
    >>> expectation.captured.payload
    'at the Disco'
    """

    if expected_type is _MISSING:
        return PanicExpectation(None, MatchMode.TYPE_ONLY, None, silent=_resolve_silent(silent))
    _check_expected_type(expected_type)
    mode, expected = _parse_comparison(comparison)
    require_capability(expected_type, mode)
    return PanicExpectation(expected_type, mode, expected, silent=_resolve_silent(silent))


class PanicExpectation:
    """Context manager returned by :func:`panics`.

    The hook suppressor (when enabled) is released before any diagnostic is
    raised from ``__exit__``.
    """

    def __init__(
        self,
        expected_type: ExpectedType | None,
        mode: MatchMode,
        expected: Any,
        *,
        silent: bool,
    ) -> None:
        self.expected_type = expected_type
        self.mode = mode
        self.expected = expected
        self.silent = silent
        self.captured: CapturedPanic | None = None
        self._suppressor: HookSuppressor | None = None

    def __enter__(self) -> "PanicExpectation":
        if self.silent:
            self._suppressor = HookSuppressor()
            self._suppressor.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if self._suppressor is not None:
            self._suppressor.__exit__(exc_type, exc, tb)
            self._suppressor = None
        if exc is None:
            log_debug("panic_not_raised", **make_event("guard", None, {"silent": self.silent}))
            raise NotRaised(did_not_panic_message(None))
        if not isinstance(exc, Exception):
            return False
        self.captured = CapturedPanic.from_exception(exc)
        log_debug("panic_captured", **make_event("guard", self.captured.payload_type, {"silent": self.silent}))
        if self.expected_type is not None:
            _verify(self.captured, self.expected_type, self.mode, self.expected)
        return True


def _resolve_silent(silent: bool | None) -> bool:
    """Return *silent* when given, otherwise the configured default."""

    if silent is not None:
        return silent
    return current_settings().silent


def _check_expected_type(expected_type: Any) -> None:
    """Reject anything :func:`isinstance` cannot use as a class filter.

    Examples
    --------
    >>> _check_expected_type(MatchMode.EQUALS)
    Traceback (most recent call last):
    ...
    TypeError: expected a class or tuple of classes, got <MatchMode.EQUALS: 'equal to'>
    """

    members = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    if not members or not all(isinstance(member, type) for member in members):
        raise TypeError(f"expected a class or tuple of classes, got {expected_type!r}")


def _parse_comparison(comparison: tuple[Any, ...]) -> tuple[MatchMode, Any]:
    """Translate the optional trailing arguments into ``(mode, expected)``.

    Examples
    --------
    >>> _parse_comparison(())
    (<MatchMode.TYPE_ONLY: ''>, None)
    >>> _parse_comparison((2,))
    (<MatchMode.EQUALS: 'equal to'>, 2)
    >>> _parse_comparison((MatchMode.CONTAINS, "x"))
    (<MatchMode.CONTAINS: 'containing'>, 'x')
    """

    if not comparison:
        return MatchMode.TYPE_ONLY, None
    if len(comparison) == 1:
        (only,) = comparison
        if isinstance(only, MatchMode):
            if only.requires_expected:
                raise TypeError(f"{only} needs an expected value")
            return MatchMode.TYPE_ONLY, None
        return MatchMode.EQUALS, only
    if len(comparison) == 2:
        mode, expected = comparison
        if not isinstance(mode, MatchMode) or not mode.requires_expected:
            raise TypeError(f"expected a comparison MatchMode before the expected value, got {mode!r}")
        return mode, expected
    raise TypeError(f"too many comparison arguments: {len(comparison)}")


def _verify(captured: CapturedPanic, expected_type: ExpectedType, mode: MatchMode, expected: Any) -> None:
    """Run extraction and matching for an already captured panic."""

    resolved = resolve_expected(expected) if mode.requires_expected else None
    value = extract(captured, expected_type, mode, resolved)
    match(value, mode, resolved)
    log_debug(
        "panic_asserted",
        **make_event("match", captured.payload_type, {"expected_type": type_name(expected_type), "mode": mode.name}),
    )


__all__ = [
    "MatchMode",
    "CapturedPanic",
    "PanicExpectation",
    "assert_panic",
    "configure",
    "current_settings",
    "panic",
    "panics",
    "reset_settings",
]
