"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the guard, the extractor, the
matcher, and consuming test suites. The hierarchy lives in the domain layer so
every outer layer may depend on it without creating cycles.

Contents
--------
* :class:`Panic` – an aborted operation carrying an arbitrary payload.
* :class:`DiagnosticFailure` – umbrella base class for failed assertions.
* :class:`NotRaised` – the guarded operation completed normally.
* :class:`TypeMismatch` – the payload is not of the expected type.
* :class:`ContentMismatch` – the payload has the expected type but the wrong value.
* :class:`CapabilityError` – the expected type cannot support the requested mode.
* :class:`ConfigurationError` – a configuration value could not be interpreted.

System Role
-----------
Diagnostic failures are themselves panics whose payload is the message string.
This keeps :func:`assert_panic.assert_panic` composable: an outer call can
capture and inspect the diagnostic raised by an inner one.
"""

from __future__ import annotations

from typing import Any


class Panic(Exception):
    """Abort the current operation while carrying an arbitrary *payload*.

    Why
    ----
    Python can only raise exception instances, yet tests frequently want to
    abort with plain data (a message, a number, a record). ``Panic`` boxes such
    payloads so the extractor can narrow them later.

    Examples
    --------
    >>> exc = Panic(7)
    >>> exc.payload
    7
    >>> str(Panic("at the Disco"))
    'at the Disco'
    """

    def __init__(self, payload: Any) -> None:
        super().__init__(payload)
        self.payload = payload


class DiagnosticFailure(Panic, AssertionError):
    """Base type for every assertion outcome reported by ``assert_panic``.

    Why
    ----
    Subclassing :class:`AssertionError` lets pytest and unittest report the
    failure as a regular assertion; subclassing :class:`Panic` keeps the
    message available as a ``str`` payload for nested assertions.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)

    @property
    def message(self) -> str:
        """Return the human-readable diagnostic."""

        return self.payload


class NotRaised(DiagnosticFailure):
    """Raised when the guarded operation returned instead of panicking."""


class TypeMismatch(DiagnosticFailure):
    """Raised when the captured payload cannot be narrowed to the expected type.

    The message names the expected type and the runtime type of the payload
    but never the payload value itself, since it may not be printable.
    """


class ContentMismatch(DiagnosticFailure):
    """Raised when the narrowed payload fails the requested comparison."""


class CapabilityError(TypeError):
    """Signals that the expected type lacks the operation a match mode needs.

    Raised before the guarded operation runs, so a misconfigured assertion
    never hides a genuine panic.
    """


class ConfigurationError(ValueError):
    """Raised when a configuration value (for example ``ASSERT_PANIC_SILENT``) is unparsable."""
