"""Captured panic value object.

Purpose
-------
Represent the outcome of a guarded operation that panicked: the exception that
escaped, the payload it carried, and the runtime type of that payload. The
module performs no I/O and holds no global state.

Contents
--------
* :class:`CapturedPanic` – immutable record of one panic.
* :class:`Narrowed` – explicit success/failure result of narrowing a payload.
* :func:`payload_of` – derive the payload from an arbitrary exception.
* :func:`type_name` – render an expected type the way diagnostics show it.

System Role
-----------
Instances are produced only by :func:`assert_panic.application.guard.catch_panic`
and consumed by the extractor and matcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Tuple, TypeVar, Union

from .errors import Panic

T = TypeVar("T")

ExpectedType = Union[type, Tuple[type, ...]]
"""A class, or tuple of classes, accepted by :func:`isinstance`."""


def payload_of(exc: BaseException) -> Any:
    """Return the payload carried by *exc*.

    :class:`Panic` instances carry an explicit payload; every other exception
    is its own payload.

    Examples
    --------
    >>> payload_of(Panic(3))
    3
    >>> error = ValueError("bad")
    >>> payload_of(error) is error
    True
    """

    if isinstance(exc, Panic):
        return exc.payload
    return exc


def type_name(expected_type: ExpectedType) -> str:
    """Render *expected_type* for diagnostic messages.

    Examples
    --------
    >>> type_name(str)
    'str'
    >>> type_name((int, float))
    'int | float'
    """

    if isinstance(expected_type, tuple):
        return " | ".join(type_name(member) for member in expected_type)
    return getattr(expected_type, "__qualname__", None) or repr(expected_type)


@dataclass(frozen=True, slots=True)
class Narrowed(Generic[T]):
    """Result of :meth:`CapturedPanic.narrow`.

    ``ok`` tells whether the payload matched; ``value`` is only meaningful when
    it did.
    """

    ok: bool
    value: T | None = None


@dataclass(frozen=True, slots=True)
class CapturedPanic:
    """Immutable record of a panic caught by the guard.

    Attributes
    ----------
    exception:
        The exception that escaped the guarded operation.
    payload:
        The value the panic carried (see :func:`payload_of`).
    payload_type:
        Runtime type identifier of ``payload``.

    Examples
    --------
    >>> captured = CapturedPanic.from_exception(Panic("at the Disco"))
    >>> captured.payload_type
    <class 'str'>
    >>> captured.downcast(str)
    'at the Disco'
    >>> captured.downcast(int) is None
    True
    """

    exception: BaseException
    payload: Any = field(repr=False)
    payload_type: type = field(repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CapturedPanic":
        payload = payload_of(exc)
        return cls(exc, payload, type(payload))

    def is_type(self, expected_type: ExpectedType) -> bool:
        """Return ``True`` when the panic can be narrowed to *expected_type*."""

        return self.narrow(expected_type).ok

    def narrow(self, expected_type: ExpectedType) -> Narrowed[Any]:
        """Attempt to view the panic as *expected_type*.

        The payload is tried first, then the exception that carried it, so
        ``narrow(Panic)`` or ``narrow(ContentMismatch)`` also succeed.
        """

        if isinstance(self.payload, expected_type):
            return Narrowed(True, self.payload)
        if isinstance(self.exception, expected_type):
            return Narrowed(True, self.exception)
        return Narrowed(False)

    def downcast(self, expected_type: ExpectedType) -> Any | None:
        """Return the narrowed value (see :meth:`narrow`), or ``None`` when narrowing fails."""

        return self.narrow(expected_type).value
