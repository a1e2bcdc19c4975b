"""Application-layer capability ports.

Purpose
-------
Describe the operations each :class:`MatchMode` needs from the payload type so
the matcher can demand them explicitly instead of relying on informal duck
typing.

Contents
--------
* :class:`Equatable` – supports ``==``.
* :class:`PrefixComparable` – offers ``startswith``.
* :class:`ContainsComparable` – supports ``in``.
* :func:`require_capability` – reject an expected type that cannot serve a mode.
* :func:`require_compatible_value` – reject an expected value a text payload
  cannot be compared with.

System Role
-----------
:func:`assert_panic.core.assert_panic` calls :func:`require_capability` before
running the guarded operation. Plain sequences (``list``, ``tuple``) satisfy
prefix and containment checks through slicing, see
:mod:`assert_panic.application.match`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from ..domain.captured import ExpectedType, type_name
from ..domain.errors import CapabilityError
from ..domain.modes import MatchMode


@runtime_checkable
class Equatable(Protocol):
    """Values comparable with ``==``."""

    def __eq__(self, other: object) -> bool:
        """Return ``True`` when *other* equals ``self``."""


@runtime_checkable
class PrefixComparable(Protocol):
    """Values that can tell whether they begin with another value."""

    def startswith(self, prefix: Any) -> bool:
        """Return ``True`` when ``self`` begins with *prefix*."""


@runtime_checkable
class ContainsComparable(Protocol):
    """Values that support membership or substring tests."""

    def __contains__(self, item: object) -> bool:
        """Return ``True`` when *item* occurs in ``self``."""


# EQUALS is universal. Equatable is checked statically only: its implicit
# ``__hash__ = None`` would make issubclass() reject unhashable types.
_CAPABILITIES: dict[MatchMode, tuple[type, ...]] = {
    MatchMode.STARTS_WITH: (PrefixComparable, Sequence),
    MatchMode.CONTAINS: (ContainsComparable, Sequence),
}


def supports(expected_type: ExpectedType, mode: MatchMode) -> bool:
    """Return ``True`` when every member of *expected_type* offers what *mode* needs.

    Examples
    --------
    >>> supports(str, MatchMode.STARTS_WITH)
    True
    >>> supports(int, MatchMode.CONTAINS)
    False
    >>> supports((str, bytes), MatchMode.CONTAINS)
    True
    """

    required = _CAPABILITIES.get(mode)
    if required is None:
        return True
    members = expected_type if isinstance(expected_type, tuple) else (expected_type,)
    return all(issubclass(member, required) for member in members)


def require_capability(expected_type: ExpectedType, mode: MatchMode) -> None:
    """Raise :class:`CapabilityError` when *expected_type* cannot serve *mode*.

    Examples
    --------
    >>> require_capability(int, MatchMode.STARTS_WITH)
    Traceback (most recent call last):
    ...
    assert_panic.domain.errors.CapabilityError: `int` does not support the 'starting with' comparison
    """

    if not supports(expected_type, mode):
        raise CapabilityError(f"`{type_name(expected_type)}` does not support the {mode.value!r} comparison")


_TEXT_FAMILIES: tuple[tuple[type, ...], ...] = ((str,), (bytes, bytearray))


def require_compatible_value(actual: Any, mode: MatchMode, expected: Any) -> None:
    """Raise :class:`CapabilityError` when *expected* cannot be compared with text *actual*.

    Prefix and containment tests on ``str`` need a ``str``; on ``bytes`` or
    ``bytearray`` they need a bytes value. Other payloads accept anything.

    Examples
    --------
    >>> require_compatible_value("found", MatchMode.CONTAINS, "f")
    >>> require_compatible_value(b"found", MatchMode.STARTS_WITH, bytearray(b"f"))
    >>> require_compatible_value("found", MatchMode.CONTAINS, 1)
    Traceback (most recent call last):
    ...
    assert_panic.domain.errors.CapabilityError: `int` value cannot be compared with a `str` panic using 'containing'
    """

    if mode not in _CAPABILITIES:
        return
    for family in _TEXT_FAMILIES:
        if isinstance(actual, family) and not isinstance(expected, family):
            raise CapabilityError(
                f"`{type_name(type(expected))}` value cannot be compared with a `{type_name(type(actual))}` panic"
                f" using {mode.value!r}"
            )
