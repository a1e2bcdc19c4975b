"""Comparison modes and deferred expected values.

Contents
--------
* :class:`MatchMode` – how a narrowed payload is compared with the expected value.
* :class:`Lazy` / :func:`lazy` – wrap an expected value so it is computed only
  after a panic has been confirmed.
* :func:`resolve_expected` – evaluate a possibly-lazy expected value once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class MatchMode(Enum):
    """Select the comparison applied to the narrowed payload.

    ``value`` is the phrase used in diagnostic messages.

    Examples
    --------
    >>> MatchMode.STARTS_WITH.value
    'starting with'
    >>> MatchMode.TYPE_ONLY.requires_expected
    False
    """

    TYPE_ONLY = ""
    EQUALS = "equal to"
    STARTS_WITH = "starting with"
    CONTAINS = "containing"

    @property
    def requires_expected(self) -> bool:
        """Return ``True`` when the mode must be paired with an expected value."""

        return self is not MatchMode.TYPE_ONLY


@dataclass(frozen=True, slots=True)
class Lazy(Generic[T]):
    """Deferred expected value.

    Why
    ----
    Python evaluates call arguments eagerly. Wrapping the expression in a
    zero-argument callable keeps it unevaluated until the guarded operation
    has actually panicked.
    """

    factory: Callable[[], T]

    def resolve(self) -> T:
        return self.factory()


def lazy(factory: Callable[[], T]) -> Lazy[T]:
    """Return a :class:`Lazy` wrapper around *factory*.

    Examples
    --------
    >>> lazy(lambda: 41 + 1).resolve()
    42
    """

    return Lazy(factory)


def resolve_expected(expected: Any) -> Any:
    """Return the concrete expected value, calling a :class:`Lazy` factory exactly once.

    Examples
    --------
    >>> resolve_expected("plain")
    'plain'
    >>> resolve_expected(lazy(lambda: "deferred"))
    'deferred'
    """

    if isinstance(expected, Lazy):
        return expected.resolve()
    return expected
