"""Content matching.

Purpose
-------
Compare a narrowed payload with the caller's expected value according to a
:class:`MatchMode` and raise :class:`ContentMismatch` when the comparison fails.

Contents
    - ``starts_with``: prefix test for text-like values and plain sequences.
    - ``contains``: substring, membership or contiguous sub-sequence test.
    - ``mismatch_message``: diagnostic wording shared by all modes.
    - ``match``: dispatch on the mode and raise on mismatch.

Both values are rendered with :func:`repr` so the discrepancy is visible.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..domain.errors import ContentMismatch
from ..domain.modes import MatchMode
from ..observability import log_debug, make_event
from .ports import ContainsComparable, Equatable, PrefixComparable, require_compatible_value

_TEXT_TYPES = (str, bytes, bytearray)


def _as_items(value: Any) -> tuple[Any, ...]:
    """Return *value* as a tuple of items; scalars become a single item."""

    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return tuple(value)
    return (value,)


def starts_with(actual: PrefixComparable | Sequence[Any], expected: Any) -> bool:
    """Return ``True`` when *actual* begins with *expected*.

    Examples
    --------
    >>> starts_with("at the Disco", "at")
    True
    >>> starts_with([1, 2, 3], (1, 2))
    True
    >>> starts_with((1, 2, 3), 2)
    False
    >>> starts_with("found", ("expected", "f"))
    False
    """

    if isinstance(actual, _TEXT_TYPES):
        return actual[: len(expected)] == expected
    if isinstance(actual, PrefixComparable):
        return actual.startswith(expected)
    prefix = _as_items(expected)
    return tuple(actual[: len(prefix)]) == prefix


def contains(actual: ContainsComparable | Sequence[Any], expected: Any) -> bool:
    """Return ``True`` when *expected* occurs in *actual*.

    Text is searched for substrings. Other sequences are searched for
    *expected* as an item first, then for a contiguous run of its items when
    *expected* is itself a sequence.

    Examples
    --------
    >>> contains("at the Disco", "the")
    True
    >>> contains([1, 2, 3, 4], [2, 3])
    True
    >>> contains([1, 2, 3, 4], [3, 2])
    False
    >>> contains([[1, 2], [3]], [1, 2])
    True
    >>> contains({"a", "b"}, "a")
    True
    """

    if isinstance(actual, _TEXT_TYPES) or not isinstance(actual, Sequence):
        return expected in actual
    if expected in actual:
        return True
    if not isinstance(expected, Sequence) or isinstance(expected, _TEXT_TYPES):
        return False
    needle = tuple(expected)
    haystack = tuple(actual)
    width = len(needle)
    return any(haystack[start : start + width] == needle for start in range(len(haystack) - width + 1))


def mismatch_message(mode: MatchMode, expected: Any, actual: Any) -> str:
    """Render the diagnostic for a failed comparison.

    Examples
    --------
    >>> mismatch_message(MatchMode.EQUALS, 2, 1)
    'Expected a panic equal to 2 but found 1'
    >>> mismatch_message(MatchMode.CONTAINS, "expected", "found")
    "Expected a panic containing 'expected' but found 'found'"
    """

    return f"Expected a panic {mode.value} {expected!r} but found {actual!r}"


def _equals(actual: Equatable, expected: Any) -> bool:
    return bool(actual == expected)


_COMPARATORS = {
    MatchMode.EQUALS: _equals,
    MatchMode.STARTS_WITH: starts_with,
    MatchMode.CONTAINS: contains,
}


def match(actual: Any, mode: MatchMode, expected: Any = None) -> None:
    """Raise :class:`ContentMismatch` unless *actual* satisfies *mode* against *expected*.

    ``MatchMode.TYPE_ONLY`` accepts every value. A text payload compared with a
    value of another kind raises :class:`CapabilityError` instead.

    Examples
    --------
    >>> match("at the Disco", MatchMode.STARTS_WITH, "at")
    >>> match(1, MatchMode.EQUALS, 2)
    Traceback (most recent call last):
    ...
    assert_panic.domain.errors.ContentMismatch: Expected a panic equal to 2 but found 1
    """

    require_compatible_value(actual, mode, expected)
    comparator = _COMPARATORS.get(mode)
    if comparator is None or comparator(actual, expected):
        return
    log_debug("panic_content_mismatch", **make_event("match", type(actual), {"mode": mode.name}))
    raise ContentMismatch(mismatch_message(mode, expected, actual))
