"""Public package surface for ``assert_panic``.

Assert that an operation panics, and optionally what it panics with::

    from assert_panic import MatchMode, assert_panic, panic

    assert_panic(lambda: panic("at the Disco"), str, MatchMode.STARTS_WITH, "at")

The base form ``assert_panic(operation)`` returns the :class:`CapturedPanic`;
every other form returns ``None`` and raises a :class:`DiagnosticFailure` on
mismatch.
"""

from __future__ import annotations

from .core import (
    PanicExpectation,
    assert_panic,
    configure,
    current_settings,
    panic,
    panics,
    reset_settings,
)
from .domain.captured import CapturedPanic, Narrowed
from .domain.errors import (
    CapabilityError,
    ConfigurationError,
    ContentMismatch,
    DiagnosticFailure,
    NotRaised,
    Panic,
    TypeMismatch,
)
from .domain.modes import Lazy, MatchMode, lazy
from .domain.settings import Settings
from .observability import bind_trace_id, get_logger
from .testing import i_should_fail

__all__ = [
    "CapabilityError",
    "CapturedPanic",
    "ConfigurationError",
    "ContentMismatch",
    "DiagnosticFailure",
    "Lazy",
    "MatchMode",
    "Narrowed",
    "NotRaised",
    "Panic",
    "PanicExpectation",
    "Settings",
    "TypeMismatch",
    "assert_panic",
    "bind_trace_id",
    "configure",
    "current_settings",
    "get_logger",
    "i_should_fail",
    "lazy",
    "panic",
    "panics",
    "reset_settings",
]
