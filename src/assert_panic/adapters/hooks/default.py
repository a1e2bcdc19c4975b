"""Default failure-reporting hook adapter.

Purpose
-------
Silence the interpreter's process-wide reporting channels while a guarded
operation runs and restore them afterwards.

Key behaviours
--------------
* Swaps ``sys.excepthook``, ``threading.excepthook`` and ``sys.unraisablehook``
  for no-op callables on entry.
* Restores the exact objects that were installed on entry, on every exit path.
  Nested suppressors therefore unwind in LIFO order.
* Not synchronized. The hooks are process-wide, so two threads suppressing at
  the same time race with each other; callers that need concurrency must
  serialize silent invocations themselves.
"""

from __future__ import annotations

import sys
import threading
from types import TracebackType
from typing import Any, Callable

from ...observability import log_debug

_HOOK_NAMES = ("excepthook", "unraisablehook")


def _ignore(*_args: Any) -> None:
    """Swallow a failure report."""


class HookSuppressor:
    """Context manager that disables the default failure-reporting hooks.

    Examples
    --------
    >>> import sys
    >>> before = sys.unraisablehook
    >>> with HookSuppressor():
    ...     sys.unraisablehook is before
    False
    >>> sys.unraisablehook is before
    True
    """

    def __init__(self, replacement: Callable[..., None] = _ignore) -> None:
        self._replacement = replacement
        self._saved_sys: dict[str, Any] | None = None
        self._saved_threading: Any = None

    @property
    def active(self) -> bool:
        """Return ``True`` between ``__enter__`` and ``__exit__``."""

        return self._saved_sys is not None

    def __enter__(self) -> "HookSuppressor":
        if self.active:
            raise RuntimeError("HookSuppressor is not reentrant; create a new instance")
        self._saved_sys = {name: getattr(sys, name) for name in _HOOK_NAMES}
        self._saved_threading = threading.excepthook
        for name in _HOOK_NAMES:
            setattr(sys, name, self._replacement)
        threading.excepthook = self._replacement
        log_debug("hooks_suppressed", stage="hooks", hooks=[*_HOOK_NAMES, "threading.excepthook"])
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        saved = self._saved_sys
        if saved is None:
            return
        for name, hook in saved.items():
            setattr(sys, name, hook)
        threading.excepthook = self._saved_threading
        self._saved_sys = None
        self._saved_threading = None
        log_debug("hooks_restored", stage="hooks", failed=exc_type is not None)
