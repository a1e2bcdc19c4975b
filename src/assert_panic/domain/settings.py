"""Process-wide settings value object."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable settings consulted by :func:`assert_panic.assert_panic`.

    Attributes
    ----------
    silent:
        Suppress the default failure-reporting hooks while a guarded
        operation runs. Off unless enabled through the environment or
        :func:`assert_panic.configure`.

    Examples
    --------
    >>> Settings().silent
    False
    >>> Settings().with_overrides(silent=True)
    Settings(silent=True)
    """

    silent: bool = False

    def with_overrides(self, **changes: object) -> "Settings":
        """Return a copy with *changes* applied, leaving ``self`` untouched."""

        return replace(self, **changes)


DEFAULT_SETTINGS = Settings()
