"""Environment variable adapter.

Purpose
-------
Translate process environment variables into :class:`Settings`. Only keys that
carry the package prefix (``ASSERT_PANIC_``) are considered.

Key behaviours
--------------
* ``default_env_prefix`` derives the prefix from the distribution slug.
* Flag values accept ``1/0``, ``true/false``, ``yes/no`` and ``on/off`` in any
  case; anything else raises :class:`ConfigurationError`.
* Unknown keys under the prefix are ignored and reported via debug logging.
"""

from __future__ import annotations

import os
from typing import Mapping

from ...domain.errors import ConfigurationError
from ...domain.settings import DEFAULT_SETTINGS, Settings
from ...observability import log_debug

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})
_KNOWN_FIELDS = ("silent",)


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('assert-panic')
    'ASSERT_PANIC'
    """

    return slug.replace("-", "_").upper()


class DefaultEnvLoader:
    """Load :class:`Settings` from environment variables."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the loader with a specific ``environ`` mapping for testability."""

        self._environ = os.environ if environ is None else environ

    def load(self, prefix: str = default_env_prefix("assert-panic")) -> Settings:
        """Return settings read from variables that start with *prefix*.

        Examples
        --------
        >>> DefaultEnvLoader(environ={'ASSERT_PANIC_SILENT': 'yes'}).load()
        Settings(silent=True)
        >>> DefaultEnvLoader(environ={}).load()
        Settings(silent=False)
        """

        prefix = f"{prefix}_" if prefix and not prefix.endswith("_") else prefix
        overrides: dict[str, object] = {}
        ignored: list[str] = []
        for key, value in self._environ.items():
            if not key.startswith(prefix):
                continue
            field_name = key[len(prefix) :].lower()
            if field_name not in _KNOWN_FIELDS:
                ignored.append(key)
                continue
            overrides[field_name] = coerce_flag(key, value)
        settings = DEFAULT_SETTINGS.with_overrides(**overrides)
        log_debug("settings_loaded", stage="settings", silent=settings.silent, ignored=sorted(ignored))
        return settings


def coerce_flag(key: str, value: str) -> bool:
    """Interpret *value* as a boolean flag or raise :class:`ConfigurationError`.

    Examples
    --------
    >>> coerce_flag('ASSERT_PANIC_SILENT', 'On'), coerce_flag('ASSERT_PANIC_SILENT', '0')
    (True, False)
    """

    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{key} must be a boolean flag, got {value!r}")
