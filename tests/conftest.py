from __future__ import annotations

from collections.abc import Iterator

import pytest

from assert_panic import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from environment-free, unconfigured settings."""

    monkeypatch.delenv("ASSERT_PANIC_SILENT", raising=False)
    reset_settings()
    yield
    reset_settings()
