from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from assert_panic.application.extract import extract
from assert_panic.domain.captured import CapturedPanic
from assert_panic.domain.errors import Panic, TypeMismatch
from assert_panic.domain.modes import MatchMode


def _captured(payload: object) -> CapturedPanic:
    return CapturedPanic.from_exception(Panic(payload))


def test_extract_returns_narrowed_payload() -> None:
    assert extract(_captured("at the Disco"), str) == "at the Disco"


def test_extract_accepts_subclasses() -> None:
    error = LookupError("missing")
    captured = CapturedPanic.from_exception(KeyError("missing"))
    assert isinstance(extract(captured, LookupError), KeyError)
    assert extract(CapturedPanic.from_exception(error), Exception) is error


def test_type_mismatch_names_types_not_value() -> None:
    with pytest.raises(TypeMismatch) as info:
        extract(_captured("at the Disco"), int)
    message = str(info.value)
    assert message == "Expected a `int` panic but found one with <class 'str'>"
    assert "Disco" not in message


def test_type_mismatch_mentions_requested_comparison() -> None:
    with pytest.raises(TypeMismatch, match="^Expected a `str` panic containing 'x' but found one with <class 'int'>$"):
        extract(_captured(1), str, MatchMode.CONTAINS, "x")


@given(st.text(min_size=1).filter(lambda text: text not in "Expected a `int` panic but found one with <class 'str'>"))
def test_type_mismatch_never_leaks_payload(payload: str) -> None:
    with pytest.raises(TypeMismatch) as info:
        extract(_captured(payload), int)
    assert payload not in str(info.value)
