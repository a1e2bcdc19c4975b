from __future__ import annotations

import dataclasses

import pytest

from assert_panic.domain.captured import CapturedPanic, payload_of, type_name
from assert_panic.domain.errors import Panic


def test_panic_payload_is_unboxed() -> None:
    captured = CapturedPanic.from_exception(Panic(1))
    assert captured.payload == 1
    assert captured.payload_type is int


def test_plain_exception_is_its_own_payload() -> None:
    error = KeyError("missing")
    captured = CapturedPanic.from_exception(error)
    assert captured.payload is error
    assert captured.payload_type is KeyError
    assert payload_of(error) is error


def test_narrow_reports_success_and_failure_explicitly() -> None:
    captured = CapturedPanic.from_exception(Panic("at the Disco"))
    success = captured.narrow(str)
    failure = captured.narrow(int)
    assert success.ok and success.value == "at the Disco"
    assert not failure.ok and failure.value is None


def test_narrow_accepts_tuple_of_types() -> None:
    captured = CapturedPanic.from_exception(Panic(b"raw"))
    assert captured.is_type((str, bytes))
    assert captured.downcast((str, bytes)) == b"raw"


def test_narrow_distinguishes_none_payload() -> None:
    captured = CapturedPanic.from_exception(Panic(None))
    assert captured.narrow(type(None)).ok
    assert not captured.narrow(str).ok


def test_captured_panic_is_immutable() -> None:
    captured = CapturedPanic.from_exception(Panic(1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        captured.payload = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    ("expected_type", "rendered"),
    [(str, "str"), (ValueError, "ValueError"), ((int, float), "int | float")],
)
def test_type_name(expected_type, rendered) -> None:
    assert type_name(expected_type) == rendered
