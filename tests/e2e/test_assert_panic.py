"""End-to-end coverage of the public ``assert_panic`` call forms.

Each test drives the full pipeline (guard, extract, match) through the
package surface exactly the way a consuming test suite would.
"""

from __future__ import annotations

import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from assert_panic import (
    CapabilityError,
    CapturedPanic,
    ContentMismatch,
    MatchMode,
    NotRaised,
    Panic,
    TypeMismatch,
    assert_panic,
    configure,
    current_settings,
    lazy,
    panic,
    panics,
)
from assert_panic.testing import CallCounter, i_should_not_panic, i_should_panic

PAYLOADS = st.one_of(st.integers(), st.text(), st.binary(), st.floats(allow_nan=False), st.tuples(st.integers()))


@given(PAYLOADS)
def test_captured_payload_round_trips(payload: object) -> None:
    captured = assert_panic(lambda: panic(payload))
    assert isinstance(captured, CapturedPanic)
    assert captured.downcast(type(payload)) == payload


def test_base_form_returns_foreign_exceptions() -> None:
    captured = assert_panic(lambda: {}["missing"])
    assert captured.payload_type is KeyError


def test_no_panic_is_reported_and_self_composable() -> None:
    with pytest.raises(NotRaised, match="did not panic"):
        assert_panic(lambda: None)
    captured = assert_panic(lambda: assert_panic(lambda: None))
    assert captured.downcast(str) == "assert_panic argument did not panic: None"


def test_forms_return_none() -> None:
    assert assert_panic(lambda: panic("at the Disco"), str) is None
    assert assert_panic(lambda: panic("at the Disco"), str, "at the Disco") is None
    assert assert_panic(lambda: panic("at the Disco"), str, MatchMode.CONTAINS, "the") is None


def test_type_mismatch_is_composable() -> None:
    assert_panic(
        lambda: assert_panic(lambda: panic("at the Disco"), int),
        str,
        MatchMode.STARTS_WITH,
        "Expected a `int` panic but found one with <class 'str'>",
    )


def test_type_mismatch_hides_payload_value() -> None:
    with pytest.raises(TypeMismatch) as info:
        assert_panic(lambda: panic("at the Disco"), int)
    assert "int" in str(info.value)
    assert "<class 'str'>" in str(info.value)
    assert "Disco" not in str(info.value)


def test_equality_mismatch() -> None:
    assert_panic(
        lambda: assert_panic(lambda: panic(1), int, 2),
        str,
        "Expected a panic equal to 2 but found 1",
    )


def test_prefix_mismatch() -> None:
    with pytest.raises(ContentMismatch) as info:
        assert_panic(lambda: panic("found"), str, MatchMode.STARTS_WITH, "expected")
    assert "'expected'" in str(info.value) and "'found'" in str(info.value)


def test_contains_mismatch() -> None:
    assert_panic(
        lambda: assert_panic(lambda: panic("found"), str, MatchMode.CONTAINS, "expected"),
        ContentMismatch,
    )


def test_prefix_tuple_is_not_a_set_of_alternatives() -> None:
    with pytest.raises(CapabilityError, match="`tuple` value cannot be compared with a `str` panic"):
        assert_panic(lambda: panic("found"), str, MatchMode.STARTS_WITH, ("expected", "f"))


def test_list_payload_contains_list_item() -> None:
    assert_panic(lambda: panic([[1, 2], [3]]), list, MatchMode.CONTAINS, [1, 2])
    assert_panic(lambda: panic([1, 2, 3]), list, MatchMode.CONTAINS, [2, 3])


def test_text_payload_with_number_expected_is_a_usage_error() -> None:
    with pytest.raises(CapabilityError, match="`int` value cannot be compared with a `str` panic using 'containing'"):
        assert_panic(lambda: panic("found"), str, MatchMode.CONTAINS, 1)


def test_exception_classes_are_valid_expected_types() -> None:
    assert_panic(lambda: int("disco"), ValueError)
    assert_panic(lambda: int("disco"), (TypeError, ValueError))


def test_expected_value_evaluated_once_when_panicking() -> None:
    counter = CallCounter("i should fail")
    assert_panic(i_should_panic, str, lazy(counter))
    assert_panic(i_should_panic, str, MatchMode.STARTS_WITH, lazy(counter))
    assert counter.calls == 2


def test_expected_value_not_evaluated_without_panic() -> None:
    counter = CallCounter("i should fail")
    with pytest.raises(NotRaised):
        assert_panic(i_should_not_panic, str, lazy(counter))
    assert counter.calls == 0


def test_expected_value_evaluated_before_type_check() -> None:
    counter = CallCounter(2)
    with pytest.raises(TypeMismatch, match="equal to 2"):
        assert_panic(i_should_panic, int, lazy(counter))
    assert counter.calls == 1


def test_capability_checked_before_operation_runs() -> None:
    calls: list[int] = []

    def operation() -> None:
        calls.append(1)
        panic(1)

    with pytest.raises(CapabilityError):
        assert_panic(operation, int, MatchMode.STARTS_WITH, 1)
    assert calls == []


@pytest.mark.parametrize(
    "comparison",
    [
        (MatchMode.EQUALS,),
        (MatchMode.TYPE_ONLY, "x"),
        ("x", "y"),
        (MatchMode.EQUALS, "x", "y"),
    ],
)
def test_malformed_comparisons_rejected(comparison: tuple[object, ...]) -> None:
    with pytest.raises(TypeError):
        assert_panic(i_should_panic, str, *comparison)


def test_non_class_expected_type_rejected() -> None:
    with pytest.raises(TypeError, match="expected a class or tuple of classes"):
        assert_panic(i_should_panic, MatchMode.EQUALS, "x")  # type: ignore[call-overload]


def test_panic_exception_itself_narrows() -> None:
    assert_panic(i_should_panic, Panic)
    captured = assert_panic(lambda: assert_panic(i_should_panic, int))
    assert isinstance(captured.downcast(TypeMismatch), TypeMismatch)


def test_context_manager_form() -> None:
    with panics(str, MatchMode.STARTS_WITH, "i should") as expectation:
        i_should_panic()
    assert expectation.captured is not None
    assert expectation.captured.payload == "i should fail"


def test_context_manager_reports_missing_panic() -> None:
    with pytest.raises(NotRaised, match="did not panic"):
        with panics():
            pass


def test_context_manager_reports_mismatch() -> None:
    with pytest.raises(ContentMismatch, match="equal to 'other'"):
        with panics(str, "other"):
            i_should_panic()


def test_context_manager_lets_base_exceptions_through() -> None:
    with pytest.raises(KeyboardInterrupt):
        with panics():
            raise KeyboardInterrupt


def test_silent_flag_from_configuration() -> None:
    before = sys.unraisablehook
    seen: list[object] = []

    def operation() -> None:
        seen.append(sys.unraisablehook)
        panic("boom")

    configure(silent=True)
    assert_panic(operation)
    assert_panic(operation, silent=False)
    assert seen[0] is not before
    assert seen[1] is before
    assert sys.unraisablehook is before


def test_silent_flag_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASSERT_PANIC_SILENT", "true")
    assert current_settings().silent is True


def test_silent_context_manager_restores_hooks() -> None:
    before = sys.unraisablehook
    with pytest.raises(NotRaised):
        with panics(silent=True):
            assert sys.unraisablehook is not before
    assert sys.unraisablehook is before
