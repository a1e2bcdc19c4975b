from __future__ import annotations

from assert_panic.domain.errors import (
    CapabilityError,
    ConfigurationError,
    ContentMismatch,
    DiagnosticFailure,
    NotRaised,
    Panic,
    TypeMismatch,
)


def test_error_hierarchy() -> None:
    assert issubclass(DiagnosticFailure, Panic)
    assert issubclass(DiagnosticFailure, AssertionError)
    for exception in (NotRaised(""), TypeMismatch(""), ContentMismatch("")):
        assert isinstance(exception, DiagnosticFailure)
        assert isinstance(exception, AssertionError)


def test_usage_errors_are_not_panics() -> None:
    assert issubclass(CapabilityError, TypeError)
    assert issubclass(ConfigurationError, ValueError)
    assert not issubclass(CapabilityError, Panic)


def test_panic_keeps_arbitrary_payload() -> None:
    payload = {"code": 7}
    exc = Panic(payload)
    assert exc.payload is payload
    assert exc.args == (payload,)


def test_diagnostic_payload_is_its_message() -> None:
    exc = ContentMismatch("Expected a panic equal to 2 but found 1")
    assert exc.payload == exc.message == str(exc) == "Expected a panic equal to 2 but found 1"
