"""Unit tests for error payloads and misuse exceptions.

Tests cover:
- ErrorCode members
- DomainError string form, rendering, truthiness and immutability
- ValidationError/DecodeError extra fields
- TraceLabelError, ResultDecodeError, UnwrapError attributes and bases
"""

import dataclasses

import pytest

from railtrace.core.enums import ErrorCode
from railtrace.core.errors import (
    DecodeError,
    DomainError,
    ResultDecodeError,
    TraceLabelError,
    UnwrapError,
    ValidationError,
)


@pytest.mark.unit
class TestErrorCode:
    """Test the ErrorCode catalogue."""

    def test_only_codes_the_library_emits(self):
        """Test every member is one that library code produces."""
        assert {code.value for code in ErrorCode} == {
            "invalid_label",
            "result_decode_failed",
        }


@pytest.mark.unit
class TestDomainError:
    """Test DomainError base class."""

    def test_str_includes_code_and_message(self):
        """Test str() is 'code: message'."""
        error = DomainError(code=ErrorCode.RESULT_DECODE_FAILED, message="disk full")

        assert str(error) == "result_decode_failed: disk full"

    def test_to_dict(self):
        """Test to_dict() renders JSON-native fields."""
        error = DomainError(
            code=ErrorCode.RESULT_DECODE_FAILED,
            message="disk full",
            details={"path": "/tmp"},
        )

        assert error.to_dict() == {
            "type": "DomainError",
            "code": "result_decode_failed",
            "message": "disk full",
            "details": {"path": "/tmp"},
        }

    def test_is_truthy(self):
        """Test errors are truthy so Failure.is_err() holds."""
        assert bool(DomainError(code=ErrorCode.RESULT_DECODE_FAILED, message=""))

    def test_is_not_exception(self):
        """Test DomainError is data, not an exception."""
        assert not issubclass(DomainError, Exception)

    def test_is_immutable(self):
        """Test DomainError is frozen."""
        error = DomainError(code=ErrorCode.RESULT_DECODE_FAILED, message="x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            error.message = "y"  # type: ignore[misc]


@pytest.mark.unit
class TestCommonErrors:
    """Test DomainError subclasses."""

    def test_validation_error_field(self):
        """Test ValidationError carries the failing field."""
        error = ValidationError(
            code=ErrorCode.INVALID_LABEL, message="required", field="name"
        )

        assert error.field == "name"
        assert isinstance(error, DomainError)
        assert error.to_dict()["type"] == "ValidationError"

    def test_decode_error_source(self):
        """Test DecodeError carries the source format."""
        error = DecodeError(
            code=ErrorCode.RESULT_DECODE_FAILED, message="bad", source="json"
        )

        assert error.source == "json"
        assert str(error) == "result_decode_failed: bad"


@pytest.mark.unit
class TestMisuseExceptions:
    """Test exceptions raised for programmer misuse."""

    def test_trace_label_error(self):
        """Test TraceLabelError keeps label and reason."""
        exc = TraceLabelError("", "label cannot be empty")

        assert isinstance(exc, ValueError)
        assert exc.label == ""
        assert exc.reason == "label cannot be empty"
        assert "Invalid trace label ''" in str(exc)

    def test_result_decode_error(self):
        """Test ResultDecodeError keeps the reason."""
        exc = ResultDecodeError("unknown kind 'ok'")

        assert isinstance(exc, ValueError)
        assert exc.reason == "unknown kind 'ok'"
        assert str(exc) == "Cannot decode Result: unknown kind 'ok'"

    def test_unwrap_error_shows_outermost_first(self):
        """Test UnwrapError message lists the call path outermost first."""
        exc = UnwrapError("boom", ["a", "b", "c"])

        assert isinstance(exc, RuntimeError)
        assert "c <- b <- a" in str(exc)
        assert exc.failure == "boom"

    def test_unwrap_error_copies_trace(self):
        """Test UnwrapError does not alias the Result's trace."""
        trace = ["a"]
        exc = UnwrapError("boom", trace)
        trace.append("b")

        assert exc.trace == ["a"]

    def test_unwrap_error_without_trace(self):
        """Test message when no labels were recorded."""
        assert "<no trace>" in str(UnwrapError("boom", []))
