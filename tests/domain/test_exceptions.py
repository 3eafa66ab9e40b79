"""Tests for compare_range exceptions."""

import pytest

from compare_range.domain.exceptions import (
    InvertedBoundsError,
    MemberNotFoundError,
    RuleConfigurationError,
    RuleError,
    UnsupportedTypeError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception base classes."""

    def test_configuration_errors(self):
        """Test member and bounds errors are configuration errors."""
        assert issubclass(MemberNotFoundError, RuleConfigurationError)
        assert issubclass(InvertedBoundsError, RuleConfigurationError)
        assert issubclass(RuleConfigurationError, RuleError)

    def test_unsupported_type_error(self):
        """Test UnsupportedTypeError is a rule error and a TypeError."""
        assert issubclass(UnsupportedTypeError, RuleError)
        assert issubclass(UnsupportedTypeError, TypeError)

    def test_validation_error_is_not_rule_error(self):
        """Test ordinary validation failures are kept apart from rule errors."""
        assert issubclass(ValidationError, ValueError)
        assert not issubclass(ValidationError, RuleError)


class TestExceptionMessages:
    """Test exception messages and attributes."""

    def test_member_not_found(self):
        """Test member name in message."""
        with pytest.raises(MemberNotFoundError, match="min_range member") as exc_info:
            raise MemberNotFoundError("min_range")

        assert exc_info.value.member_name == "min_range"

    def test_inverted_bounds(self):
        """Test names and values in message."""
        err = InvertedBoundsError("min_range", "max_range", 20, 5)

        assert str(err) == (
            "The value of 'min_range' (20) cannot be greater than "
            "the value of 'max_range' (5)."
        )
        assert (err.min_value, err.max_value) == (20, 5)

    def test_unsupported_type_default_message(self):
        """Test default message names member and type."""
        err = UnsupportedTypeError("min_range", object())

        assert str(err) == (
            "The type of 'min_range' (object) does not support ordering comparison."
        )
        assert err.value_type is object

    def test_unsupported_type_custom_reason(self):
        """Test explicit reason replaces default message."""
        err = UnsupportedTypeError("max_range", "z", "cannot compare int with str")

        assert str(err) == "cannot compare int with str"
        assert err.member_name == "max_range"
        assert err.value_type is str

    def test_validation_error_result(self):
        """Test ValidationError carries the failing result."""
        err = ValidationError("out of range", result="result")

        assert str(err) == "out of range"
        assert err.result == "result"
