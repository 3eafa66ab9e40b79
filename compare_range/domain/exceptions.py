"""Exceptions raised by compare_range rules.

Configuration and type errors are hard failures: they mean the rule was
attached to the wrong members or to incompatible types, and they propagate
to the caller. An out-of-range value is an ordinary outcome and is reported
through ValidationResult instead (or ValidationError from ensure_valid).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .helpers.comparison import SupportsOrdering


class RuleError(Exception):
    """Base class for errors caused by a misconfigured rule."""


class RuleConfigurationError(RuleError):
    """Rule configuration is invalid.

    Raised when a rule config dict fails schema validation, names an unknown
    rule type, or when a rules file cannot be loaded.
    """


class MemberNotFoundError(RuleConfigurationError):
    """Named member does not exist on the validated object.

    Example:
        >>> raise MemberNotFoundError("min_range")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        MemberNotFoundError: min_range member not found.
    """

    def __init__(self, member_name: str) -> None:
        super().__init__(f"{member_name} member not found.")
        self.member_name = member_name


class InvertedBoundsError(RuleConfigurationError):
    """Resolved minimum is greater than the resolved maximum."""

    def __init__(
        self,
        min_name: str,
        max_name: str,
        min_value: SupportsOrdering,
        max_value: SupportsOrdering,
    ) -> None:
        super().__init__(
            f"The value of '{min_name}' ({min_value!r}) cannot be greater than "
            f"the value of '{max_name}' ({max_value!r})."
        )
        self.min_name = min_name
        self.max_name = max_name
        self.min_value = min_value
        self.max_value = max_value


class UnsupportedTypeError(RuleError, TypeError):
    """Value does not support ordering comparison.

    Also raised when two individually comparable values cannot be compared
    with each other, e.g. an int bound against a str bound.
    """

    def __init__(self, member_name: str, value: Any, reason: str | None = None) -> None:
        message = reason or (
            f"The type of '{member_name}' ({type(value).__name__}) "
            "does not support ordering comparison."
        )
        super().__init__(message)
        self.member_name = member_name
        self.value_type = type(value)


class ValidationError(ValueError):
    """Value failed validation.

    Only raised by ``ensure_valid``; ``validate`` returns the failure as a
    ValidationResult.
    """

    def __init__(self, message: str, result: Any = None) -> None:
        super().__init__(message)
        self.result = result
