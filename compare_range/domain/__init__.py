"""Domain layer: exceptions and helpers shared by validation rules."""

from .exceptions import (
    InvertedBoundsError,
    MemberNotFoundError,
    RuleConfigurationError,
    RuleError,
    UnsupportedTypeError,
    ValidationError,
)

__all__ = [
    "InvertedBoundsError",
    "MemberNotFoundError",
    "RuleConfigurationError",
    "RuleError",
    "UnsupportedTypeError",
    "ValidationError",
]
