"""Compare-range validation rule.

Validates that a value lies within an inclusive range whose bounds are read
from two other members of the object being validated.
"""

from .config_loader import create_rule, load_rules, load_rules_config
from .domain.exceptions import (
    InvertedBoundsError,
    MemberNotFoundError,
    RuleConfigurationError,
    RuleError,
    UnsupportedTypeError,
    ValidationError,
)
from .domain.helpers import (
    MISSING,
    SupportsOrdering,
    attribute_accessor,
    compare,
    is_comparable,
    mapping_accessor,
)
from .validation import (
    CompareRangeValidation,
    ValidationContext,
    ValidationResult,
    ValidationRule,
)

__version__ = "1.0.0"

__all__ = [
    "MISSING",
    "CompareRangeValidation",
    "InvertedBoundsError",
    "MemberNotFoundError",
    "RuleConfigurationError",
    "RuleError",
    "SupportsOrdering",
    "UnsupportedTypeError",
    "ValidationContext",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    "attribute_accessor",
    "compare",
    "create_rule",
    "is_comparable",
    "load_rules",
    "load_rules_config",
    "mapping_accessor",
]
