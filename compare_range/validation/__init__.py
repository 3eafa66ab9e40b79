"""Validation rules.

Architecture:
- ValidationRule: Abstract base class for all validation rules
- ValidationResult: Result container with error messages
- ValidationContext: Object being validated plus its member accessor
- CompareRangeValidation: Range check against two other members
- YAML-driven: Rules can be defined in rules files (see config_loader)
"""

from .validation_result import ValidationResult
from .validation_context import ValidationContext
from .validation_rule import ValidationRule
from .compare_range_validation import CompareRangeValidation

__all__ = [
    "ValidationResult",
    "ValidationContext",
    "ValidationRule",
    "CompareRangeValidation",
]
