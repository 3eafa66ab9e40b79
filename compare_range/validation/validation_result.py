"""Validation Result data class.

Result container for a single rule evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    """Result of a validation operation.

    Attributes:
        valid: Whether validation passed (no errors)
        errors: List of human-readable failure messages
    """

    valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def success(cls) -> ValidationResult:
        """Return a passing result with no messages."""
        return cls(valid=True)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        """Return a failing result carrying one message."""
        return cls(valid=False, errors=[message])

    @property
    def message(self) -> str | None:
        """First error message, or None for a passing result."""
        return self.errors[0] if self.errors else None

    def __bool__(self) -> bool:
        return self.valid

    def __str__(self) -> str:
        """Return string representation of validation result."""
        if self.errors:
            return f"Errors: {', '.join(self.errors)}"
        return "Valid"
