"""Validation Rule abstract base class.

Abstract base class for all validation rules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import voluptuous as vol

from ..const import CONF_ERROR, DEFAULT_ERROR_MESSAGE
from ..domain.exceptions import RuleConfigurationError, ValidationError
from .validation_context import ValidationContext
from .validation_result import ValidationResult


class ValidationRule(ABC):
    """Abstract base class for validation rules.

    All validation rules must implement the validate() method which takes
    a value and context, returning a ValidationResult. Configuration is
    checked against CONFIG_SCHEMA once, at construction, and stored
    read-only so a rule can be shared between callers.
    """

    CONFIG_SCHEMA: vol.Schema = vol.Schema({}, extra=vol.ALLOW_EXTRA)

    def __init__(self, config: Mapping[str, Any]) -> None:
        """Initialize validation rule.

        Args:
            config: Configuration dictionary (e.g. one entry of a rules file)

        Raises:
            RuleConfigurationError: If config does not match CONFIG_SCHEMA
        """
        try:
            validated = self.CONFIG_SCHEMA(dict(config))
        except vol.Invalid as err:
            raise RuleConfigurationError(
                f"Invalid {type(self).__name__} config: {err}"
            ) from err

        self._config = MappingProxyType(validated)

    @property
    def config(self) -> Mapping[str, Any]:
        """Validated, read-only rule configuration."""
        return self._config

    @property
    def error_message(self) -> str:
        """Error message template used for ordinary failures."""
        return self._config.get(CONF_ERROR, DEFAULT_ERROR_MESSAGE)

    @abstractmethod
    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        """Validate a value against this rule.

        Args:
            value: The value to validate
            context: Object being validated and its member accessor

        Returns:
            ValidationResult with errors
        """

    def is_valid(self, value: Any, context: ValidationContext) -> bool:
        """Return True if the value passes this rule."""
        return self.validate(value, context).valid

    def ensure_valid(self, value: Any, context: ValidationContext) -> None:
        """Validate a value, raising on ordinary failure.

        Raises:
            ValidationError: If the value fails this rule
        """
        result = self.validate(value, context)
        if not result.valid:
            raise ValidationError(result.message, result=result)
