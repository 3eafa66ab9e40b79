"""Compare Range Validation rule.

Validate that a value lies between two other members of the object being
validated.
"""

import logging
from typing import Any

from ..const import CONF_MAX, CONF_MIN
from ..decorators.error_handler import handle_validation_errors
from ..domain.exceptions import (
    InvertedBoundsError,
    MemberNotFoundError,
    RuleConfigurationError,
    UnsupportedTypeError,
)
from ..domain.helpers.accessors import MISSING
from ..domain.helpers.comparison import SupportsOrdering, compare, is_comparable
from .rule_schema import COMPARE_RANGE_SCHEMA
from .validation_context import ValidationContext
from .validation_result import ValidationResult
from .validation_rule import ValidationRule

_LOGGER = logging.getLogger(__name__)


class CompareRangeValidation(ValidationRule):
    """Validate that value is within bounds read from two other members.

    Both bounds are inclusive and are read from the context on every call,
    so they track the object's current state. Any ordered type works:
    numbers, dates, strings or classes built with functools.total_ordering.

    YAML configuration:
        type: compare_range
        min: min_soc
        max: max_soc
        error: "SOC must be between {min} and {max}"

    Misconfiguration raises (MemberNotFoundError, UnsupportedTypeError,
    InvertedBoundsError). Only an out-of-range value is reported as a
    failing ValidationResult.
    """

    CONFIG_SCHEMA = COMPARE_RANGE_SCHEMA

    @property
    def min_property_name(self) -> str:
        """Name of the member holding the lower bound."""
        return self.config[CONF_MIN]

    @property
    def max_property_name(self) -> str:
        """Name of the member holding the upper bound."""
        return self.config[CONF_MAX]

    @handle_validation_errors("compare range validation")
    def validate(self, value: Any, context: ValidationContext) -> ValidationResult:
        """Check if value is within the min/max member values.

        Args:
            value: Value to validate
            context: Object holding the min and max members

        Returns:
            ValidationResult indicating if value is in range

        Raises:
            MemberNotFoundError: If the min or max member does not exist
            UnsupportedTypeError: If value, min or max cannot be ordered
            InvertedBoundsError: If min is greater than max
            RuleConfigurationError: If the error message cannot be formatted
                with the resolved values
        """
        min_name = self.min_property_name
        max_name = self.max_property_name

        min_value = context.get_member(min_name)
        if min_value is MISSING:
            raise MemberNotFoundError(min_name)

        max_value = context.get_member(max_name)
        if max_value is MISSING:
            raise MemberNotFoundError(max_name)

        if not is_comparable(min_value):
            raise UnsupportedTypeError(min_name, min_value)

        if not is_comparable(max_value):
            raise UnsupportedTypeError(max_name, max_value)

        try:
            bounds_order = compare(min_value, max_value)
        except TypeError as err:
            raise UnsupportedTypeError(
                max_name,
                max_value,
                f"The value of '{min_name}' cannot be compared with "
                f"the value of '{max_name}': {err}",
            ) from err

        if bounds_order > 0:
            raise InvertedBoundsError(min_name, max_name, min_value, max_value)

        target_label = context.target_label
        if not is_comparable(value):
            raise UnsupportedTypeError(target_label, value)

        try:
            in_range = (
                compare(value, min_value) >= 0 and compare(value, max_value) <= 0
            )
        except TypeError as err:
            raise UnsupportedTypeError(
                target_label,
                value,
                f"The value of '{target_label}' cannot be compared with "
                f"the range bounds: {err}",
            ) from err

        if in_range:
            _LOGGER.debug(
                "%s=%r is within [%r, %r]", target_label, value, min_value, max_value
            )
            return ValidationResult.success()

        _LOGGER.debug(
            "%s=%r is outside [%r, %r]", target_label, value, min_value, max_value
        )
        return ValidationResult.failure(
            self._format_message(target_label, value, min_value, max_value)
        )

    def _format_message(
        self,
        name: str,
        value: SupportsOrdering,
        min_value: SupportsOrdering,
        max_value: SupportsOrdering,
    ) -> str:
        message = self.error_message
        try:
            return message.format(
                min_value,
                max_value,
                min=min_value,
                max=max_value,
                value=value,
                name=name,
            )
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as err:
            raise RuleConfigurationError(
                f"Error message '{message}' cannot be formatted with "
                f"min={min_value!r}, max={max_value!r}: {err}"
            ) from err
