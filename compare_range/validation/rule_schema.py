"""Voluptuous schemas for rule configuration dicts."""

from __future__ import annotations

from string import Formatter
from typing import Any

import voluptuous as vol

from ..const import (
    CONF_ERROR,
    CONF_MAX,
    CONF_MIN,
    CONF_TYPE,
    MESSAGE_PLACEHOLDERS,
    RULE_TYPE_COMPARE_RANGE,
)

MEMBER_NAME = vol.All(
    str, vol.Strip, vol.Length(min=1, msg="member name must not be empty")
)


def message_template(value: Any) -> str:
    """Validate an error message template.

    Only the placeholders listed in MESSAGE_PLACEHOLDERS may be used, so a
    misspelled placeholder is rejected when the rule is built rather than
    when the first value fails.

    Raises:
        vol.Invalid: If the template is malformed or uses unknown placeholders
    """
    if not isinstance(value, str):
        raise vol.Invalid("error message must be a string")

    try:
        fields = [
            field_name
            for _, field_name, _, _ in Formatter().parse(value)
            if field_name is not None
        ]
    except ValueError as err:
        raise vol.Invalid(f"malformed error message template: {err}") from err

    for field_name in fields:
        # Strip attribute/index access, e.g. "{min.year}" -> "min"
        root = field_name.split(".", 1)[0].split("[", 1)[0]
        if root not in MESSAGE_PLACEHOLDERS:
            raise vol.Invalid(
                f"unknown placeholder '{{{field_name}}}' in error message; "
                f"allowed: {', '.join(sorted(MESSAGE_PLACEHOLDERS))}"
            )

    return value


COMPARE_RANGE_SCHEMA = vol.Schema(
    {
        vol.Optional(
            CONF_TYPE, default=RULE_TYPE_COMPARE_RANGE
        ): RULE_TYPE_COMPARE_RANGE,
        vol.Required(CONF_MIN): MEMBER_NAME,
        vol.Required(CONF_MAX): MEMBER_NAME,
        vol.Optional(CONF_ERROR): message_template,
    }
)
