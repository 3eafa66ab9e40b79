"""Configuration loader for rule definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from .const import (
    CONF_FIELDS,
    CONF_TYPE,
    CONF_VERSION,
    RULE_TYPE_COMPARE_RANGE,
    SUPPORTED_VERSION_PREFIX,
)
from .domain.exceptions import RuleConfigurationError
from .validation import CompareRangeValidation, ValidationRule

_LOGGER = logging.getLogger(__name__)

# Mapping of rule types to validation classes
RULE_TYPES: dict[str, type[ValidationRule]] = {
    RULE_TYPE_COMPARE_RANGE: CompareRangeValidation,
}

RULES_FILE_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_VERSION): vol.Coerce(str),
        vol.Optional(CONF_FIELDS, default={}): {
            str: [vol.Schema({CONF_TYPE: str}, extra=vol.ALLOW_EXTRA)]
        },
    },
    extra=vol.ALLOW_EXTRA,
)


def create_rule(config: Mapping[str, Any]) -> ValidationRule:
    """Create a rule instance from its configuration.

    Args:
        config: Rule configuration; 'type' defaults to compare_range

    Returns:
        Configured rule

    Raises:
        RuleConfigurationError: If the rule type is unknown or config is invalid
    """
    rule_type = config.get(CONF_TYPE, RULE_TYPE_COMPARE_RANGE)
    rule_class = RULE_TYPES.get(rule_type)
    if rule_class is None:
        raise RuleConfigurationError(
            f"Unknown validation rule type '{rule_type}' "
            f"(supported: {', '.join(sorted(RULE_TYPES))})"
        )
    return rule_class(config)


def load_rules_config(path: str | Path) -> dict[str, Any]:
    """Load and validate a rules file.

    Args:
        path: Path to the YAML rules file

    Returns:
        Validated configuration dict

    Raises:
        FileNotFoundError: If the file does not exist
        RuleConfigurationError: If the file is not a valid rules document
    """
    config_file = Path(path)

    if not config_file.exists():
        raise FileNotFoundError(f"Rules file not found: {config_file}")

    try:
        config = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise RuleConfigurationError(f"Invalid YAML: {err}") from err

    if not config:
        raise RuleConfigurationError("Rules file is empty")

    if not isinstance(config, dict) or CONF_VERSION not in config:
        raise RuleConfigurationError("Rules file missing required 'version' field")

    try:
        config = RULES_FILE_SCHEMA(config)
    except vol.Invalid as err:
        raise RuleConfigurationError(f"Invalid rules file: {err}") from err

    version = config[CONF_VERSION]
    if not version.startswith(SUPPORTED_VERSION_PREFIX):
        raise RuleConfigurationError(
            f"Rules file version {version} not supported. "
            f"Only version {SUPPORTED_VERSION_PREFIX}x is supported."
        )

    return config


def load_rules(path: str | Path) -> dict[str, list[ValidationRule]]:
    """Load a rules file and build rule instances per field.

    Args:
        path: Path to the YAML rules file

    Returns:
        Mapping of field name to its rules, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        RuleConfigurationError: If the file or any rule is invalid
    """
    config = load_rules_config(path)

    rules: dict[str, list[ValidationRule]] = {}
    for field_name, rule_configs in config[CONF_FIELDS].items():
        field_rules = []
        for idx, rule_config in enumerate(rule_configs):
            try:
                field_rules.append(create_rule(rule_config))
            except RuleConfigurationError as err:
                raise RuleConfigurationError(
                    f"Field '{field_name}' rule #{idx}: {err}"
                ) from err
        rules[field_name] = field_rules
        _LOGGER.debug(
            "Registered %d validation rules for field '%s'",
            len(field_rules),
            field_name,
        )

    _LOGGER.info(
        "Loaded rules file %s: %d fields, %d rules",
        path,
        len(rules),
        sum(len(field_rules) for field_rules in rules.values()),
    )

    return rules
