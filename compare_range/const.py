"""Constants for the compare_range package."""

# Rule types
RULE_TYPE_COMPARE_RANGE = "compare_range"

# Rule configuration keys
CONF_TYPE = "type"
CONF_MIN = "min"
CONF_MAX = "max"
CONF_ERROR = "error"

# Rule file keys
CONF_VERSION = "version"
CONF_FIELDS = "fields"
SUPPORTED_VERSION_PREFIX = "1."

# Messages
DEFAULT_ERROR_MESSAGE = "the value must be between {min} and {max}"
GENERIC_TARGET_LABEL = "value"

# Placeholders accepted in error message templates ({0} and {1} are min/max)
MESSAGE_PLACEHOLDERS = frozenset({"min", "max", "value", "name", "0", "1"})
