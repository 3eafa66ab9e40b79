"""Member accessors.

An accessor is the capability a host supplies to look up a member of the
object being validated by name. It returns the member's current value, or
``MISSING`` when no such member exists.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Union


class _Missing(Enum):
    """Sentinel type for absent members."""

    MISSING = "missing"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing.MISSING

MemberAccessor = Callable[[Any, str], Union[Any, _Missing]]


def attribute_accessor(instance: Any, name: str) -> Any:
    """Look up a public attribute or property on an object.

    The member is located statically first and only then read, so an
    AttributeError raised inside a property getter propagates instead of
    being reported as a missing member. Names starting with an underscore
    and methods are treated as absent.

    Args:
        instance: Object being validated
        name: Attribute name

    Returns:
        Attribute value, or MISSING
    """
    if not name or name.startswith("_"):
        return MISSING

    member = inspect.getattr_static(instance, name, MISSING)
    if member is MISSING or inspect.isroutine(member):
        return MISSING

    return getattr(instance, name)


def mapping_accessor(instance: Mapping[str, Any], name: str) -> Any:
    """Look up a key on a mapping.

    Args:
        instance: Mapping being validated
        name: Key

    Returns:
        Value stored under the key, or MISSING
    """
    if name in instance:
        return instance[name]
    return MISSING
