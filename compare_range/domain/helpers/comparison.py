"""Ordering comparison helpers.

Bounds and targets may be any ordered type (numbers, dates, strings,
``functools.total_ordering`` classes), so comparisons go through the rich
comparison operators only. No subtraction, no numeric casting.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeGuard

_ORDERING_METHODS = ("__lt__", "__le__", "__gt__", "__ge__")


class SupportsOrdering(Protocol):
    """Protocol for values that can be ordered against each other.

    Static bound only. Every object inherits ``__lt__`` from ``object``, so
    dynamic values are narrowed to it with ``is_comparable``.
    """

    def __lt__(self, other: Any) -> bool:
        """Return whether self orders before other."""
        ...


def is_comparable(value: Any) -> TypeGuard[SupportsOrdering]:
    """Return True if the value supports ordering against its own type.

    Built-in types such as dict and complex carry rich comparison slots that
    reject ordering at runtime, so the value is also compared with itself.

    Args:
        value: Value to inspect

    Returns:
        True when an ordering operator is overridden from ``object`` and
        ``value < value`` does not raise TypeError

    Examples:
        >>> is_comparable(10)
        True
        >>> is_comparable(object())
        False
        >>> is_comparable(None)
        False
    """
    value_type = type(value)
    if not any(
        getattr(value_type, method, None) is not getattr(object, method)
        for method in _ORDERING_METHODS
    ):
        return False

    try:
        _ = value < value
    except TypeError:
        return False
    return True


def compare(left: SupportsOrdering, right: SupportsOrdering) -> int:
    """Three-way compare two values.

    Args:
        left: Left operand
        right: Right operand

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right

    Raises:
        TypeError: If the values cannot be compared with each other, or are
            unordered (e.g. NaN)
    """
    if left < right:
        return -1
    if left == right:
        return 0
    if left > right:
        return 1
    raise TypeError(
        f"{left!r} and {right!r} are unordered with respect to each other"
    )
