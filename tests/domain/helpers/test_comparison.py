"""Tests for ordering comparison helpers."""

import math
from datetime import date, datetime, timedelta
from decimal import Decimal
from functools import total_ordering
from typing import TypeGuard, get_type_hints

import pytest

from compare_range.domain.helpers.comparison import (
    SupportsOrdering,
    compare,
    is_comparable,
)


class PlainObject:
    """Type without ordering support."""


class EqualityOnly:
    """Type defining equality but no ordering."""

    def __eq__(self, other):
        return isinstance(other, EqualityOnly)

    __hash__ = object.__hash__


@total_ordering
class Priority:
    """Ordered custom type."""

    def __init__(self, level: int) -> None:
        self.level = level

    def __eq__(self, other):
        return isinstance(other, Priority) and self.level == other.level

    def __lt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.level < other.level


class GreaterOnly:
    """Type defining only __gt__."""

    def __init__(self, n: int) -> None:
        self.n = n

    def __gt__(self, other):
        return self.n > other.n


class TestIsComparable:
    """Test is_comparable function."""

    @pytest.mark.parametrize(
        "value",
        [
            0,
            -3.5,
            True,
            Decimal("1.10"),
            "text",
            b"bytes",
            date(2024, 1, 1),
            datetime(2024, 1, 1, 12, 0),
            timedelta(minutes=5),
            (1, 2),
            [1, 2],
            frozenset({1}),
            Priority(1),
            GreaterOnly(1),
            math.nan,
        ],
    )
    def test_comparable_values(self, value):
        """Test values with ordering operators."""
        assert is_comparable(value) is True

    @pytest.mark.parametrize(
        "value",
        [None, PlainObject(), EqualityOnly(), object(), {"a": 1}, 1 + 2j],
    )
    def test_non_comparable_values(self, value):
        """Test values without ordering operators."""
        assert is_comparable(value) is False

    def test_narrows_to_supports_ordering(self):
        """Test is_comparable is a type guard for SupportsOrdering."""
        hints = get_type_hints(is_comparable)

        assert hints["return"] == TypeGuard[SupportsOrdering]


class TestCompare:
    """Test compare function."""

    def test_less(self):
        """Test left before right."""
        assert compare(1, 2) == -1

    def test_equal(self):
        """Test equal values."""
        assert compare(2, 2) == 0
        assert compare(2, 2.0) == 0

    def test_greater(self):
        """Test left after right."""
        assert compare(3, 2) == 1

    def test_dates(self):
        """Test dates compare chronologically."""
        assert compare(date(2024, 1, 1), date(2024, 6, 1)) == -1

    def test_custom_ordering(self):
        """Test total_ordering classes."""
        assert compare(Priority(5), Priority(1)) == 1
        assert compare(Priority(1), Priority(1)) == 0

    def test_reflected_operator(self):
        """Test a type defining only __gt__ still compares."""
        assert compare(GreaterOnly(1), GreaterOnly(2)) == -1
        assert compare(GreaterOnly(3), GreaterOnly(2)) == 1

    def test_mismatched_types(self):
        """Test incompatible types raise TypeError."""
        with pytest.raises(TypeError):
            compare(1, "1")

    def test_nan_is_unordered(self):
        """Test NaN raises TypeError."""
        with pytest.raises(TypeError, match="unordered"):
            compare(math.nan, 1.0)

    def test_operands_bound_by_supports_ordering(self):
        """Test compare takes SupportsOrdering operands."""
        hints = get_type_hints(compare)

        assert hints["left"] is SupportsOrdering
        assert hints["right"] is SupportsOrdering
        assert hints["return"] is int

    def test_no_numeric_casting(self):
        """Test strings of digits compare lexicographically."""
        assert compare("10", "9") == -1
