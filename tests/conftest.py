"""Pytest configuration and fixtures for compare_range tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import compare_range
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from compare_range.validation import ValidationContext


class DummyType:
    """Type without ordering support."""


class RangeSettings:
    """Object whose members supply range bounds."""

    def __init__(self) -> None:
        self.min_range = 10
        self.max_range = 20
        self.invalid_max_range = 5
        self.invalid_min_range_type = DummyType()
        self.invalid_max_range_type = DummyType()
        self._private_min = 0

    @property
    def computed_max(self) -> int:
        """Bound exposed through a property."""
        return self.max_range * 2


@pytest.fixture
def range_settings() -> RangeSettings:
    """Return an object with valid and invalid bound members."""
    return RangeSettings()


@pytest.fixture
def context(range_settings: RangeSettings) -> ValidationContext:
    """Return a validation context for range_settings."""
    return ValidationContext(range_settings, member_name="target")


@pytest.fixture
def bounds_data() -> dict[str, int]:
    """Mapping with min/max bounds."""
    return {
        "min_soc": 20,
        "max_soc": 80,
        "target_soc": 50,
    }
