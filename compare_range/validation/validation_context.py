"""Validation Context.

Describes the object currently being validated and how to read its members.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..const import GENERIC_TARGET_LABEL
from ..domain.helpers.accessors import (
    MemberAccessor,
    attribute_accessor,
    mapping_accessor,
)


@dataclass(frozen=True)
class ValidationContext:
    """Object being validated plus the accessor used to read its members.

    The host owns the instance; rules only borrow the context for a single
    validation call.

    Attributes:
        instance: Object whose members supply the rule's bounds
        member_name: Name of the member being validated, if known
        display_name: Human-readable label for the member, if any
        accessor: Callable returning a member value by name, or MISSING

    Example:
        >>> context = ValidationContext(settings, member_name="target_soc")  # doctest: +SKIP
        >>> context.get_member("min_soc")  # doctest: +SKIP
        10
    """

    instance: Any
    member_name: str | None = None
    display_name: str | None = None
    accessor: MemberAccessor = attribute_accessor

    @classmethod
    def for_mapping(
        cls,
        data: Mapping[str, Any],
        member_name: str | None = None,
        display_name: str | None = None,
    ) -> ValidationContext:
        """Build a context that reads members from mapping keys."""
        return cls(
            instance=data,
            member_name=member_name,
            display_name=display_name,
            accessor=mapping_accessor,
        )

    @property
    def target_label(self) -> str:
        """Label used for the validated value in messages."""
        return self.member_name or self.display_name or GENERIC_TARGET_LABEL

    def get_member(self, name: str) -> Any:
        """Return the current value of a named member, or MISSING."""
        return self.accessor(self.instance, name)
