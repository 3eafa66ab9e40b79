"""Helper functions for member lookup and ordering comparison."""

from .accessors import MISSING, MemberAccessor, attribute_accessor, mapping_accessor
from .comparison import SupportsOrdering, compare, is_comparable

__all__ = [
    "MISSING",
    "MemberAccessor",
    "SupportsOrdering",
    "attribute_accessor",
    "compare",
    "is_comparable",
    "mapping_accessor",
]
