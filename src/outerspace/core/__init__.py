"""Core functionality for Outerspace."""

from outerspace.core.types import Affixes, BoundaryPair, OuterspaceError, TextTypeError
from outerspace.core.boundaries import (
    find_boundaries,
    first_non_whitespace,
    is_non_whitespace,
    last_non_whitespace,
)
from outerspace.core.splice import format_wrap, splice
from outerspace.core.wrap import (
    prefix_non_whitespace,
    suffix_non_whitespace,
    wrap_non_whitespace,
)

__all__ = [
    "Affixes",
    "BoundaryPair",
    "OuterspaceError",
    "TextTypeError",
    "find_boundaries",
    "first_non_whitespace",
    "format_wrap",
    "is_non_whitespace",
    "last_non_whitespace",
    "prefix_non_whitespace",
    "splice",
    "suffix_non_whitespace",
    "wrap_non_whitespace",
]
