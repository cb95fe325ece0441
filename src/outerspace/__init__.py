"""Outerspace - prefix and suffix the non-whitespace core of a string.

Leading and trailing whitespace is left exactly where it was:

    >>> wrap_non_whitespace("\\n\\nHello hello\\n\\n", "**", "**")
    '\\n\\n**Hello hello**\\n\\n'
"""

from outerspace.core import (
    Affixes,
    BoundaryPair,
    OuterspaceError,
    TextTypeError,
    find_boundaries,
    first_non_whitespace,
    format_wrap,
    is_non_whitespace,
    last_non_whitespace,
    prefix_non_whitespace,
    splice,
    suffix_non_whitespace,
    wrap_non_whitespace,
)
from outerspace.utils.logging import configure_logging, get_logger
from outerspace.utils.whitespace import extract_whitespace_formatting

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "Affixes",
    "BoundaryPair",
    "OuterspaceError",
    "TextTypeError",
    "configure_logging",
    "extract_whitespace_formatting",
    "find_boundaries",
    "first_non_whitespace",
    "format_wrap",
    "get_logger",
    "is_non_whitespace",
    "last_non_whitespace",
    "prefix_non_whitespace",
    "splice",
    "suffix_non_whitespace",
    "wrap_non_whitespace",
]
