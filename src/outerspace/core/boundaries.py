"""Locating the non-whitespace core of a string."""

from typing import Optional

from outerspace.core.types import BoundaryPair, require_text

# Code points with the Unicode White_Space property. str.isspace() also
# accepts the information separators U+001C..U+001F, which are not whitespace.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r"
    " "
    "\x85"
    "\xa0"
    "\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029"
    "\u202f"
    "\u205f"
    "\u3000"
)


def is_non_whitespace(char: str) -> bool:
    """Return True if ``char`` is not a Unicode whitespace character."""
    return char not in WHITESPACE


def first_non_whitespace(text: str) -> Optional[int]:
    """Index of the first non-whitespace character, or None if there is none."""
    require_text(text, "text")
    for index, char in enumerate(text):
        if is_non_whitespace(char):
            return index
    return None


def last_non_whitespace(text: str) -> Optional[int]:
    """Index of the last non-whitespace character, or None if there is none."""
    require_text(text, "text")
    for index in range(len(text) - 1, -1, -1):
        if is_non_whitespace(text[index]):
            return index
    return None


def find_boundaries(text: str) -> BoundaryPair:
    """Find the first and last non-whitespace positions of a string.

    Args:
        text: The string to scan

    Returns:
        A pair with both positions set, or both None when ``text`` is empty or
        consists only of whitespace.

    Raises:
        TextTypeError: If ``text`` is not a string
    """
    return BoundaryPair(
        first=first_non_whitespace(text),
        last=last_non_whitespace(text),
    )
