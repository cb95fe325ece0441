"""Prefixing and suffixing the non-whitespace characters of a string."""

from outerspace.core.boundaries import (
    find_boundaries,
    first_non_whitespace,
    last_non_whitespace,
)
from outerspace.core.splice import format_wrap, splice


def wrap_non_whitespace(text: str, prefix: str, suffix: str) -> str:
    """Insert a prefix before the first and a suffix after the last non-whitespace character.

    If ``text`` is empty or all whitespace, the affixes wrap the whole string.

    Args:
        text: The string to wrap
        prefix: Inserted before the first non-whitespace character
        suffix: Inserted after the last non-whitespace character

    Returns:
        The wrapped string

    Raises:
        TextTypeError: If any argument is not a string

    Example:
        >>> wrap_non_whitespace("\\n\\nHello hello\\n\\n", "**", "**")
        '\\n\\n**Hello hello**\\n\\n'
    """
    return splice(text, prefix, suffix, find_boundaries(text))


def prefix_non_whitespace(text: str, prefix: str) -> str:
    """Insert a prefix before the first non-whitespace character.

    Example:
        >>> prefix_non_whitespace("\\n\\nHello hello\\n\\n", "> ")
        '\\n\\n> Hello hello\\n\\n'
    """
    return format_wrap(text, prefix, "", first_non_whitespace(text), None)


def suffix_non_whitespace(text: str, suffix: str) -> str:
    """Insert a suffix after the last non-whitespace character.

    Example:
        >>> suffix_non_whitespace("\\n\\nHello hello\\n\\n", "!")
        '\\n\\nHello hello!\\n\\n'
    """
    return format_wrap(text, "", suffix, None, last_non_whitespace(text))
