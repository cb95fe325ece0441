"""Reassembling a string around its non-whitespace core."""

from typing import Optional

from outerspace.core.types import BoundaryPair, require_text
from outerspace.utils.logging import get_logger

logger = get_logger(__name__)


def _check_offsets(text: str, first: Optional[int], last: Optional[int]) -> None:
    for name, offset in (("first", first), ("last", last)):
        if offset is not None and not 0 <= offset < len(text):
            logger.error(
                "Boundary outside text", boundary=name, offset=offset, length=len(text)
            )
            raise ValueError(
                f"{name} boundary {offset} is outside text of length {len(text)}"
            )
    if first is not None and last is not None and first > last:
        logger.error("Boundaries out of order", first=first, last=last)
        raise ValueError(f"first ({first}) must not be greater than last ({last})")


def format_wrap(
    text: str,
    prefix: str,
    suffix: str,
    first_non_whitespace: Optional[int],
    last_non_whitespace: Optional[int],
) -> str:
    """Insert ``prefix`` and ``suffix`` into ``text`` at the given boundaries.

    Whitespace before ``first_non_whitespace`` and after
    ``last_non_whitespace`` stays where it is. A missing boundary means the
    corresponding affix goes to that end of the string instead:

    * both set: ``leading + prefix + core + suffix + trailing``
    * only first set: ``leading + prefix + rest + suffix``
    * only last set: ``prefix + rest + suffix + trailing``
    * neither set: ``prefix + text + suffix``

    Args:
        text: The original string
        prefix: Text to insert before the first non-whitespace character
        suffix: Text to insert after the last non-whitespace character
        first_non_whitespace: Index of the first non-whitespace character, or None
        last_non_whitespace: Index of the last non-whitespace character, or None

    Returns:
        A new string with the affixes inserted

    Raises:
        TextTypeError: If ``text``, ``prefix`` or ``suffix`` is not a string
        ValueError: If a boundary does not index into ``text``
    """
    require_text(text, "text")
    require_text(prefix, "prefix")
    require_text(suffix, "suffix")
    _check_offsets(text, first_non_whitespace, last_non_whitespace)

    if first_non_whitespace is not None and last_non_whitespace is not None:
        leading_ws, rest = text[:first_non_whitespace], text[first_non_whitespace:]
        split = last_non_whitespace - first_non_whitespace + 1
        core, trailing_ws = rest[:split], rest[split:]
        return f"{leading_ws}{prefix}{core}{suffix}{trailing_ws}"

    if first_non_whitespace is not None:
        leading_ws, rest = text[:first_non_whitespace], text[first_non_whitespace:]
        return f"{leading_ws}{prefix}{rest}{suffix}"

    if last_non_whitespace is not None:
        rest, trailing_ws = text[: last_non_whitespace + 1], text[last_non_whitespace + 1 :]
        return f"{prefix}{rest}{suffix}{trailing_ws}"

    return f"{prefix}{text}{suffix}"


def splice(text: str, prefix: str, suffix: str, boundaries: BoundaryPair) -> str:
    """Like ``format_wrap``, taking the boundaries as a ``BoundaryPair``."""
    return format_wrap(text, prefix, suffix, boundaries.first, boundaries.last)
