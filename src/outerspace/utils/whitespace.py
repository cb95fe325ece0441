from outerspace.core.boundaries import WHITESPACE, find_boundaries
from outerspace.core.types import require_text

__all__ = ["WHITESPACE", "extract_whitespace_formatting"]


def extract_whitespace_formatting(content: str) -> tuple[str, str, str]:
    """Split text into leading whitespace, core content and trailing whitespace.

    Args:
        content: Input text content

    Returns:
        tuple: (prefix_whitespace, core_content, suffix_whitespace)

    Raises:
        TextTypeError: If ``content`` is not a string
    """
    require_text(content, "content")
    boundaries = find_boundaries(content)

    if boundaries.is_empty:
        # Whitespace-only content is all prefix
        return content, "", ""

    end = boundaries.last + 1
    return content[: boundaries.first], content[boundaries.first : end], content[end:]
