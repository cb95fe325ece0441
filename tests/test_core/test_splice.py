"""Tests for the splice formatter."""

import pytest

from outerspace.core.splice import format_wrap, splice
from outerspace.core.types import BoundaryPair


@pytest.mark.parametrize(
    "first,last,expected",
    [
        (2, 4, "  <abc>  "),
        (2, None, "  <abc  >"),
        (None, 4, "<  abc>  "),
        (None, None, "<  abc  >"),
    ],
)
def test_format_wrap_cases(first, last, expected: str):
    """Test each combination of present and absent boundaries."""
    assert format_wrap("  abc  ", "<", ">", first, last) == expected


def test_format_wrap_single_character_core():
    """Test a core of exactly one character."""
    assert format_wrap(" x ", "(", ")", 1, 1) == " (x) "


def test_format_wrap_empty_string():
    """Test that an empty string is simply wrapped."""
    assert format_wrap("", "<", ">", None, None) == "<>"


def test_format_wrap_boundaries_at_ends():
    """Test boundaries that coincide with the ends of the string."""
    assert format_wrap("abc", "<", ">", 0, 2) == "<abc>"
    assert format_wrap("abc", "<", ">", 0, None) == "<abc>"
    assert format_wrap("abc", "<", ">", None, 2) == "<abc>"


def test_format_wrap_prefix_only_call_pattern():
    """Test the call pattern used for prefixing."""
    assert format_wrap("\n \nemboldened \nmatthew", "**", "", 3, None) == (
        "\n \n**emboldened \nmatthew"
    )


def test_format_wrap_suffix_only_call_pattern():
    """Test the call pattern used for suffixing."""
    assert format_wrap("emboldened \nmatthew\n \n", "", "**", None, 18) == (
        "emboldened \nmatthew**\n \n"
    )


def test_splice_uses_boundary_pair():
    """Test splicing with a BoundaryPair."""
    boundaries = BoundaryPair(first=1, last=3)
    assert splice(" abc ", "[", "]", boundaries) == " [abc] "
    assert splice(" abc ", "[", "]", BoundaryPair()) == "[ abc ]"


@pytest.mark.parametrize(
    "text,first,last",
    [
        ("ab", 5, 9),
        ("ab", 0, 2),
        ("ab", 2, None),
        ("ab", None, 2),
        ("", 0, 0),
        ("ab", -1, 1),
        ("ab", 1, 0),
    ],
)
def test_format_wrap_rejects_offsets_outside_text(text: str, first, last):
    """Test that boundaries must index into the text."""
    with pytest.raises(ValueError):
        format_wrap(text, "<", ">", first, last)


def test_splice_rejects_boundary_pair_past_end():
    """Test that a valid BoundaryPair still has to fit the text."""
    with pytest.raises(ValueError, match="outside text of length 2"):
        splice("ab", "<", ">", BoundaryPair(first=5, last=9))
