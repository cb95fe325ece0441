"""Core data types for Outerspace."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from outerspace.utils.logging import get_logger

logger = get_logger(__name__)


class OuterspaceError(Exception):
    """Base class for Outerspace errors."""

    pass


class TextTypeError(OuterspaceError, TypeError):
    """Raised when a text, prefix or suffix argument is not a ``str``."""

    def __init__(self, argument: str, value: Any) -> None:
        self.argument = argument
        self.value = value
        super().__init__(
            f"{argument} must be str, not {type(value).__name__}"
        )


def require_text(value: Any, argument: str) -> str:
    """Return ``value`` unchanged if it is a ``str``.

    Args:
        value: The value to check
        argument: Argument name used in the error message

    Returns:
        The value itself

    Raises:
        TextTypeError: If the value is not a string
    """
    if not isinstance(value, str):
        logger.error(
            "Expected text argument",
            argument=argument,
            type=type(value).__name__,
        )
        raise TextTypeError(argument, value)
    return value


class BoundaryPair(BaseModel):
    """Positions of the first and last non-whitespace characters of a string.

    Offsets are code-point indices. ``find_boundaries`` only ever produces
    pairs where both are set or both are ``None``; one-sided pairs are built
    deliberately by the prefix-only and suffix-only operations.
    """

    first: Optional[int] = Field(
        default=None,
        ge=0,
        description="Index of the first non-whitespace character",
    )
    last: Optional[int] = Field(
        default=None,
        ge=0,
        description="Index of the last non-whitespace character",
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_order(self) -> "BoundaryPair":
        if self.first is not None and self.last is not None and self.first > self.last:
            raise ValueError(
                f"first ({self.first}) must not be greater than last ({self.last})"
            )
        return self

    @property
    def is_empty(self) -> bool:
        """Whether the string had no non-whitespace characters."""
        return self.first is None and self.last is None


class Affixes(BaseModel):
    """A prefix and suffix pair to be applied around non-whitespace cores."""

    prefix: str = ""
    suffix: str = ""

    model_config = ConfigDict(frozen=True, strict=True)

    def apply(self, text: str) -> str:
        """Wrap the non-whitespace core of ``text`` with these affixes."""
        from outerspace.core.wrap import wrap_non_whitespace

        return wrap_non_whitespace(text, self.prefix, self.suffix)
