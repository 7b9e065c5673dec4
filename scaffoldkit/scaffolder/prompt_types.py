"""Mapping from prompt types to command-line flag types.

Every prompt type an option prompt may use must be listed in
:class:`PromptType`.  The set is closed: anything else is rejected with
:class:`UnsupportedPromptTypeError` as soon as a flag type is requested.
"""

from __future__ import annotations

from enum import Enum


class UnsupportedPromptTypeError(ValueError):
    """Raised when an option prompt declares a prompt type with no flag type."""

    def __init__(self, prompt_type: object) -> None:
        self.prompt_type = prompt_type
        super().__init__(f"Unsupported prompt type '{prompt_type}'")


class PromptType(str, Enum):
    """Prompt types that can double as command-line flags."""

    INPUT = "input"
    CONFIRM = "confirm"

    @property
    def option_type(self) -> type:
        """The flag type (``str`` or ``bool``) registered for this prompt type."""
        return _OPTION_TYPES[self]


_OPTION_TYPES: dict[PromptType, type] = {
    PromptType.CONFIRM: bool,
    PromptType.INPUT: str,
}


def option_type_for(prompt_type: str | PromptType) -> type:
    """Return the flag type for *prompt_type*.

    Raises:
        UnsupportedPromptTypeError: If *prompt_type* is not a :class:`PromptType`.
    """
    try:
        return PromptType(prompt_type).option_type
    except ValueError:
        raise UnsupportedPromptTypeError(prompt_type) from None
