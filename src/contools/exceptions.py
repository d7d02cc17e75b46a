"""Custom exceptions for contools package."""

from typing import Any


class ConToolsError(Exception):
    """Base exception class for all contools errors."""


class FormatError(ConToolsError, ValueError):
    """Raised when input text cannot be converted to the requested type.

    Also raised up front by ``read_valid`` when no converter exists for the
    requested type.

    Attributes:
        value: The offending input text, or None when no input was involved.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class EndOfInputError(ConToolsError, EOFError):
    """Raised when the input stream is exhausted but a value is required."""
