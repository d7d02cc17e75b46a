"""Prompted input: raw lines, integers and retry-until-valid values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from contools.colors import Color
from contools.console import color_write, write_error
from contools.converters import ConverterRegistry, get_registry, parse_int
from contools.exceptions import EndOfInputError
from contools.logging import get_logger
from contools.terminal import Terminal, get_terminal

LOG = get_logger(__name__)

T = TypeVar("T")


def read_line(
    text: str,
    default: Any = None,
    prompt: str = ": ",
    fore_color: Color = Color.YELLOW,
    back_color: Color = Color.BLACK,
    *,
    terminal: Terminal | None = None,
) -> str | None:
    """Show a prompt and read one line, like Python's input() with a default.

    The default, when given, is shown in brackets: ``Age [30]: ``.

    Args:
        text: Text to show.
        default: Value returned (as a string) when the user just presses enter.
        prompt: Prompt string appended to the text.
        fore_color: Prompt text color.
        back_color: Prompt background color.
        terminal: Terminal to use instead of the process-wide one.

    Returns:
        The line as typed, ``str(default)`` for an empty line when a default
        is given, or None at end of input.
    """
    t = terminal or get_terminal()
    if default is None:
        message = f"{text} {prompt}"
    else:
        message = f"{text} [{default}]{prompt}"
    color_write(message, fore_color, back_color, terminal=t)
    line = t.read_line()
    if line == "" and default is not None:
        return str(default)
    return line


def read_int(
    text: str,
    default: int | None = None,
    prompt: str = ": ",
    fore_color: Color = Color.YELLOW,
    back_color: Color = Color.BLACK,
    *,
    terminal: Terminal | None = None,
) -> int:
    """Show a prompt and read an integer.

    Bad input is not retried; use read_valid for that.

    Raises:
        FormatError: If the input is not an integer.
        EndOfInputError: If the input stream is exhausted.
    """
    line = read_line(text, default, prompt, fore_color, back_color, terminal=terminal)
    if line is None:
        raise EndOfInputError(f"End of input while reading '{text}'")
    return parse_int(line)


def read_valid(
    type_: type[T],
    text: str,
    validator: Callable[[T], bool] | None = None,
    error_message: str = "You entered bad value",
    prompt: str = ": ",
    fore_color: Color = Color.YELLOW,
    back_color: Color = Color.BLACK,
    *,
    converter: Callable[[str], T] | None = None,
    registry: ConverterRegistry | None = None,
    terminal: Terminal | None = None,
) -> T:
    """Read lines until one converts to ``type_`` and passes the validator.

    After each rejected line the error message is printed in red and the
    prompt is shown again. There is no retry limit.

    Args:
        type_: Result type, used to look up the converter.
        text: Text to show.
        validator: Predicate the converted value must satisfy. Accepts
            everything when omitted.
        error_message: Message shown after unparsable or rejected input.
        prompt: Prompt string appended to the text.
        fore_color: Prompt text color.
        back_color: Prompt background color.
        converter: Explicit converter, bypassing the registry.
        registry: Registry to resolve the converter from. Defaults to the
            package-wide registry.
        terminal: Terminal to use instead of the process-wide one.

    Returns:
        The first valid value.

    Raises:
        FormatError: If no converter is available for ``type_``. Raised
            before any input is read.
        EndOfInputError: If the input stream is exhausted.
    """
    if validator is None:
        validator = lambda _: True  # noqa: E731
    if converter is None:
        converter = (registry or get_registry()).get(type_)
    t = terminal or get_terminal()

    while True:
        color_write(text + prompt, fore_color, back_color, terminal=t)
        line = t.read_line()
        if line is None:
            raise EndOfInputError(f"End of input while reading '{text}'")
        # A validator that raises counts as a rejection, same as bad input.
        try:
            value = converter(line)
            accepted = validator(value)
        except Exception as exc:
            LOG.debug("input_rejected", prompt=text, reason="invalid", error=str(exc))
        else:
            if accepted:
                return value
            LOG.debug("input_rejected", prompt=text, reason="validator")
        write_error(error_message, terminal=t)
