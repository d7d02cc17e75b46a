"""Colored terminal output.

Every colored write saves the terminal's current colors, switches to the
requested pair, writes, then puts the previous pair back. Callers never see
the color change.
"""

from __future__ import annotations

from contools.colors import Color
from contools.terminal import Terminal, get_terminal


def color_write(
    text: str,
    fore_color: Color,
    back_color: Color,
    newline: bool = False,
    *,
    terminal: Terminal | None = None,
) -> None:
    """Write text in the given colors and restore the previous colors."""
    t = terminal or get_terminal()
    with t.colors(fore_color, back_color):
        t.write(text, newline=newline)


def color_write_line(
    text: str,
    fore_color: Color,
    back_color: Color,
    *,
    terminal: Terminal | None = None,
) -> None:
    """Alias for color_write with a trailing newline."""
    color_write(text, fore_color, back_color, True, terminal=terminal)


def write_message(text: str, newline: bool = True, *, terminal: Terminal | None = None) -> None:
    """Print a neutral message (gray on black)."""
    color_write(text, Color.GRAY, Color.BLACK, newline, terminal=terminal)


def write_error(text: str, newline: bool = True, *, terminal: Terminal | None = None) -> None:
    """Print an error message (red on black)."""
    color_write(text, Color.RED, Color.BLACK, newline, terminal=terminal)


def write_question(
    text: str,
    prompt: str = ": ",
    newline: bool = False,
    *,
    terminal: Terminal | None = None,
) -> None:
    """Print a question (yellow on black), leaving the cursor on the same line."""
    color_write(text + prompt, Color.YELLOW, Color.BLACK, newline, terminal=terminal)
