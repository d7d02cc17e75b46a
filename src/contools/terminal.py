"""The terminal: output console, input stream and ambient colors.

A :class:`Terminal` plays the part of the process console. Its
``foreground``/``background`` attributes are the "current colors" that plain
writes use, and colored writes temporarily swap them through
:meth:`Terminal.colors`.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from rich.console import Console

from contools.colors import Color, style_for


class Terminal:
    """Console output, line input and the ambient color pair.

    Args:
        console: Rich console used for output. Defaults to a stdout console.
        stdin: Text stream to read lines from. Defaults to ``sys.stdin``,
            looked up on every read.
        foreground: Initial foreground color.
        background: Initial background color.
    """

    def __init__(
        self,
        console: Console | None = None,
        stdin: TextIO | None = None,
        foreground: Color = Color.GRAY,
        background: Color = Color.BLACK,
    ) -> None:
        self.console = console or Console()
        self._stdin = stdin
        self.foreground = foreground
        self.background = background
        self._lock = threading.RLock()

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @contextmanager
    def colors(self, fore_color: Color, back_color: Color) -> Iterator[None]:
        """Switch the ambient colors for the duration of the block.

        The previous pair is restored on exit. Assignment is skipped for a
        color that is already current. The terminal lock is held throughout,
        so concurrent colored writes cannot interleave their save/restore.
        """
        with self._lock:
            fore, back = self.foreground, self.background
            if fore != fore_color:
                self.foreground = fore_color
            if back != back_color:
                self.background = back_color
            try:
                yield
            finally:
                if fore != fore_color:
                    self.foreground = fore
                if back != back_color:
                    self.background = back

    def write(self, text: str, newline: bool = False) -> None:
        """Write text literally in the current colors."""
        with self._lock:
            self.console.print(
                text,
                style=style_for(self.foreground, self.background),
                end="\n" if newline else "",
                markup=False,
                emoji=False,
                highlight=False,
                soft_wrap=True,
            )

    def read_line(self) -> str | None:
        """Read one line without its terminator.

        Returns:
            The line, or None if the input stream is exhausted.
        """
        line = self.stdin.readline()
        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line


# Global terminal instance
_terminal: Terminal | None = None


def get_terminal() -> Terminal:
    """Get or create the process-wide terminal from settings."""
    global _terminal
    if _terminal is None:
        from contools.config import get_settings

        settings = get_settings()
        _terminal = Terminal(
            console=Console(**settings.get_console_config()),
            foreground=settings.foreground,
            background=settings.background,
        )
    return _terminal


def set_terminal(terminal: Terminal) -> None:
    """Replace the process-wide terminal."""
    global _terminal
    _terminal = terminal


def reset_terminal() -> None:
    """Reset the process-wide terminal (useful for testing)."""
    global _terminal
    _terminal = None
