"""contools - Console interaction helpers.

Small helpers for interactive console programs:
- Colored writes that leave the terminal's colors as they found them
- Prompted line and integer reads with bracketed defaults
- Retry-until-valid reads with pluggable string converters
- Recursive dump printing of values and nested collections

Example:
    >>> from contools import Color, color_write_line, dump, read_line, read_valid
    >>> color_write_line("Welcome", Color.GREEN, Color.BLACK)
    >>> name = read_line("Name", default="guest")
    >>> age = read_valid(int, "Age", validator=lambda v: v > 0)
    >>> dump([1, [2, 3], 4])
"""

from contools.colors import Color
from contools.config import ConToolsSettings, get_settings
from contools.console import (
    color_write,
    color_write_line,
    write_error,
    write_message,
    write_question,
)
from contools.converters import ConverterRegistry, get_converter, register_converter
from contools.dump import dump, walk
from contools.exceptions import ConToolsError, EndOfInputError, FormatError
from contools.prompts import read_int, read_line, read_valid
from contools.terminal import Terminal, get_terminal, set_terminal

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Terminal
    "Color",
    "Terminal",
    "get_terminal",
    "set_terminal",
    # Output
    "color_write",
    "color_write_line",
    "write_message",
    "write_error",
    "write_question",
    # Input
    "read_line",
    "read_int",
    "read_valid",
    # Converters
    "ConverterRegistry",
    "get_converter",
    "register_converter",
    # Dump
    "dump",
    "walk",
    # Configuration
    "ConToolsSettings",
    "get_settings",
    # Exceptions
    "ConToolsError",
    "FormatError",
    "EndOfInputError",
]
