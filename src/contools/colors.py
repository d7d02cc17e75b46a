"""The sixteen classic console colors and their Rich equivalents."""

from enum import Enum

from rich.style import Style


class Color(str, Enum):
    """Console colors.

    Values are Rich standard color names, so a member can be handed to Rich
    directly. GRAY is ANSI "white" (the default light gray of most terminals)
    and WHITE is the bright variant.
    """

    BLACK = "black"
    DARK_BLUE = "blue"
    DARK_GREEN = "green"
    DARK_CYAN = "cyan"
    DARK_RED = "red"
    DARK_MAGENTA = "magenta"
    DARK_YELLOW = "yellow"
    GRAY = "white"
    DARK_GRAY = "bright_black"
    BLUE = "bright_blue"
    GREEN = "bright_green"
    CYAN = "bright_cyan"
    RED = "bright_red"
    MAGENTA = "bright_magenta"
    YELLOW = "bright_yellow"
    WHITE = "bright_white"

    @classmethod
    def parse(cls, name: str) -> "Color":
        """Look up a color by member name, case-insensitively.

        Accepts "dark_blue", "DarkBlue" or "dark-blue" alike. A member is
        returned unchanged; its value is a Rich color name, not a member name.

        Raises:
            ValueError: If no color has that name.
        """
        if isinstance(name, cls):
            return name
        key = name.strip().replace("-", "_").upper()
        if key in cls.__members__:
            return cls.__members__[key]
        compact = key.replace("_", "")
        for member_name, member in cls.__members__.items():
            if member_name.replace("_", "") == compact:
                return member
        available = ", ".join(m.lower() for m in cls.__members__)
        raise ValueError(f"Unknown color '{name}'. Available colors: {available}")


def style_for(fore_color: Color, back_color: Color) -> Style:
    """Build the Rich style for a foreground/background pair."""
    return Style(color=fore_color.value, bgcolor=back_color.value)
