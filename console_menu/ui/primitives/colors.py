"""
8-bit color palette and ANSI sequence builders.

Values 0-15 vary with the user's terminal theme; everything else is a
fixed xterm-256 color.
"""

WHITE = 15
LIGHT_GRAY = 7
GRAY = 8
BLUE = 32
GREEN = 35
PURPLE = 99
RED = 160
ORANGE = 208
YELLOW = 220
BLACK = 233
DARK_GRAY = 236

# Lookup used by theme files ("bg_color": "dark_gray")
PALETTE = {
    "white": WHITE,
    "light_gray": LIGHT_GRAY,
    "gray": GRAY,
    "blue": BLUE,
    "green": GREEN,
    "purple": PURPLE,
    "red": RED,
    "orange": ORANGE,
    "yellow": YELLOW,
    "black": BLACK,
    "dark_gray": DARK_GRAY,
}


class Ansi:
    CLEAR_HOME = "\x1b[H\x1b[J\x1b[H"
    BOLD = "\x1b[1m"
    BOLD_OFF = "\x1b[22m"
    UNDERLINE = "\x1b[4m"
    UNDERLINE_OFF = "\x1b[24m"
    FG_RESET = "\x1b[39m"
    BG_RESET = "\x1b[49m"
    HIDE_CURSOR = "\x1b[?25l"
    SHOW_CURSOR = "\x1b[?25h"


def fg(color: int) -> str:
    return f"\x1b[38;5;{color}m"


def bg(color: int) -> str:
    return f"\x1b[48;5;{color}m"


def is_valid_color(value) -> bool:
    """True for an int in the 8-bit range (bools are rejected)."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def resolve_color(value):
    """Turn a palette name or int into an 8-bit color value.

    Returns None for None. Unknown names and out-of-range values raise ValueError.
    """
    if value is None:
        return None
    if isinstance(value, str):
        key = value.strip().lower().replace(" ", "_").replace("-", "_")
        if key in PALETTE:
            return PALETTE[key]
        if key.isdigit():
            value = int(key)
        else:
            raise ValueError(f"unknown color name: {value!r}")
    if not is_valid_color(value):
        raise ValueError(f"color must be 0-255, got {value!r}")
    return value
