"""
Terminal I/O primitives.

Low-level terminal control, keyboard input, and color handling.
"""

from .terminal import (
    Terminal,
    strip_ansi,
    char_width,
    visible_len,
    get_terminal_size,
    FALLBACK_SIZE,
)
from .keyboard_input import (
    raw_terminal,
    getch,
    classify_unix,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_ENTER,
    KEY_ESC,
    KEY_BACKSPACE,
    KEY_TAB,
    KEY_SPACE,
    KEY_UNKNOWN,
)
from .colors import (
    Ansi,
    PALETTE,
    fg,
    bg,
    is_valid_color,
    resolve_color,
)

__all__ = [
    # Terminal
    "Terminal",
    "strip_ansi",
    "char_width",
    "visible_len",
    "get_terminal_size",
    "FALLBACK_SIZE",
    # Keyboard input
    "raw_terminal",
    "getch",
    "classify_unix",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_ENTER",
    "KEY_ESC",
    "KEY_BACKSPACE",
    "KEY_TAB",
    "KEY_SPACE",
    "KEY_UNKNOWN",
    # Colors
    "Ansi",
    "PALETTE",
    "fg",
    "bg",
    "is_valid_color",
    "resolve_color",
]
