"""
Terminal driver for console menus.

Handles terminal size, buffered output, cursor visibility and key reads.
"""

import re
import shutil
import sys
import unicodedata
from io import StringIO

from .colors import Ansi
from .keyboard_input import getch

ANSI_PATTERN = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')

FALLBACK_SIZE = (24, 80)  # rows, cols


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub('', text)


def char_width(ch: str) -> int:
    """Terminal cells taken by one character."""
    o = ord(ch)
    if 0x20 <= o <= 0x7E:
        return 1
    if o < 0x20 or o == 0x7F:
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    # Combining marks draw over the previous cell
    if unicodedata.category(ch).startswith("M"):
        return 0
    return 1


def visible_len(text: str) -> int:
    """Width of text as it appears on screen, in terminal cells."""
    return sum(char_width(ch) for ch in strip_ansi(text))


def get_terminal_size() -> tuple[int, int]:
    """Get terminal size as (rows, cols), with fallback."""
    size = shutil.get_terminal_size(fallback=(FALLBACK_SIZE[1], FALLBACK_SIZE[0]))
    return size.lines, size.columns


class Terminal:
    """
    Buffered terminal output plus single key reads.

    Writes accumulate in memory and reach the real stream in one write on
    flush(), so a frame never appears half drawn.
    """

    def __init__(self, stream=None):
        # Use sys.__stdout__ to bypass any wrappers (like the debug log tee)
        if stream is None:
            stream = sys.__stdout__ if sys.__stdout__ else sys.stdout
        self._stream = stream
        self._buf = StringIO()

    def size(self) -> tuple[int, int]:
        return get_terminal_size()

    def read_key(self) -> str:
        return getch()

    def write_str(self, text: str):
        self._buf.write(text)

    def write_line(self, text: str):
        self._buf.write(text)
        self._buf.write("\n")

    def hide_cursor(self):
        self._buf.write(Ansi.HIDE_CURSOR)

    def show_cursor(self):
        self._buf.write(Ansi.SHOW_CURSOR)

    def clear_screen(self):
        self._buf.write(Ansi.CLEAR_HOME)

    def flush(self):
        content = self._buf.getvalue()
        self._buf = StringIO()
        if content:
            self._stream.write(content)
        self._stream.flush()
