"""
Keyboard input handling for console menus.

Reads one key at a time in raw mode and classifies it.
"""

import sys
import os
from contextlib import contextmanager

# Platform-specific imports
if os.name == 'nt':
    import msvcrt
else:
    import fcntl
    import termios
    import tty
    import select


@contextmanager
def raw_terminal():
    """Context manager for raw terminal mode (Unix only, no-op on Windows)."""
    if os.name == 'nt':
        yield None
    else:
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield fd
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def read_escape_sequence(fd) -> str:
    """
    Read remaining characters of an escape sequence after ESC was detected.

    Call this after reading \\x1b to get the full sequence.
    Returns the extra characters (not including the initial ESC).
    Unix only - Windows handles escape sequences differently.
    """
    if os.name == 'nt':
        return ''

    flags = fcntl.fcntl(fd, fcntl.F_GETFL)
    fcntl.fcntl(fd, fcntl.F_SETFL, flags | os.O_NONBLOCK)
    try:
        # Wait for escape sequence bytes (returns immediately if already available)
        select.select([sys.stdin], [], [], 0.005)
        extra = ''
        try:
            extra = sys.stdin.read(10) or ''
        except (IOError, BlockingIOError):
            pass
        return extra
    finally:
        fcntl.fcntl(fd, fcntl.F_SETFL, flags)


# Special key constants
KEY_UP = "KEY_UP"
KEY_DOWN = "KEY_DOWN"
KEY_LEFT = "KEY_LEFT"
KEY_RIGHT = "KEY_RIGHT"
KEY_ENTER = "KEY_ENTER"
KEY_ESC = "KEY_ESC"
KEY_BACKSPACE = "KEY_BACKSPACE"
KEY_TAB = "KEY_TAB"
KEY_SPACE = "KEY_SPACE"
KEY_UNKNOWN = "KEY_UNKNOWN"  # Unrecognized escape sequence or byte

UNIX_ESCAPE_CODES = {
    '[A': KEY_UP,
    '[B': KEY_DOWN,
    '[C': KEY_RIGHT,
    '[D': KEY_LEFT,
    'OA': KEY_UP,
    'OB': KEY_DOWN,
    'OC': KEY_RIGHT,
    'OD': KEY_LEFT,
}

WINDOWS_KEY_CODES = {
    b'H': KEY_UP,
    b'P': KEY_DOWN,
    b'K': KEY_LEFT,
    b'M': KEY_RIGHT,
}

UNIX_SPECIAL_CHARS = {
    '\r': KEY_ENTER,
    '\n': KEY_ENTER,
    '\x7f': KEY_BACKSPACE,
    '\x08': KEY_BACKSPACE,
    '\t': KEY_TAB,
    ' ': KEY_SPACE,
}

WINDOWS_SPECIAL_CHARS = {
    b'\r': KEY_ENTER,
    b'\x08': KEY_BACKSPACE,
    b'\t': KEY_TAB,
    b' ': KEY_SPACE,
}


def classify_unix(ch: str, extra: str = '') -> str:
    """
    Map a character read on Unix (plus any escape sequence tail) to a key.

    Args:
        ch: First character read
        extra: Characters following an ESC, '' for a standalone ESC

    Returns:
        KEY_* constant or the printable character itself
    """
    if ch in UNIX_SPECIAL_CHARS:
        return UNIX_SPECIAL_CHARS[ch]

    if ch == '\x1b':
        if not extra:
            return KEY_ESC
        return UNIX_ESCAPE_CODES.get(extra, KEY_UNKNOWN)

    # Ctrl-C arrives as a byte in raw mode; surface it like the shell would
    if ch == '\x03':
        raise KeyboardInterrupt

    if not ch or not ch.isprintable():
        return KEY_UNKNOWN
    return ch


def getch() -> str:
    """
    Read a single key from stdin without echo.

    Returns a KEY_* constant for arrows, Enter, Esc, Backspace, Tab and
    Space, the character for other printable keys, and KEY_UNKNOWN for
    anything else.
    """
    if os.name == 'nt':
        ch = msvcrt.getch()

        # Arrow keys send two bytes: 0xe0 or 0x00 followed by key code
        if ch in (b'\xe0', b'\x00'):
            key_code = msvcrt.getch()
            return WINDOWS_KEY_CODES.get(key_code, KEY_UNKNOWN)

        if ch == b'\x1b':
            if msvcrt.kbhit():
                msvcrt.getch()  # Consume [
                if msvcrt.kbhit():
                    msvcrt.getch()  # Consume direction char
                return KEY_UNKNOWN
            return KEY_ESC

        if ch in WINDOWS_SPECIAL_CHARS:
            return WINDOWS_SPECIAL_CHARS[ch]

        if ch == b'\x03':
            raise KeyboardInterrupt

        decoded = ch.decode('utf-8', errors='ignore')
        return decoded if decoded and decoded.isprintable() else KEY_UNKNOWN

    with raw_terminal() as fd:
        ch = sys.stdin.read(1)
        if not ch:
            raise EOFError("stdin closed while waiting for a key")
        extra = read_escape_sequence(fd) if ch == '\x1b' else ''
        return classify_unix(ch, extra)
