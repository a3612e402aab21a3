"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass, field

import pytest

from console_menu.core.logging import uninstall_debug_log
from console_menu.ui.primitives import Ansi


@dataclass
class FakeTerminal:
    """Terminal driver double: scripted keys in, recorded output out."""
    keys: list = field(default_factory=list)
    rows: int = 24
    cols: int = 80
    written: str = ""
    flushed: list = field(default_factory=list)
    cursor_visible: bool = True
    _pending: str = ""

    def size(self):
        return self.rows, self.cols

    def read_key(self):
        if not self.keys:
            raise EOFError("no more scripted keys")
        return self.keys.pop(0)

    def write_str(self, text):
        self._pending += text

    def write_line(self, text):
        self._pending += text + "\n"

    def hide_cursor(self):
        self.cursor_visible = False
        self._pending += Ansi.HIDE_CURSOR

    def show_cursor(self):
        self.cursor_visible = True
        self._pending += Ansi.SHOW_CURSOR

    def clear_screen(self):
        self._pending += Ansi.CLEAR_HOME

    def flush(self):
        self.flushed.append(self._pending)
        self.written += self._pending
        self._pending = ""

    def frames(self) -> list[str]:
        """Flushed chunks that contain a drawn box."""
        return [chunk for chunk in self.flushed if "\x1b[48;5;" in chunk]


@pytest.fixture
def make_terminal():
    """Factory for FakeTerminal with scripted keys."""
    def _make(keys=(), rows=24, cols=80):
        return FakeTerminal(keys=list(keys), rows=rows, cols=cols)
    return _make


@pytest.fixture(autouse=True)
def no_debug_log():
    """Make sure a log installed by one test doesn't leak into the next."""
    yield
    uninstall_debug_log()


class Recorder:
    """Counts calls to generated actions."""

    def __init__(self):
        self.calls = []

    def action(self, name):
        def _act():
            self.calls.append(name)
        return _act


@pytest.fixture
def recorder():
    return Recorder()
