"""
Debug logging for console menus.

Menus draw over the whole screen, so diagnostics go to a file instead of
the terminal. Nothing is written unless a log has been installed.
"""

import os
import re
from datetime import datetime
from pathlib import Path

LOG_ENV_VAR = "CONSOLE_MENU_LOG"

_ANSI_RE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')

_active_log = None


class DebugLog:
    """Append-only log file with a session header and timestamped lines."""

    def __init__(self, log_path: Path, version: str = None):
        self.path = Path(log_path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.log_file = open(self.path, "a", encoding="utf-8")
        self.log_file.write(f"\n{'='*60}\n")
        version_str = f" v{version}" if version else ""
        self.log_file.write(f"Session started: {datetime.now().isoformat()}{version_str}\n")
        self.log_file.write(f"{'='*60}\n\n")
        self.log_file.flush()

    def write(self, message: str):
        clean = _ANSI_RE.sub('', message)
        timestamp = datetime.now().strftime("[%H:%M:%S]")
        for line in clean.splitlines() or [""]:
            stripped = line.rstrip()
            if stripped:
                self.log_file.write(f"{timestamp} {stripped}\n")
        self.log_file.flush()

    def close(self):
        if not self.log_file.closed:
            self.log_file.close()


def install_debug_log(log_path: Path, version: str = None) -> DebugLog:
    """Start logging to log_path. Replaces (and closes) any previous log."""
    global _active_log
    uninstall_debug_log()
    _active_log = DebugLog(log_path, version=version)
    return _active_log


def install_from_env(version: str = None) -> DebugLog | None:
    """Install a log when CONSOLE_MENU_LOG names a file."""
    path = os.environ.get(LOG_ENV_VAR)
    if not path:
        return None
    return install_debug_log(Path(path), version=version)


def uninstall_debug_log():
    global _active_log
    if _active_log is not None:
        _active_log.close()
        _active_log = None


def debug_log(message: str):
    """Log a debug message to file only (not shown to user)."""
    if _active_log is not None:
        _active_log.write(message)
    # No log installed (e.g., tests), silently ignore
