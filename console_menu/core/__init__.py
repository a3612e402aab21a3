"""
Core utilities for console menus.

Configuration, errors and debug logging.
"""

from .errors import (
    MenuError,
    EmptyMenuError,
    MenuConfigError,
)

from .config import (
    MenuProps,
    default_props,
    DEFAULT_RESERVED_ROWS,
)

from .logging import (
    DebugLog,
    debug_log,
    install_debug_log,
    install_from_env,
    uninstall_debug_log,
)

__all__ = [
    # Errors
    "MenuError",
    "EmptyMenuError",
    "MenuConfigError",
    # Config
    "MenuProps",
    "default_props",
    "DEFAULT_RESERVED_ROWS",
    # Logging
    "DebugLog",
    "debug_log",
    "install_debug_log",
    "install_from_env",
    "uninstall_debug_log",
]
