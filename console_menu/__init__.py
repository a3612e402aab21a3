"""
console-menu - paginated, keyboard-driven menus for the terminal.

    from console_menu import Menu, MenuOption, MenuProps

    menu = Menu([
        MenuOption("option 1", lambda: print("option one!")),
        MenuOption("option 2", lambda: print("option two!")),
    ], MenuProps(title="My Menu"))
    menu.show()

Menus that don't fit the terminal are paginated.
"""

from .core import (
    MenuError,
    EmptyMenuError,
    MenuConfigError,
    MenuProps,
    default_props,
    debug_log,
    install_debug_log,
)
from .ui.primitives import colors as color
from .ui.primitives import Terminal
from .ui.widgets import Menu, MenuOption


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        from importlib.metadata import version, PackageNotFoundError
        return version("console-menu")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "Menu",
    "MenuOption",
    "MenuProps",
    "default_props",
    "Terminal",
    "color",
    "MenuError",
    "EmptyMenuError",
    "MenuConfigError",
    "debug_log",
    "install_debug_log",
    "__version__",
]
