"""
Exceptions raised by console menus.
"""


class MenuError(Exception):
    """Base class for menu errors."""
    pass


class EmptyMenuError(MenuError, ValueError):
    """Raised when a menu is built without any options."""

    def __init__(self):
        super().__init__("Menu options cannot be empty!")


class MenuConfigError(MenuError, ValueError):
    """Raised for invalid menu configuration (bad colors, unreadable theme)."""
    pass
