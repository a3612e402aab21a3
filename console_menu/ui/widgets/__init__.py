"""
Interactive reusable pieces.
"""

from .navigation import (
    NavigationState,
    NavOutcome,
    UP_KEYS,
    DOWN_KEYS,
    LEFT_KEYS,
    RIGHT_KEYS,
    CONFIRM_KEYS,
    EXIT_KEYS,
)
from .menu import (
    Menu,
    MenuOption,
)

__all__ = [
    "NavigationState",
    "NavOutcome",
    "UP_KEYS",
    "DOWN_KEYS",
    "LEFT_KEYS",
    "RIGHT_KEYS",
    "CONFIRM_KEYS",
    "EXIT_KEYS",
    "Menu",
    "MenuOption",
]
