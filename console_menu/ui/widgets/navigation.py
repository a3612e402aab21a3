"""
Selection and page navigation for paginated menus.

Keys move the selection within a page, step across page boundaries, or
jump whole pages. The selection always stays on the current page.
"""

from dataclasses import dataclass
from enum import Enum

from ..components.layout import MenuLayout
from ..primitives import (
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_ENTER,
    KEY_ESC,
    KEY_BACKSPACE,
)

UP_KEYS = frozenset({KEY_UP, 'k'})
DOWN_KEYS = frozenset({KEY_DOWN, 'j'})
LEFT_KEYS = frozenset({KEY_LEFT, 'h', 'b'})
RIGHT_KEYS = frozenset({KEY_RIGHT, 'l', 'w'})
CONFIRM_KEYS = frozenset({KEY_ENTER})
EXIT_KEYS = frozenset({KEY_ESC, 'q', KEY_BACKSPACE})


class NavOutcome(Enum):
    REDRAW = "redraw"
    CONFIRM = "confirm"
    EXIT = "exit"


@dataclass
class NavigationState:
    """Current page and selected option of a menu."""
    layout: MenuLayout
    selected_option: int = 0
    selected_page: int = 0
    page_start: int = 0
    page_end: int = 0

    def __post_init__(self):
        self.set_page(self.selected_page)

    @property
    def position(self) -> tuple[int, int]:
        """(page, option) pair."""
        return self.selected_page, self.selected_option

    def set_page(self, page: int):
        """Show page and select its first option."""
        self.selected_page = page
        self.page_start, self.page_end = self.layout.bounds(page)
        self.selected_option = self.page_start

    def move_up(self):
        if self.selected_option > self.page_start:
            self.selected_option -= 1
        elif self.selected_page > 0:
            self.set_page(self.selected_page - 1)
            # Keep the cursor at the visual bottom when wrapping back
            self.selected_option = self.page_end

    def move_down(self):
        if self.selected_option < self.page_end:
            self.selected_option += 1
        elif self.selected_page < self.layout.last_page:
            self.set_page(self.selected_page + 1)

    def prev_page(self):
        if self.selected_page > 0:
            self.set_page(self.selected_page - 1)

    def next_page(self):
        if self.selected_page < self.layout.last_page:
            self.set_page(self.selected_page + 1)

    def handle_key(self, key) -> NavOutcome:
        """Apply a key. Unknown keys change nothing but still ask for a redraw."""
        if key in UP_KEYS:
            self.move_up()
        elif key in DOWN_KEYS:
            self.move_down()
        elif key in LEFT_KEYS:
            self.prev_page()
        elif key in RIGHT_KEYS:
            self.next_page()
        elif key in EXIT_KEYS:
            return NavOutcome.EXIT
        elif key in CONFIRM_KEYS:
            return NavOutcome.CONFIRM
        return NavOutcome.REDRAW
