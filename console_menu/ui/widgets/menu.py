"""
Interactive menu widget.

Shows a list of labeled actions in a colored box, paginated to fit the
terminal, and runs the chosen action when the user presses Enter.

Controls:
    ↓ ↑ ← → h j k l b w   move selection / change page
    Enter                 run the selected option
    Esc q Backspace       leave the menu
"""

from dataclasses import dataclass
from typing import Any, Callable

from ...core.config import MenuProps, default_props
from ...core.errors import EmptyMenuError
from ...core.logging import debug_log
from ..components.layout import MenuLayout, compute_layout
from ..components.renderer import frame_text
from ..primitives import Terminal
from .navigation import NavigationState, NavOutcome


def _noop():
    pass


@dataclass
class MenuOption:
    """
    A labeled action in a Menu.

    The action can be any zero-argument callable, including one that shows
    another Menu. It runs every time the option is confirmed.
    """
    label: str
    action: Callable[[], Any] = _noop

    def __call__(self):
        return self.action()

    @classmethod
    def default(cls) -> "MenuOption":
        return cls("exit", _noop)


def _as_option(item) -> MenuOption:
    if isinstance(item, MenuOption):
        return item
    label, action = item
    return MenuOption(label, action)


class Menu:
    """
    Paginated console menu.

    Build it with MenuOptions (or (label, action) pairs) and MenuProps, then
    call show(). show() can be called any number of times; each call is a
    fresh session sized to the terminal at that moment.
    """

    def __init__(self, options, props: MenuProps = None, terminal=None):
        self.options: list[MenuOption] = [_as_option(o) for o in options]
        if not self.options:
            raise EmptyMenuError()
        self.props = props if props is not None else default_props()
        self.terminal = terminal if terminal is not None else Terminal()
        self._term_size = self.terminal.size()
        self.layout = self._compute_layout()
        self.nav = NavigationState(self.layout)

    @property
    def labels(self) -> list[str]:
        return [o.label for o in self.options]

    @property
    def selected(self) -> MenuOption:
        return self.options[self.nav.selected_option]

    def _compute_layout(self) -> MenuLayout:
        rows, _ = self._term_size
        return compute_layout(
            self.labels,
            rows,
            title=self.props.title,
            message=self.props.message,
            reserved_rows=self.props.reserved_rows,
        )

    def render(self) -> str:
        """Text of the current frame."""
        return frame_text(self.labels, self.nav, self.layout, self.props, self._term_size)

    def _draw(self):
        self.terminal.write_str(self.render())
        self.terminal.flush()

    def _restore_terminal(self):
        self.terminal.clear_screen()
        self.terminal.show_cursor()
        self.terminal.flush()

    def show(self):
        """Run the menu until the user exits or (with exit_on_action) picks an option."""
        self._term_size = self.terminal.size()
        self.layout = self._compute_layout()
        self.nav = NavigationState(self.layout)
        rows, cols = self._term_size
        debug_log(
            f"MENU | show | options={self.layout.option_count} per_page={self.layout.options_per_page} "
            f"pages={self.layout.page_count} size={rows}x{cols}"
        )

        self.terminal.hide_cursor()
        # Scroll earlier output out of the way so the box doesn't overlap it
        self.terminal.write_str("\n" * max(0, rows - 1))

        try:
            self._draw()
            chosen = self._run_navigation()
        finally:
            self._restore_terminal()

        if chosen is not None:
            chosen()

    def _run_navigation(self) -> MenuOption | None:
        """Key loop. Returns the option to run after exit, or None."""
        while True:
            key = self.terminal.read_key()
            outcome = self.nav.handle_key(key)

            if outcome is NavOutcome.EXIT:
                debug_log(f"MENU | exit | key={key}")
                return None

            if outcome is NavOutcome.CONFIRM:
                option = self.selected
                if self.props.exit_on_action:
                    debug_log(f"MENU | action | option={self.nav.selected_option} label={option.label!r} | exiting")
                    return option
                debug_log(f"MENU | action | option={self.nav.selected_option} label={option.label!r}")
                # The action may call show() on this same menu, which resets these
                saved = (self._term_size, self.layout, self.nav)
                try:
                    option()
                finally:
                    self._term_size, self.layout, self.nav = saved
                # A nested menu leaves the cursor visible and the screen stale
                self.terminal.hide_cursor()

            self._draw()
