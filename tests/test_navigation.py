"""
Tests for the menu navigation state machine.

Covers within-page movement, page wrapping, page jumps, boundaries and
the key bindings for each direction.
"""

import itertools

import pytest

from console_menu.ui.components.layout import compute_layout
from console_menu.ui.primitives import (
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_ENTER,
    KEY_ESC,
    KEY_BACKSPACE,
    KEY_TAB,
    KEY_UNKNOWN,
)
from console_menu.ui.widgets.navigation import NavigationState, NavOutcome


def make_nav(option_count=10, rows=10):
    """10 options, 10 rows -> 4 per page, pages [0-3], [4-7], [8-9]."""
    layout = compute_layout([f"opt {i}" for i in range(option_count)], rows)
    return NavigationState(layout)


def assert_in_page(nav):
    assert nav.page_start <= nav.selected_option <= nav.page_end
    assert nav.page_end - nav.page_start + 1 <= nav.layout.options_per_page
    assert (nav.page_start, nav.page_end) == nav.layout.bounds(nav.selected_page)


class TestInitialState:
    def test_starts_on_first_option(self):
        nav = make_nav()
        assert nav.position == (0, 0)
        assert (nav.page_start, nav.page_end) == (0, 3)


class TestUpDown:
    """Tests for Up/Down movement."""

    def test_down_four_times_crosses_page(self):
        nav = make_nav()
        for _ in range(4):
            nav.handle_key(KEY_DOWN)
        assert nav.position == (1, 4)

    def test_up_from_page_start_wraps_to_previous_page_end(self):
        nav = make_nav()
        nav.set_page(1)
        nav.handle_key(KEY_UP)
        assert nav.position == (0, 3)

    def test_up_on_first_option_is_noop(self):
        nav = make_nav()
        assert nav.handle_key(KEY_UP) is NavOutcome.REDRAW
        assert nav.position == (0, 0)

    def test_down_on_last_option_is_noop(self):
        nav = make_nav()
        nav.set_page(2)
        nav.handle_key(KEY_DOWN)
        assert nav.position == (2, 9)
        nav.handle_key(KEY_DOWN)
        assert nav.position == (2, 9)

    def test_vim_keys(self):
        nav = make_nav()
        nav.handle_key('j')
        assert nav.position == (0, 1)
        nav.handle_key('k')
        assert nav.position == (0, 0)

    def test_round_trip_from_non_boundary_states(self):
        """Up then Down (and Down then Up) returns to the same position."""
        nav = make_nav()
        for page in range(nav.layout.page_count):
            start, end = nav.layout.bounds(page)
            for option in range(start, end + 1):
                if (page, option) in ((0, 0), (2, 9)):
                    continue
                for first, second in ((KEY_UP, KEY_DOWN), (KEY_DOWN, KEY_UP)):
                    nav.set_page(page)
                    nav.selected_option = option
                    nav.handle_key(first)
                    nav.handle_key(second)
                    assert nav.position == (page, option)


class TestPageJumps:
    """Tests for Left/Right page changes."""

    def test_right_selects_first_option_of_next_page(self):
        nav = make_nav()
        nav.handle_key(KEY_DOWN)
        nav.handle_key(KEY_RIGHT)
        assert nav.position == (1, 4)

    def test_left_selects_first_option_of_previous_page(self):
        nav = make_nav()
        nav.set_page(2)
        nav.handle_key(KEY_DOWN)
        nav.handle_key(KEY_LEFT)
        assert nav.position == (1, 4)

    def test_left_on_first_page_is_noop(self):
        nav = make_nav()
        nav.handle_key(KEY_DOWN)
        nav.handle_key(KEY_LEFT)
        assert nav.position == (0, 1)

    def test_right_on_last_page_is_noop(self):
        nav = make_nav()
        nav.set_page(2)
        nav.handle_key(KEY_DOWN)
        nav.handle_key(KEY_RIGHT)
        assert nav.position == (2, 9)

    @pytest.mark.parametrize("key", ['l', 'w'])
    def test_right_aliases(self, key):
        nav = make_nav()
        nav.handle_key(key)
        assert nav.selected_page == 1

    @pytest.mark.parametrize("key", ['h', 'b'])
    def test_left_aliases(self, key):
        nav = make_nav()
        nav.set_page(2)
        nav.handle_key(key)
        assert nav.selected_page == 1

    def test_short_last_page(self):
        nav = make_nav()
        nav.set_page(2)
        assert (nav.page_start, nav.page_end) == (8, 9)


class TestOutcomes:
    """Tests for confirm/exit/unknown keys."""

    def test_enter_confirms(self):
        assert make_nav().handle_key(KEY_ENTER) is NavOutcome.CONFIRM

    @pytest.mark.parametrize("key", [KEY_ESC, 'q', KEY_BACKSPACE])
    def test_exit_keys(self, key):
        assert make_nav().handle_key(key) is NavOutcome.EXIT

    @pytest.mark.parametrize("key", [KEY_UNKNOWN, KEY_TAB, 'x', 'Q', '1'])
    def test_other_keys_are_noops(self, key):
        nav = make_nav()
        nav.handle_key(KEY_DOWN)
        assert nav.handle_key(key) is NavOutcome.REDRAW
        assert nav.position == (0, 1)


class TestInvariant:
    def test_selection_always_within_page(self):
        """Every key sequence up to length 6 keeps the selection on its page."""
        keys = [KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT]
        for seq in itertools.product(keys, repeat=6):
            nav = make_nav()
            for key in seq:
                nav.handle_key(key)
                assert_in_page(nav)

    def test_single_option_menu(self):
        nav = make_nav(option_count=1)
        for key in (KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT):
            nav.handle_key(key)
            assert nav.position == (0, 0)
