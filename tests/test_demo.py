"""Tests for the demo entry point."""

import json
import tempfile
from pathlib import Path

import pytest

from console_menu import color
from console_menu.demo import build_menu, build_parser, main
from console_menu.ui.primitives import KEY_DOWN, KEY_ENTER, KEY_ESC


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestBuildMenu:
    def test_options(self, make_terminal):
        args = build_parser().parse_args(["--options", "3"])
        menu = build_menu(args, terminal=make_terminal())
        assert menu.labels == ["show nested menu", "option 1", "option 2", "option 3", "exit"]
        assert menu.props.exit_on_action is True
        assert menu.props.title == "console-menu demo"

    def test_stay_open(self, make_terminal):
        args = build_parser().parse_args(["--stay-open"])
        assert build_menu(args, terminal=make_terminal()).props.exit_on_action is False

    def test_theme_file(self, temp_dir, make_terminal):
        theme = temp_dir / "theme.json"
        theme.write_text(json.dumps({"bg_color": "red", "title": "ignored"}))
        args = build_parser().parse_args(["--theme", str(theme), "--title", "Mine"])
        menu = build_menu(args, terminal=make_terminal())
        assert menu.props.bg_color == color.RED
        assert menu.props.title == "Mine"

    def test_pick_option(self, make_terminal, capsys):
        term = make_terminal([KEY_DOWN, KEY_ENTER])
        args = build_parser().parse_args(["--options", "2"])
        build_menu(args, terminal=term).show()
        assert "picked option 1" in capsys.readouterr().out

    def test_nested_menu(self, make_terminal, capsys):
        term = make_terminal([KEY_ENTER, KEY_DOWN, KEY_DOWN, KEY_ENTER, KEY_ESC])
        args = build_parser().parse_args(["--stay-open"])
        build_menu(args, terminal=term).show()
        assert "picked option blue" in capsys.readouterr().out


class TestMain:
    def test_bad_theme_exit_code(self, temp_dir, capsys):
        theme = temp_dir / "theme.json"
        theme.write_text("{broken")
        assert main(["--theme", str(theme)]) == 2
        assert "error:" in capsys.readouterr().err

    def test_wrongly_typed_theme_exit_code(self, temp_dir, capsys):
        theme = temp_dir / "theme.json"
        theme.write_text(json.dumps({"bg_color": 8, "exit_on_action": "no"}))
        assert main(["--theme", str(theme)]) == 2
        assert "exit_on_action" in capsys.readouterr().err
