"""
Demo for console-menu.

Shows a themed menu with a nested submenu and enough options to paginate.
Run with: python -m console_menu --options 30
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .core import MenuConfigError, MenuProps, install_debug_log, install_from_env
from .ui.primitives import colors
from .ui.widgets import Menu, MenuOption


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-menu-demo",
        description="console-menu - interactive paginated menu demo",
    )
    parser.add_argument("--theme", type=Path, help="JSON theme file with MenuProps fields")
    parser.add_argument("--title", default="console-menu demo")
    parser.add_argument("--message", default="esc or q to exit")
    parser.add_argument("--options", type=int, default=12, help="number of filler options")
    parser.add_argument("--stay-open", action="store_true",
                        help="keep the menu open after an option runs")
    parser.add_argument("--log", type=Path, help="write a debug log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_menu(args, terminal=None) -> Menu:
    props = MenuProps.load(args.theme) if args.theme else MenuProps(
        bg_color=colors.DARK_GRAY,
        fg_color=colors.LIGHT_GRAY,
        title_color=colors.BLUE,
        selected_color=colors.WHITE,
        msg_color=colors.GRAY,
    )
    props = props.with_overrides(
        title=args.title,
        message=args.message,
        exit_on_action=not args.stay_open,
    )

    picks = []

    def pick(n):
        def action():
            picks.append(n)
            print(f"picked option {n} ({len(picks)} pick(s) so far)")
        return action

    nested = Menu(
        [MenuOption(name, pick(name)) for name in ("red", "green", "blue")],
        props.with_overrides(title="nested menu", exit_on_action=True),
        terminal=terminal,
    )

    options = [MenuOption("show nested menu", nested.show)]
    options += [MenuOption(f"option {i}", pick(i)) for i in range(1, max(0, args.options) + 1)]
    options.append(MenuOption.default())
    return Menu(options, props, terminal=terminal)


def main(argv=None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    if args.log:
        install_debug_log(args.log, version=__version__)
    else:
        install_from_env(version=__version__)

    try:
        menu = build_menu(args)
    except MenuConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    menu.show()
    return 0


def run():
    """Console script wrapper."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(0)


if __name__ == "__main__":
    run()
