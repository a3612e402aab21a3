"""
Colored box rows.

Content is padded using its visible width first and decorated second, so
every row of a box occupies the same number of terminal columns no
matter which bold/color/underline sequences it carries.
"""

from ..primitives import Ansi, fg, bg, visible_len
from .layout import BOX_PADDING


def apply_bold(text: str) -> str:
    return f"{Ansi.BOLD}{text}{Ansi.BOLD_OFF}"


def apply_underline(text: str) -> str:
    return f"{Ansi.UNDERLINE}{text}{Ansi.UNDERLINE_OFF}"


def switch_fg(text: str, color: int, base_color: int) -> str:
    """Color text, then switch back to the box's base foreground."""
    return f"{fg(color)}{text}{fg(base_color)}"


def box_row(content: str, max_width: int, bg_color: int) -> str:
    """
    One background-filled row of the box.

    Args:
        content: Text for the row, may already contain ANSI decoration
        max_width: Widest visible content in the box
        bg_color: 8-bit background color

    Returns:
        "  " + content, right-padded to max_width + BOX_PADDING visible columns
    """
    pad = max(0, max_width + BOX_PADDING - 2 - visible_len(content))
    return f"{bg(bg_color)}  {content}{' ' * pad}{Ansi.BG_RESET}"


def blank_row(max_width: int, bg_color: int) -> str:
    return box_row("", max_width, bg_color)
