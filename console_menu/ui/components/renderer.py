"""
Frame rendering for paginated menus.

Pure functions: given the labels, navigation state, layout and props they
return the text of one frame. Nothing here touches the terminal.
"""

from ..primitives import Ansi, fg
from .box import apply_bold, apply_underline, blank_row, box_row, switch_fg
from .layout import page_indicator


def extra_lines(props) -> int:
    """Non-option rows in the box: two blank bars, title block, footer."""
    lines = 2
    if props.title:
        lines += 2
    if props.message:
        lines += 1
    return lines


def vertical_padding(terminal_rows: int, layout, props) -> int:
    return max(0, terminal_rows // 2 - (layout.options_per_page + extra_lines(props)) // 2)


def horizontal_indent(terminal_cols: int, layout) -> int:
    return max(0, terminal_cols // 2 - layout.box_width // 2)


def render_rows(labels, state, layout, props) -> list[str]:
    """
    Box rows for the current page, top to bottom, without indentation.

    Every row has a visible width of layout.box_width.
    """
    width = layout.max_width
    bg_color = props.bg_color
    fg_color = props.fg_color
    rows = [blank_row(width, bg_color)]

    if props.title:
        title = apply_underline(apply_bold(props.title))
        rows.append(box_row(switch_fg(title, props.resolved_title_color, fg_color), width, bg_color))
        rows.append(blank_row(width, bg_color))

    for idx in range(state.page_start, state.page_end + 1):
        label = labels[idx]
        if idx == state.selected_option:
            label = switch_fg(apply_bold(label), props.resolved_selected_color, fg_color)
        rows.append(box_row(label, width, bg_color))

    if layout.page_count > 1:
        rows.append(box_row(page_indicator(state.selected_page, layout.page_count), width, bg_color))

    if props.message:
        rows.append(blank_row(width, bg_color))
        message = switch_fg(props.message, props.resolved_msg_color, fg_color)
        rows.append(box_row(message, width, bg_color))

    rows.append(blank_row(width, bg_color))
    return rows


def render_frame(labels, state, layout, props, terminal_size: tuple[int, int]) -> list[str]:
    """Rows for the current state, indented to center the box horizontally."""
    _, cols = terminal_size
    indent = " " * horizontal_indent(cols, layout)
    return [f"{indent}{row}" for row in render_rows(labels, state, layout, props)]


def frame_text(labels, state, layout, props, terminal_size: tuple[int, int]) -> str:
    """
    Full text of one frame, ready for a single write.

    Clears the screen, pads vertically, sets the base foreground for the
    box and resets it after the last row.
    """
    rows, _ = terminal_size
    lines = render_frame(labels, state, layout, props, terminal_size)
    pad = "\n" * vertical_padding(rows, layout, props)
    body = "\n".join(lines)
    return f"{Ansi.CLEAR_HOME}{pad}{fg(props.fg_color)}{body}\n{Ansi.FG_RESET}"
