"""
Reusable visual building blocks.

Non-interactive layout and rendering for menu boxes.
"""

from .layout import (
    BOX_PADDING,
    DEFAULT_RESERVED_ROWS,
    MenuLayout,
    clamp,
    compute_layout,
    compute_max_width,
    compute_options_per_page,
    compute_page_count,
    page_bounds,
    page_indicator,
)
from .box import (
    apply_bold,
    apply_underline,
    switch_fg,
    box_row,
    blank_row,
)
from .renderer import (
    extra_lines,
    vertical_padding,
    horizontal_indent,
    render_rows,
    render_frame,
    frame_text,
)

__all__ = [
    # Layout
    "BOX_PADDING",
    "DEFAULT_RESERVED_ROWS",
    "MenuLayout",
    "clamp",
    "compute_layout",
    "compute_max_width",
    "compute_options_per_page",
    "compute_page_count",
    "page_bounds",
    "page_indicator",
    # Box
    "apply_bold",
    "apply_underline",
    "switch_fg",
    "box_row",
    "blank_row",
    # Renderer
    "extra_lines",
    "vertical_padding",
    "horizontal_indent",
    "render_rows",
    "render_frame",
    "frame_text",
]
