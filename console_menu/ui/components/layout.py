"""
Layout arithmetic for paginated menus.

Works out how many options fit on a page, how many pages there are, and
how wide the box has to be. Widths are visible character counts; ANSI
decoration never enters these numbers.
"""

from dataclasses import dataclass

from ..primitives import visible_len

# Rows kept free for borders, title block, footer and padding
DEFAULT_RESERVED_ROWS = 6

# "  " before the content plus two columns of right margin
BOX_PADDING = 4


def clamp(num: int, lo: int, hi: int) -> int:
    return max(lo, min(num, hi))


def compute_options_per_page(terminal_rows: int, option_count: int,
                             reserved_rows: int = DEFAULT_RESERVED_ROWS) -> int:
    """Options shown per page: rows minus chrome, at least 1, at most option_count."""
    return clamp(terminal_rows - reserved_rows, 1, option_count)


def compute_page_count(option_count: int, options_per_page: int) -> int:
    """Ceiling division of option_count by options_per_page."""
    return ((option_count - 1) // options_per_page) + 1


def compute_max_width(labels, title: str | None = None, message: str | None = None) -> int:
    """Widest visible text among the labels, title and message.

    Empty or None title/message are ignored.
    """
    widths = [visible_len(label) for label in labels]
    for extra in (title, message):
        if extra:
            widths.append(visible_len(extra))
    return max(widths, default=0)


def page_indicator(page: int, page_count: int) -> str:
    return f"Page {page + 1} of {page_count}"


def page_bounds(page: int, options_per_page: int, option_count: int) -> tuple[int, int]:
    """Inclusive (start, end) option indices of a page. The last page may be short."""
    start = page * options_per_page
    end = min(start + options_per_page, option_count) - 1
    return start, end


@dataclass(frozen=True)
class MenuLayout:
    """Page and width figures for one display session."""
    option_count: int
    options_per_page: int
    page_count: int
    max_width: int

    @property
    def box_width(self) -> int:
        """Visible width of every row in the box."""
        return self.max_width + BOX_PADDING

    @property
    def last_page(self) -> int:
        return self.page_count - 1

    def bounds(self, page: int) -> tuple[int, int]:
        return page_bounds(page, self.options_per_page, self.option_count)


def compute_layout(labels, terminal_rows: int, title: str | None = None,
                   message: str | None = None,
                   reserved_rows: int = DEFAULT_RESERVED_ROWS) -> MenuLayout:
    """Compute the full layout for a list of labels on a terminal of terminal_rows."""
    labels = list(labels)
    per_page = compute_options_per_page(terminal_rows, len(labels), reserved_rows)
    pages = compute_page_count(len(labels), per_page)
    max_width = compute_max_width(labels, title, message)
    if pages > 1:
        # The page indicator row lives in the box too
        max_width = max(max_width, len(page_indicator(pages - 1, pages)))
    return MenuLayout(
        option_count=len(labels),
        options_per_page=per_page,
        page_count=pages,
        max_width=max_width,
    )
