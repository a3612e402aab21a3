"""
Menu configuration.

MenuProps holds the title, footer message, exit behaviour and colors a
Menu is built with. Themes can be kept in a JSON file and loaded with
MenuProps.load().
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

from ..ui.components.layout import DEFAULT_RESERVED_ROWS
from ..ui.primitives.colors import GRAY, LIGHT_GRAY, WHITE, resolve_color
from .errors import MenuConfigError

COLOR_FIELDS = ("bg_color", "fg_color", "title_color", "selected_color", "msg_color")


@dataclass(frozen=True)
class MenuProps:
    """
    Configuration passed to a Menu on creation.

    Colors are 8-bit values (0-255). The optional title/selected/msg colors
    fall back to fg_color when None. Pass an empty title or message to
    leave it out.
    """
    title: str = ""
    message: str = ""
    exit_on_action: bool = True
    bg_color: int = GRAY
    fg_color: int = WHITE
    title_color: int | None = None
    selected_color: int | None = None
    msg_color: int | None = LIGHT_GRAY
    reserved_rows: int = DEFAULT_RESERVED_ROWS

    def __post_init__(self):
        for name in COLOR_FIELDS:
            value = getattr(self, name)
            if value is None and name in ("bg_color", "fg_color"):
                raise MenuConfigError(f"{name} is required")
            try:
                resolved = resolve_color(value)
            except ValueError as e:
                raise MenuConfigError(f"{name}: {e}") from e
            # frozen dataclass; normalise palette names to ints
            object.__setattr__(self, name, resolved)
        rows = self.reserved_rows
        if not isinstance(rows, int) or isinstance(rows, bool) or rows < 0:
            raise MenuConfigError(f"reserved_rows must be an int >= 0, got {rows!r}")
        if not isinstance(self.exit_on_action, bool):
            raise MenuConfigError(f"exit_on_action must be true or false, got {self.exit_on_action!r}")
        for name in ("title", "message"):
            value = getattr(self, name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise MenuConfigError(f"{name} must be a string, got {value!r}")
            object.__setattr__(self, name, value)

    @property
    def resolved_title_color(self) -> int:
        return self.fg_color if self.title_color is None else self.title_color

    @property
    def resolved_selected_color(self) -> int:
        return self.fg_color if self.selected_color is None else self.selected_color

    @property
    def resolved_msg_color(self) -> int:
        return self.fg_color if self.msg_color is None else self.msg_color

    def with_overrides(self, **changes) -> "MenuProps":
        """Copy with some fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict) -> "MenuProps":
        """Build props from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def load(cls, path: Path) -> "MenuProps":
        """Load a theme file. Missing file gives the defaults."""
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            raise MenuConfigError(f"Could not read theme {path}: {e}") from e
        if not isinstance(data, dict):
            raise MenuConfigError(f"Theme {path} must contain a JSON object")
        return cls.from_dict(data)

    def save(self, path: Path):
        """Save props as a theme file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)


def default_props() -> MenuProps:
    """The default configuration: gray box, white text, exits on action."""
    return MenuProps()
