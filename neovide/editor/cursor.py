"""The editor cursor and the modes that change its appearance."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from neovide.editor.grid import GridCell, default_cell
from neovide.editor.style import Color, Colors, Style


class CursorShape(Enum):
    BLOCK = "block"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def from_type_name(cls, name: str) -> CursorShape | None:
        """The shape with this name, or None if the name is unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass
class CursorMode:
    """Cursor settings reported by Neovim for one editor mode."""

    shape: CursorShape | None = None
    style_id: int | None = None
    cell_percentage: float | None = None
    blinkwait: int | None = None
    blinkon: int | None = None
    blinkoff: int | None = None


def _require(color: Color | None, name: str) -> Color:
    if color is None:
        raise ValueError(f"default {name} colour is not set")
    return color


@dataclass
class Cursor:
    """Where the cursor is and how it should be drawn."""

    grid_position: tuple[int, int] = (0, 0)
    parent_window_id: int = 0
    shape: CursorShape = CursorShape.BLOCK
    cell_percentage: float | None = None
    blinkwait: int | None = None
    blinkon: int | None = None
    blinkoff: int | None = None
    style: Style | None = None
    enabled: bool = True
    double_width: bool = False
    grid_cell: GridCell = default_cell()

    def foreground(self, default_colors: Colors) -> Color:
        """The cursor's text colour; defaults to the editor background."""
        if self.style is not None and self.style.colors.foreground is not None:
            return self.style.colors.foreground
        return _require(default_colors.background, "background")

    def background(self, default_colors: Colors) -> Color:
        """The cursor's fill colour; defaults to the editor foreground."""
        if self.style is not None and self.style.colors.background is not None:
            return self.style.colors.background
        return _require(default_colors.foreground, "foreground")

    def alpha(self) -> int:
        """Opacity from 0 to 255 derived from the style's blend."""
        if self.style is None:
            return 255
        value = int(255.0 * ((100 - self.style.blend) / 100.0))
        return min(max(value, 0), 255)

    def change_mode(
        self, cursor_mode: CursorMode, styles: Mapping[int, Style]
    ) -> None:
        """Apply the settings of a mode; shape and style only when given."""
        if cursor_mode.shape is not None:
            self.shape = cursor_mode.shape
        if cursor_mode.style_id is not None:
            self.style = styles.get(cursor_mode.style_id)
        self.cell_percentage = cursor_mode.cell_percentage
        self.blinkwait = cursor_mode.blinkwait
        self.blinkon = cursor_mode.blinkon
        self.blinkoff = cursor_mode.blinkoff