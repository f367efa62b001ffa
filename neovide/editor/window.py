"""An editor window: a character grid plus the draw commands it emits."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

import regex

from neovide.bridge.redraw_events import GridLineCell, WindowAnchor
from neovide.editor.draw_command_batcher import DrawCommandBatcher, WindowDraw
from neovide.editor.grid import CharacterGrid, GridCell
from neovide.editor.style import Style

logger = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")


@dataclass
class AnchorInfo:
    """Where a floating window is anchored relative to another grid."""

    anchor_grid_id: int
    anchor_type: WindowAnchor
    anchor_left: float
    anchor_top: float
    sort_order: int


@dataclass(frozen=True)
class LineFragment:
    """A run of cells in one row that share a style."""

    text: str
    window_left: int
    window_top: int
    width: int
    style: Style | None


@dataclass(frozen=True)
class PositionCommand:
    grid_position: tuple[float, float]
    grid_size: tuple[int, int]
    floating_order: int | None


@dataclass(frozen=True)
class DrawLineCommand:
    fragments: list[LineFragment] = field(default_factory=list)


@dataclass(frozen=True)
class ScrollCommand:
    top: int
    bottom: int
    left: int
    right: int
    rows: int
    cols: int


@dataclass(frozen=True)
class ClearCommand:
    pass


@dataclass(frozen=True)
class ShowCommand:
    pass


@dataclass(frozen=True)
class HideCommand:
    pass


@dataclass(frozen=True)
class CloseCommand:
    pass


@dataclass(frozen=True)
class ViewportCommand:
    scroll_delta: float


class WindowType(Enum):
    EDITOR = "editor"
    MESSAGE = "message"


class Window:
    """A grid shown on screen; every change is queued as a draw command."""

    def __init__(
        self,
        grid_id: int,
        window_type: WindowType,
        anchor_info: AnchorInfo | None,
        grid_position: tuple[float, float],
        grid_size: tuple[int, int],
        draw_command_batcher: DrawCommandBatcher,
    ) -> None:
        self.grid_id = grid_id
        self.grid = CharacterGrid(grid_size)
        self.window_type = window_type
        self.anchor_info = anchor_info
        self._grid_position = grid_position
        self._batcher = draw_command_batcher
        self._send_updated_position()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def grid_position(self) -> tuple[float, float]:
        return self._grid_position

    def _send_command(self, command: object) -> None:
        self._batcher.queue(WindowDraw(self.grid_id, command))

    def _send_updated_position(self) -> None:
        self._send_command(
            PositionCommand(
                grid_position=self._grid_position,
                grid_size=(self.grid.width, self.grid.height),
                floating_order=(
                    None if self.anchor_info is None else self.anchor_info.sort_order
                ),
            )
        )

    def get_cursor_grid_cell(
        self, window_left: int, window_top: int
    ) -> tuple[str, Style | None, bool]:
        """The text and style under the cursor, and whether it is double width."""
        cell = self.grid.get_cell(window_left, window_top)
        text, style = cell if cell is not None else (" ", None)
        next_cell = self.grid.get_cell(window_left + 1, window_top)
        double_width = next_cell is not None and next_cell[0] == ""
        return (text, style, double_width)

    def position(
        self,
        anchor_info: AnchorInfo | None,
        grid_size: tuple[int, int],
        grid_position: tuple[float, float],
    ) -> None:
        self.grid.resize(grid_size)
        self.anchor_info = anchor_info
        self._grid_position = grid_position
        self._send_updated_position()
        self.redraw()

    def resize(self, new_size: tuple[int, int]) -> None:
        self.grid.resize(new_size)
        self._send_updated_position()
        self.redraw()

    def _write_cells(
        self,
        row: int,
        column: int,
        cells: list[GridLineCell],
        defined_styles: Mapping[int, Style],
    ) -> None:
        previous_style: Style | None = None
        for cell in cells:
            if cell.highlight_id == 0:
                style = None
            elif cell.highlight_id is not None:
                style = defined_styles.get(cell.highlight_id)
            else:
                style = previous_style

            text = cell.text
            if cell.repeat is not None:
                # A zero repeat only marks line ends for terminal UIs.
                if cell.repeat == 0:
                    continue
                text = text * cell.repeat

            if not text:
                self.grid.set_cell(column, row, (text, style))
                column += 1
            else:
                for character in _GRAPHEME.findall(text):
                    self.grid.set_cell(column, row, (character, style))
                    column += 1
            previous_style = style

    def _build_line_fragment(
        self, row_cells: list[GridCell], row_index: int, start: int
    ) -> tuple[int, LineFragment]:
        """A fragment from ``start`` to the next style change or wide character."""
        style = row_cells[start][1]
        pieces = []
        width = 0
        for character, cell_style in row_cells[start:]:
            if cell_style != style:
                break
            width += 1
            if character == "":
                break
            pieces.append(character)
        fragment = LineFragment(
            text="".join(pieces),
            window_left=start,
            window_top=row_index,
            width=width,
            style=style,
        )
        return start + width, fragment

    def _redraw_line(self, row_index: int) -> None:
        row_cells = self.grid.row(row_index)
        if row_cells is None:
            return
        fragments = []
        start = 0
        while start < self.grid.width:
            start, fragment = self._build_line_fragment(row_cells, row_index, start)
            fragments.append(fragment)
        self._send_command(DrawLineCommand(fragments))

    def draw_grid_line(
        self,
        row: int,
        column_start: int,
        cells: list[GridLineCell],
        defined_styles: Mapping[int, Style],
    ) -> None:
        """Write cells into a row and redraw it together with its neighbours."""
        if row >= self.grid.height:
            logger.warning("Draw command out of bounds")
            return
        self._write_cells(row, column_start, cells, defined_styles)
        # Neighbouring rows are redrawn so underlines are not clipped.
        if row < self.grid.height - 1:
            self._redraw_line(row + 1)
        self._redraw_line(row)
        if row > 0:
            self._redraw_line(row - 1)

    def scroll_region(
        self, top: int, bottom: int, left: int, right: int, rows: int, cols: int
    ) -> None:
        """Scroll a region of the grid by ``rows`` and ``cols``."""
        if rows > 0:
            y_range = range(top + rows, bottom)
        else:
            y_range = reversed(range(top, bottom + rows))

        self._send_command(ScrollCommand(top, bottom, left, right, rows, cols))

        for y in y_range:
            dest_y = y - rows
            if not 0 <= dest_y < self.grid.height:
                continue
            if cols > 0:
                x_range = range(left + cols, right)
            else:
                x_range = reversed(range(left, right + cols))
            for x in x_range:
                cell = self.grid.get_cell(x, y)
                if cell is not None:
                    self.grid.set_cell(x - cols, dest_y, cell)

    def clear(self) -> None:
        self.grid.clear()
        self._send_command(ClearCommand())

    def redraw(self) -> None:
        """Clear and redraw every row, bottom up so underlines survive."""
        self._send_command(ClearCommand())
        for row in reversed(range(self.grid.height)):
            self._redraw_line(row)

    def hide(self) -> None:
        self._send_command(HideCommand())

    def show(self) -> None:
        self._send_command(ShowCommand())

    def close(self) -> None:
        self._send_command(CloseCommand())

    def update_viewport(self, scroll_delta: float) -> None:
        self._send_command(ViewportCommand(scroll_delta))