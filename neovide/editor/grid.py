"""A fixed-size grid of character cells."""

from __future__ import annotations

from collections.abc import Iterator

from neovide.editor.style import Style

GridCell = tuple[str, "Style | None"]


def default_cell() -> GridCell:
    """An empty cell: a single space with no style."""
    return (" ", None)


class CharacterGrid:
    """Cells stored row by row; positions outside the grid are ignored."""

    def __init__(self, size: tuple[int, int]) -> None:
        self.width, self.height = size
        self._cells: list[GridCell] = [default_cell()] * (self.width * self.height)

    def __iter__(self) -> Iterator[GridCell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def resize(self, size: tuple[int, int]) -> None:
        """Change the size, keeping the cells that fit in both sizes."""
        width, height = size
        cells: list[GridCell] = [default_cell()] * (width * height)
        kept_width = min(self.width, width)
        for y in range(min(self.height, height)):
            source = y * self.width
            target = y * width
            cells[target : target + kept_width] = self._cells[
                source : source + kept_width
            ]
        self.width, self.height = width, height
        self._cells = cells

    def clear(self) -> None:
        self.set_all_characters(default_cell())

    def _index(self, x: int, y: int) -> int | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return x + y * self.width

    def get_cell(self, x: int, y: int) -> GridCell | None:
        """The cell at ``(x, y)``, or None when out of bounds."""
        index = self._index(x, y)
        return None if index is None else self._cells[index]

    def set_cell(self, x: int, y: int, cell: GridCell) -> bool:
        """Replace the cell at ``(x, y)``; return False when out of bounds."""
        index = self._index(x, y)
        if index is None:
            return False
        self._cells[index] = cell
        return True

    def set_all_characters(self, value: GridCell) -> None:
        self._cells = [value] * (self.width * self.height)

    def row(self, row_index: int) -> list[GridCell] | None:
        """The cells of one row, or None when the row does not exist."""
        if not 0 <= row_index < self.height:
            return None
        start = row_index * self.width
        return self._cells[start : start + self.width]