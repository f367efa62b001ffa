import pytest

from neovide.editor.grid import CharacterGrid, default_cell
from neovide.editor.style import Colors, Style

CONTEXTS = [
    # (size, x, y)
    ((1, 1), 0, 0),
    ((7, 3), 6, 2),
    ((113, 57), 40, 31),
    ((500, 2), 250, 1),
]


def styled(text):
    return (text, Style(Colors()))


def index_of(size, x, y):
    return x + y * size[0]


@pytest.mark.parametrize("size,x,y", CONTEXTS)
def test_new_constructs_grid(size, x, y):
    grid = CharacterGrid(size)
    assert grid.width == size[0]
    assert grid.height == size[1]
    assert list(grid) == [default_cell()] * (size[0] * size[1])


@pytest.mark.parametrize("size,x,y", CONTEXTS)
def test_get_cell_returns_expected_cell(size, x, y):
    grid = CharacterGrid(size)
    assert grid.set_cell(x, y, styled("foo"))
    assert grid.get_cell(x, y) == styled("foo")
    assert list(grid)[index_of(size, x, y)] == styled("foo")


@pytest.mark.parametrize("size,x,y", CONTEXTS)
def test_set_cell_modifies_grid_properly(size, x, y):
    grid = CharacterGrid(size)
    grid.set_cell(x, y, styled("foo"))
    grid.set_cell(x, y, styled("bar"))
    assert grid.get_cell(x, y) == styled("bar")


@pytest.mark.parametrize("size,x,y", CONTEXTS)
def test_set_all_characters_sets_all_cells_to_given_character(size, x, y):
    grid = CharacterGrid(size)
    grid.set_all_characters(styled("foo"))
    assert list(grid) == [styled("foo")] * (size[0] * size[1])


@pytest.mark.parametrize("size,x,y", CONTEXTS)
def test_clear_empties_buffer(size, x, y):
    grid = CharacterGrid(size)
    grid.set_all_characters(styled("foo"))
    grid.clear()
    assert grid.width == size[0]
    assert grid.height == size[1]
    assert list(grid) == [default_cell()] * (size[0] * size[1])


@pytest.mark.parametrize("size", [(7, 3), (113, 57), (1, 1)])
@pytest.mark.parametrize("new_size", [(5, 9), (200, 100), (1, 1), (113, 2)])
def test_resize_clears_and_resizes_grid(size, new_size):
    grid = CharacterGrid(size)
    grid.set_all_characters(styled("foo"))
    width, height = new_size

    grid.resize(new_size)

    assert grid.width == width
    assert grid.height == height
    assert len(grid) == width * height
    original_width, original_height = size
    for x in range(min(original_width, width)):
        for y in range(min(original_height, height)):
            assert grid.get_cell(x, y) == styled("foo")
    for x in range(original_width, width):
        for y in range(original_height, height):
            assert grid.get_cell(x, y) == default_cell()


def test_resize_keeps_cell_positions():
    grid = CharacterGrid((4, 3))
    grid.set_cell(2, 1, styled("a"))
    grid.set_cell(3, 2, styled("b"))
    grid.resize((6, 2))
    assert grid.get_cell(2, 1) == styled("a")
    assert grid.get_cell(3, 2) is None
    assert grid.row(1)[2] == styled("a")


def test_out_of_bounds_access():
    grid = CharacterGrid((3, 2))
    assert grid.get_cell(3, 0) is None
    assert grid.get_cell(0, 2) is None
    assert grid.set_cell(3, 0, styled("x")) is False
    assert list(grid) == [default_cell()] * 6


def test_row_returns_slice_of_row():
    grid = CharacterGrid((3, 2))
    grid.set_cell(1, 1, styled("x"))
    assert grid.row(1) == [default_cell(), styled("x"), default_cell()]
    assert grid.row(0) == [default_cell()] * 3
    assert grid.row(2) is None