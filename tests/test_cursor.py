from neovide.editor.cursor import Cursor, CursorMode, CursorShape
from neovide.editor.style import Color, Colors, Style


def make_colors():
    return Colors(
        foreground=Color(0.1, 0.1, 0.1, 0.1),
        background=Color(0.2, 0.1, 0.1, 0.1),
        special=Color(0.3, 0.1, 0.1, 0.1),
    )


def make_default_colors():
    return Colors(
        foreground=Color(0.1, 0.2, 0.1, 0.1),
        background=Color(0.2, 0.2, 0.1, 0.1),
        special=Color(0.3, 0.2, 0.1, 0.1),
    )


def test_from_type_name():
    assert CursorShape.from_type_name("block") == CursorShape.BLOCK
    assert CursorShape.from_type_name("horizontal") == CursorShape.HORIZONTAL
    assert CursorShape.from_type_name("vertical") == CursorShape.VERTICAL


def test_from_type_name_unknown():
    assert CursorShape.from_type_name("underline") is None


def test_foreground():
    defaults = make_default_colors()
    colors = make_colors()
    cursor = Cursor()
    assert cursor.foreground(defaults) == defaults.background
    cursor.style = Style(make_colors())
    assert cursor.foreground(defaults) == colors.foreground
    cursor.style = Style(Colors())
    assert cursor.foreground(defaults) == defaults.background


def test_background():
    defaults = make_default_colors()
    colors = make_colors()
    cursor = Cursor()
    assert cursor.background(defaults) == defaults.foreground
    cursor.style = Style(make_colors())
    assert cursor.background(defaults) == colors.background
    cursor.style = Style(Colors())
    assert cursor.background(defaults) == defaults.foreground


def test_change_mode():
    cursor_mode = CursorMode(
        shape=CursorShape.HORIZONTAL,
        style_id=1,
        cell_percentage=100.0,
        blinkwait=1,
        blinkon=1,
        blinkoff=1,
    )
    styles = {1: Style(make_colors())}
    cursor = Cursor()

    cursor.change_mode(cursor_mode, styles)
    assert cursor.shape == CursorShape.HORIZONTAL
    assert cursor.style == styles[1]
    assert cursor.cell_percentage == 100.0
    assert cursor.blinkwait == 1
    assert cursor.blinkon == 1
    assert cursor.blinkoff == 1

    cursor.change_mode(CursorMode(), styles)
    assert cursor.shape == CursorShape.HORIZONTAL
    assert cursor.style == styles[1]
    assert cursor.cell_percentage is None
    assert cursor.blinkwait is None
    assert cursor.blinkon is None
    assert cursor.blinkoff is None


def test_change_mode_unknown_style_clears_style():
    cursor = Cursor(style=Style(make_colors()))
    cursor.change_mode(CursorMode(style_id=7), {})
    assert cursor.style is None


def test_new_cursor_defaults():
    cursor = Cursor()
    assert cursor.grid_position == (0, 0)
    assert cursor.shape == CursorShape.BLOCK
    assert cursor.enabled is True
    assert cursor.grid_cell == (" ", None)


def test_alpha_without_style_is_opaque():
    assert Cursor().alpha() == 255


def test_alpha_follows_blend():
    cursor = Cursor(style=Style(Colors()))
    assert cursor.alpha() == 255
    cursor.style.blend = 100
    assert cursor.alpha() == 0