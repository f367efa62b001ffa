import pytest

from neovide.bridge.redraw_events import (
    EditorMode,
    Flush,
    GridLine,
    GridLineCell,
    GuiOption,
    MessageKind,
    ParseError,
    RedrawEvent,
    Resize,
    WindowAnchor,
)


@pytest.mark.parametrize(
    ("wire", "kind"),
    [
        ("confirm", MessageKind.CONFIRM),
        ("confirm_sub", MessageKind.CONFIRM_SUBSTITUTE),
        ("emsg", MessageKind.ERROR),
        ("echo", MessageKind.ECHO),
        ("echomsg", MessageKind.ECHO_MESSAGE),
        ("echoerr", MessageKind.ECHO_ERROR),
        ("lua_error", MessageKind.LUA_ERROR),
        ("rpc_error", MessageKind.RPC_ERROR),
        ("return_prompt", MessageKind.RETURN_PROMPT),
        ("quickfix", MessageKind.QUICK_FIX),
        ("search_count", MessageKind.SEARCH_COUNT),
        ("wmsg", MessageKind.WARNING),
        ("something_else", MessageKind.UNKNOWN),
        ("", MessageKind.UNKNOWN),
    ],
)
def test_message_kind_parse(wire, kind):
    assert MessageKind.parse(wire) is kind


@pytest.mark.parametrize(
    ("wire", "anchor"),
    [
        ("NW", WindowAnchor.NORTH_WEST),
        ("NE", WindowAnchor.NORTH_EAST),
        ("SW", WindowAnchor.SOUTH_WEST),
        ("SE", WindowAnchor.SOUTH_EAST),
    ],
)
def test_window_anchor_wire_names(wire, anchor):
    assert WindowAnchor(wire) is anchor


def test_north_west_keeps_position():
    assert WindowAnchor.NORTH_WEST.modified_top_left(7.5, 3.0, 20, 4) == (7.5, 3.0)


def test_anchor_offsets_are_consistent():
    left, top, width, height = 30.0, 12.0, 9, 5
    nw = WindowAnchor.NORTH_WEST.modified_top_left(left, top, width, height)
    ne = WindowAnchor.NORTH_EAST.modified_top_left(left, top, width, height)
    sw = WindowAnchor.SOUTH_WEST.modified_top_left(left, top, width, height)
    se = WindowAnchor.SOUTH_EAST.modified_top_left(left, top, width, height)
    assert nw[0] - ne[0] == width
    assert ne[1] == top
    assert nw[1] - sw[1] == height
    assert sw[0] == left
    assert se == (ne[0], sw[1])


def test_parse_error_message_names_kind():
    error = ParseError("array", 5)
    assert isinstance(error, ValueError)
    assert str(error).startswith("invalid array format")
    assert error.value == 5


def test_parse_error_event_text_is_shown_verbatim():
    assert str(ParseError("event", "boom")) == "invalid event format boom"


def test_parse_error_u64_message_and_value():
    error = ParseError("u64", "x")
    assert str(error).startswith("invalid u64 format")
    assert error.value == "x"


@pytest.mark.parametrize(
    ("name", "mode"),
    [
        ("normal", EditorMode.NORMAL),
        ("insert", EditorMode.INSERT),
        ("visual", EditorMode.VISUAL),
        ("replace", EditorMode.REPLACE),
        ("cmdline_normal", EditorMode.CMDLINE),
        ("operator", EditorMode.UNKNOWN),
    ],
)
def test_editor_mode_from_name(name, mode):
    assert EditorMode.from_name(name) is mode


def test_gui_option_known():
    assert GuiOption("guifont", "Fira Code:h12").known is True
    assert GuiOption("linespace", 2).known is True
    assert GuiOption("made_up_option", 1).known is False


def test_grid_line_cell_defaults():
    cell = GridLineCell("a")
    assert (cell.text, cell.highlight_id, cell.repeat) == ("a", None, None)


def test_events_compare_by_value():
    cells = [GridLineCell("x", 1, 2)]
    assert GridLine(1, 2, 3, cells) == GridLine(1, 2, 3, [GridLineCell("x", 1, 2)])
    assert Resize(1, 80, 24) != Resize(1, 80, 25)
    assert Flush() == Flush()
    assert isinstance(Resize(1, 2, 3), RedrawEvent) and Resize(1, 2, 3).width == 2