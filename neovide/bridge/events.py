"""Parsing the ``redraw`` notifications Neovim sends into typed events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from neovide.bridge.redraw_events import (
    BusyStart,
    BusyStop,
    Clear,
    CommandLineBlockAppend,
    CommandLineBlockHide,
    CommandLineBlockShow,
    CommandLineHide,
    CommandLinePosition,
    CommandLineShow,
    CommandLineSpecialCharacter,
    CursorGoto,
    DefaultColorsSet,
    Destroy,
    EditorMode,
    Flush,
    GridLine,
    GridLineCell,
    GuiOption,
    HighlightAttributesDefine,
    MessageClear,
    MessageHistoryShow,
    MessageKind,
    MessageRuler,
    MessageSetPosition,
    MessageShow,
    MessageShowCommand,
    MessageShowMode,
    ModeChange,
    ModeInfoSet,
    MouseOff,
    MouseOn,
    OptionSet,
    ParseError,
    RedrawEvent,
    Resize,
    Scroll,
    SetTitle,
    ShowIntro,
    StyledContent,
    Suspend,
    WindowAnchor,
    WindowClose,
    WindowExternalPosition,
    WindowFloatPosition,
    WindowHide,
    WindowPosition,
    WindowViewport,
)
from neovide.editor.cursor import CursorMode, CursorShape
from neovide.editor.style import Color, Colors, Style, UnderlineStyle

logger = logging.getLogger(__name__)

_U64_LIMIT = 2**64
_I64_MIN = -(2**63)
_I64_LIMIT = 2**63


def unpack_color(packed_color: int) -> Color:
    """Turn a packed ``0xRRGGBB`` integer into an opaque colour."""
    packed = packed_color & 0xFFFF_FFFF
    r = (packed & 0x00FF_0000) >> 16
    g = (packed & 0xFF00) >> 8
    b = packed & 0xFF
    return Color(r / 255.0, g / 255.0, b / 255.0, 1.0)


def extract_values(values: list[Any], required: int) -> list[Any]:
    """The first ``required`` values; raise ParseError if there are fewer."""
    if required > len(values):
        raise ParseError("event", repr(values))
    return list(values[:required])


def extract_values_with_optional(
    values: list[Any], required: int, optional: int
) -> tuple[list[Any], list[Any]]:
    """Split values into required ones and optional ones padded with None."""
    if required > len(values):
        raise ParseError("event", repr(values))
    extra = list(values[required : required + optional])
    extra.extend([None] * (optional - len(extra)))
    return list(values[:required]), extra


def _parse_array(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ParseError("array", value)


def _parse_map(value: Any) -> list[tuple[Any, Any]]:
    if isinstance(value, dict):
        return list(value.items())
    raise ParseError("map", value)


def _parse_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise ParseError("string", value)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_u64(value: Any) -> int:
    if _is_int(value) and 0 <= value < _U64_LIMIT:
        return value
    raise ParseError("u64", value)


def _parse_i64(value: Any) -> int:
    if _is_int(value) and _I64_MIN <= value < _I64_LIMIT:
        return value
    raise ParseError("i64", value)


def _parse_f64(value: Any) -> float:
    if isinstance(value, float) or _is_int(value):
        return float(value)
    raise ParseError("f64", value)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise ParseError("bool", value)


def _optional(parse: Callable[[Any], Any], value: Any) -> Any:
    return None if value is None else parse(value)


def _parse_set_title(arguments: list[Any]) -> RedrawEvent:
    (title,) = extract_values(arguments, 1)
    return SetTitle(title=_parse_string(title))


def _parse_mode_info_set(arguments: list[Any]) -> RedrawEvent:
    _cursor_style_enabled, mode_info = extract_values(arguments, 2)
    cursor_modes = []
    for mode_info_value in _parse_array(mode_info):
        mode = CursorMode()
        for name, value in _parse_map(mode_info_value):
            key = _parse_string(name)
            if key == "cursor_shape":
                mode.shape = CursorShape.from_type_name(_parse_string(value))
            elif key == "cell_percentage":
                mode.cell_percentage = _parse_u64(value) / 100.0
            elif key == "blinkwait":
                mode.blinkwait = _parse_u64(value)
            elif key == "blinkon":
                mode.blinkon = _parse_u64(value)
            elif key == "blinkoff":
                mode.blinkoff = _parse_u64(value)
            elif key == "attr_id":
                mode.style_id = _parse_u64(value)
        cursor_modes.append(mode)
    return ModeInfoSet(cursor_modes=cursor_modes)


_OPTION_PARSERS: dict[str, Callable[[Any], Any]] = {
    "arabicshape": _parse_bool,
    "ambiwidth": _parse_string,
    "emoji": _parse_bool,
    "guifont": _parse_string,
    "guifontset": _parse_string,
    "guifontwide": _parse_string,
    "linespace": _parse_i64,
    "pumblend": _parse_u64,
    "showtabline": _parse_u64,
    "termguicolors": _parse_bool,
}


def _parse_option_set(arguments: list[Any]) -> RedrawEvent:
    name, value = extract_values(arguments, 2)
    name = _parse_string(name)
    parse = _OPTION_PARSERS.get(name)
    parsed = value if parse is None else parse(value)
    return OptionSet(gui_option=GuiOption(name, parsed))


def _parse_mode_change(arguments: list[Any]) -> RedrawEvent:
    mode, mode_index = extract_values(arguments, 2)
    return ModeChange(
        mode=EditorMode.from_name(_parse_string(mode)),
        mode_index=_parse_u64(mode_index),
    )


def _parse_grid_resize(arguments: list[Any]) -> RedrawEvent:
    grid, width, height = extract_values(arguments, 3)
    return Resize(
        grid=_parse_u64(grid), width=_parse_u64(width), height=_parse_u64(height)
    )


def _parse_default_colors(arguments: list[Any]) -> RedrawEvent:
    foreground, background, special, _term_fg, _term_bg = extract_values(arguments, 5)
    return DefaultColorsSet(
        colors=Colors(
            foreground=unpack_color(_parse_u64(foreground)),
            background=unpack_color(_parse_u64(background)),
            special=unpack_color(_parse_u64(special)),
        )
    )


_FLAG_ATTRIBUTES = ("reverse", "italic", "bold", "strikethrough")

_UNDERLINE_ATTRIBUTES = {
    "underline": UnderlineStyle.UNDERLINE,
    "undercurl": UnderlineStyle.UNDER_CURL,
    "underdotted": UnderlineStyle.UNDER_DOT,
    "underdot": UnderlineStyle.UNDER_DOT,
    "underdashed": UnderlineStyle.UNDER_DASH,
    "underdash": UnderlineStyle.UNDER_DASH,
    "underdouble": UnderlineStyle.UNDER_DOUBLE,
    "underlineline": UnderlineStyle.UNDER_DOUBLE,
}


def parse_style(style_map: Any) -> Style:
    """Build a Style from an ``hl_attr_define`` attribute map.

    Unknown attributes and values of the wrong type are ignored.
    """
    style = Style(Colors())
    for name, value in _parse_map(style_map):
        if not isinstance(name, str):
            logger.debug("Invalid attribute format")
            continue
        if name in ("foreground", "background", "special") and _is_int(value):
            setattr(style.colors, name, unpack_color(_parse_u64(value)))
        elif name in _FLAG_ATTRIBUTES and isinstance(value, bool):
            setattr(style, name, value)
        elif name == "blend" and _is_int(value):
            style.blend = _parse_u64(value) & 0xFF
        elif name in _UNDERLINE_ATTRIBUTES and value is True:
            style.underline = _UNDERLINE_ATTRIBUTES[name]
        else:
            logger.debug("Ignored style attribute: %s", name)
    return style


def _parse_hl_attr_define(arguments: list[Any]) -> RedrawEvent:
    style_id, attributes, _terminal_attributes, _info = extract_values(arguments, 4)
    style = parse_style(attributes)
    return HighlightAttributesDefine(id=_parse_u64(style_id), style=style)


def parse_grid_line_cell(value: Any) -> GridLineCell:
    """Parse ``[text, highlight_id?, repeat?]`` into a GridLineCell."""
    contents = _parse_array(value)
    if not contents:
        raise ParseError("event", repr(contents))
    highlight_id = _parse_u64(contents[1]) if len(contents) > 1 else None
    repeat = _parse_u64(contents[2]) if len(contents) > 2 else None
    return GridLineCell(
        text=_parse_string(contents[0]), highlight_id=highlight_id, repeat=repeat
    )


def _parse_grid_line(arguments: list[Any]) -> RedrawEvent:
    grid, row, column_start, cells = extract_values(arguments, 4)
    return GridLine(
        grid=_parse_u64(grid),
        row=_parse_u64(row),
        column_start=_parse_u64(column_start),
        cells=[parse_grid_line_cell(cell) for cell in _parse_array(cells)],
    )


def _parse_grid_clear(arguments: list[Any]) -> RedrawEvent:
    (grid,) = extract_values(arguments, 1)
    return Clear(grid=_parse_u64(grid))


def _parse_grid_destroy(arguments: list[Any]) -> RedrawEvent:
    (grid,) = extract_values(arguments, 1)
    return Destroy(grid=_parse_u64(grid))


def _parse_grid_cursor_goto(arguments: list[Any]) -> RedrawEvent:
    grid, row, column = extract_values(arguments, 3)
    return CursorGoto(
        grid=_parse_u64(grid), row=_parse_u64(row), column=_parse_u64(column)
    )


def _parse_grid_scroll(arguments: list[Any]) -> RedrawEvent:
    grid, top, bottom, left, right, rows, columns = extract_values(arguments, 7)
    return Scroll(
        grid=_parse_u64(grid),
        top=_parse_u64(top),
        bottom=_parse_u64(bottom),
        left=_parse_u64(left),
        right=_parse_u64(right),
        rows=_parse_i64(rows),
        columns=_parse_i64(columns),
    )


def _parse_win_pos(arguments: list[Any]) -> RedrawEvent:
    grid, _window, start_row, start_column, width, height = extract_values(
        arguments, 6
    )
    return WindowPosition(
        grid=_parse_u64(grid),
        start_row=_parse_u64(start_row),
        start_column=_parse_u64(start_column),
        width=_parse_u64(width),
        height=_parse_u64(height),
    )


def _parse_window_anchor(value: Any) -> WindowAnchor:
    name = _parse_string(value)
    try:
        return WindowAnchor(name)
    except ValueError:
        raise ParseError("window anchor", name) from None


def _parse_win_float_pos(arguments: list[Any]) -> RedrawEvent:
    required, (sort_order,) = extract_values_with_optional(arguments, 7, 1)
    grid, _window, anchor, anchor_grid, anchor_row, anchor_column, focusable = required
    return WindowFloatPosition(
        grid=_parse_u64(grid),
        anchor=_parse_window_anchor(anchor),
        anchor_grid=_parse_u64(anchor_grid),
        anchor_row=_parse_f64(anchor_row),
        anchor_column=_parse_f64(anchor_column),
        focusable=_parse_bool(focusable),
        sort_order=_optional(_parse_u64, sort_order),
    )


def _parse_win_external_pos(arguments: list[Any]) -> RedrawEvent:
    grid, _window = extract_values(arguments, 2)
    return WindowExternalPosition(grid=_parse_u64(grid))


def _parse_win_hide(arguments: list[Any]) -> RedrawEvent:
    (grid,) = extract_values(arguments, 1)
    return WindowHide(grid=_parse_u64(grid))


def _parse_win_close(arguments: list[Any]) -> RedrawEvent:
    (grid,) = extract_values(arguments, 1)
    return WindowClose(grid=_parse_u64(grid))


def _parse_msg_set_pos(arguments: list[Any]) -> RedrawEvent:
    grid, row, scrolled, separator_character = extract_values(arguments, 4)
    return MessageSetPosition(
        grid=_parse_u64(grid),
        row=_parse_u64(row),
        scrolled=_parse_bool(scrolled),
        separator_character=_parse_string(separator_character),
    )


def _parse_win_viewport(arguments: list[Any]) -> RedrawEvent:
    required, (line_count, scroll_delta) = extract_values_with_optional(
        arguments, 6, 2
    )
    grid, _window, top_line, bottom_line, current_line, current_column = required
    return WindowViewport(
        grid=_parse_u64(grid),
        top_line=_parse_f64(top_line),
        bottom_line=_parse_f64(bottom_line),
        current_line=_parse_f64(current_line),
        current_column=_parse_f64(current_column),
        line_count=_optional(_parse_f64, line_count),
        scroll_delta=_optional(_parse_f64, scroll_delta),
    )


def parse_styled_content(line: Any) -> StyledContent:
    """Parse ``[[style_id, text], ...]`` into a list of pairs."""
    content = []
    for chunk in _parse_array(line):
        style_id, text = extract_values(_parse_array(chunk), 2)
        content.append((_parse_u64(style_id), _parse_string(text)))
    return content


def _parse_cmdline_show(arguments: list[Any]) -> RedrawEvent:
    content, position, first_character, prompt, indent, level = extract_values(
        arguments, 6
    )
    return CommandLineShow(
        content=parse_styled_content(content),
        position=_parse_u64(position),
        first_character=_parse_string(first_character),
        prompt=_parse_string(prompt),
        indent=_parse_u64(indent),
        level=_parse_u64(level),
    )


def _parse_cmdline_pos(arguments: list[Any]) -> RedrawEvent:
    position, level = extract_values(arguments, 2)
    return CommandLinePosition(position=_parse_u64(position), level=_parse_u64(level))


def _parse_cmdline_special_char(arguments: list[Any]) -> RedrawEvent:
    character, shift, level = extract_values(arguments, 3)
    return CommandLineSpecialCharacter(
        character=_parse_string(character),
        shift=_parse_bool(shift),
        level=_parse_u64(level),
    )


def _parse_cmdline_block_show(arguments: list[Any]) -> RedrawEvent:
    (lines,) = extract_values(arguments, 1)
    return CommandLineBlockShow(
        lines=[parse_styled_content(line) for line in _parse_array(lines)]
    )


def _parse_cmdline_block_append(arguments: list[Any]) -> RedrawEvent:
    (line,) = extract_values(arguments, 1)
    return CommandLineBlockAppend(line=parse_styled_content(line))


def _parse_msg_show(arguments: list[Any]) -> RedrawEvent:
    kind, content, replace_last = extract_values(arguments, 3)
    return MessageShow(
        kind=MessageKind.parse(_parse_string(kind)),
        content=parse_styled_content(content),
        replace_last=_parse_bool(replace_last),
    )


def _parse_msg_showmode(arguments: list[Any]) -> RedrawEvent:
    (content,) = extract_values(arguments, 1)
    return MessageShowMode(content=parse_styled_content(content))


def _parse_msg_showcmd(arguments: list[Any]) -> RedrawEvent:
    (content,) = extract_values(arguments, 1)
    return MessageShowCommand(content=parse_styled_content(content))


def _parse_msg_ruler(arguments: list[Any]) -> RedrawEvent:
    (content,) = extract_values(arguments, 1)
    return MessageRuler(content=parse_styled_content(content))


def _parse_msg_history_entry(entry: Any) -> tuple[MessageKind, StyledContent]:
    kind, content = extract_values(_parse_array(entry), 2)
    return (MessageKind.parse(_parse_string(kind)), parse_styled_content(content))


def _parse_msg_history_show(arguments: list[Any]) -> RedrawEvent:
    (entries,) = extract_values(arguments, 1)
    return MessageHistoryShow(
        entries=[_parse_msg_history_entry(entry) for entry in _parse_array(entries)]
    )


def _parse_msg_intro(arguments: list[Any]) -> RedrawEvent:
    (lines,) = extract_values(arguments, 1)
    return ShowIntro(message=[_parse_string(line) for line in _parse_array(lines)])


def _constant(event: RedrawEvent) -> Callable[[list[Any]], RedrawEvent]:
    return lambda _arguments: event


_PARSERS: dict[str, Callable[[list[Any]], RedrawEvent]] = {
    "set_title": _parse_set_title,
    "mode_info_set": _parse_mode_info_set,
    "option_set": _parse_option_set,
    "mode_change": _parse_mode_change,
    "mouse_on": _constant(MouseOn()),
    "mouse_off": _constant(MouseOff()),
    "busy_start": _constant(BusyStart()),
    "busy_stop": _constant(BusyStop()),
    "flush": _constant(Flush()),
    "grid_resize": _parse_grid_resize,
    "default_colors_set": _parse_default_colors,
    "hl_attr_define": _parse_hl_attr_define,
    "grid_line": _parse_grid_line,
    "grid_clear": _parse_grid_clear,
    "grid_destroy": _parse_grid_destroy,
    "grid_cursor_goto": _parse_grid_cursor_goto,
    "grid_scroll": _parse_grid_scroll,
    "win_pos": _parse_win_pos,
    "win_float_pos": _parse_win_float_pos,
    "win_external_pos": _parse_win_external_pos,
    "win_hide": _parse_win_hide,
    "win_close": _parse_win_close,
    "msg_set_pos": _parse_msg_set_pos,
    "win_viewport": _parse_win_viewport,
    "cmdline_show": _parse_cmdline_show,
    "cmdline_pos": _parse_cmdline_pos,
    "cmdline_special_char": _parse_cmdline_special_char,
    "cmdline_hide": _constant(CommandLineHide()),
    "cmdline_block_show": _parse_cmdline_block_show,
    "cmdline_block_append": _parse_cmdline_block_append,
    "cmdline_block_hide": _constant(CommandLineBlockHide()),
    "msg_show": _parse_msg_show,
    "msg_clear": _constant(MessageClear()),
    "msg_showmode": _parse_msg_showmode,
    "msg_showcmd": _parse_msg_showcmd,
    "msg_ruler": _parse_msg_ruler,
    "msg_history_show": _parse_msg_history_show,
    "msg_intro": _parse_msg_intro,
    "suspend": _constant(Suspend()),
}


def parse_redraw_event(event_value: Any) -> list[RedrawEvent]:
    """Parse one ``[name, args...]`` batch from a redraw notification.

    Events the UI does not handle, such as ``set_icon``, are skipped.
    Raises ParseError when the batch or one of its events is malformed.
    """
    contents = _parse_array(event_value)
    if not contents:
        raise ParseError("event", repr(contents))
    event_name = _parse_string(contents[0])
    parser = _PARSERS.get(event_name)

    parsed_events: list[RedrawEvent] = []
    for event in contents[1:]:
        parameters = _parse_array(event)
        if parser is None:
            continue
        try:
            parsed_events.append(parser(parameters))
        except ParseError as error:
            raise ParseError(
                "event", f"for event '{event_name}' - {parameters!r} - {error}"
            ) from error
    return parsed_events