"""Typed events that Neovim sends with its ``redraw`` notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from neovide.editor.cursor import CursorMode
from neovide.editor.style import Colors, Style

StyledContent = list[tuple[int, str]]


class ParseError(ValueError):
    """Raised when a redraw event does not have the expected shape.

    ``kind`` names what was expected (``"array"``, ``"u64"``, ...) or is
    ``"event"`` when the event as a whole was malformed.
    """

    def __init__(self, kind: str, value: Any) -> None:
        self.kind = kind
        self.value = value
        shown = value if kind == "event" else repr(value)
        super().__init__(f"invalid {kind} format {shown}")


@dataclass(frozen=True)
class GridLineCell:
    """One cell description inside a ``grid_line`` event."""

    text: str
    highlight_id: int | None = None
    repeat: int | None = None


class MessageKind(Enum):
    UNKNOWN = "unknown"
    CONFIRM = "confirm"
    CONFIRM_SUBSTITUTE = "confirm_sub"
    ERROR = "emsg"
    ECHO = "echo"
    ECHO_MESSAGE = "echomsg"
    ECHO_ERROR = "echoerr"
    LUA_ERROR = "lua_error"
    RPC_ERROR = "rpc_error"
    RETURN_PROMPT = "return_prompt"
    QUICK_FIX = "quickfix"
    SEARCH_COUNT = "search_count"
    WARNING = "wmsg"

    @classmethod
    def parse(cls, kind: str) -> MessageKind:
        """The kind with this wire name; UNKNOWN for anything else."""
        try:
            return cls(kind)
        except ValueError:
            return cls.UNKNOWN


_KNOWN_OPTIONS = frozenset(
    {
        "arabicshape",
        "ambiwidth",
        "emoji",
        "guifont",
        "guifontset",
        "guifontwide",
        "linespace",
        "pumblend",
        "showtabline",
        "termguicolors",
    }
)


@dataclass(frozen=True)
class GuiOption:
    """A UI option and its value, as reported by ``option_set``."""

    name: str
    value: Any

    @property
    def known(self) -> bool:
        """Whether this is one of the options the UI understands."""
        return self.name in _KNOWN_OPTIONS


class WindowAnchor(Enum):
    NORTH_WEST = "NW"
    NORTH_EAST = "NE"
    SOUTH_WEST = "SW"
    SOUTH_EAST = "SE"

    def modified_top_left(
        self, grid_left: float, grid_top: float, width: int, height: int
    ) -> tuple[float, float]:
        """The top-left corner of a window of this size anchored here."""
        left = grid_left
        top = grid_top
        if self in (WindowAnchor.NORTH_EAST, WindowAnchor.SOUTH_EAST):
            left -= float(width)
        if self in (WindowAnchor.SOUTH_WEST, WindowAnchor.SOUTH_EAST):
            top -= float(height)
        return (left, top)


class EditorMode(Enum):
    """The main editor modes; anything else is UNKNOWN."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    REPLACE = "replace"
    CMDLINE = "cmdline_normal"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> EditorMode:
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class RedrawEvent:
    """Base class of every parsed redraw event."""


@dataclass(frozen=True)
class SetTitle(RedrawEvent):
    title: str


@dataclass(frozen=True)
class ModeInfoSet(RedrawEvent):
    cursor_modes: list[CursorMode] = field(default_factory=list)


@dataclass(frozen=True)
class OptionSet(RedrawEvent):
    gui_option: GuiOption


@dataclass(frozen=True)
class ModeChange(RedrawEvent):
    mode: EditorMode
    mode_index: int


@dataclass(frozen=True)
class MouseOn(RedrawEvent):
    pass


@dataclass(frozen=True)
class MouseOff(RedrawEvent):
    pass


@dataclass(frozen=True)
class BusyStart(RedrawEvent):
    pass


@dataclass(frozen=True)
class BusyStop(RedrawEvent):
    pass


@dataclass(frozen=True)
class Flush(RedrawEvent):
    pass


@dataclass(frozen=True)
class Resize(RedrawEvent):
    grid: int
    width: int
    height: int


@dataclass(frozen=True)
class DefaultColorsSet(RedrawEvent):
    colors: Colors


@dataclass(frozen=True)
class HighlightAttributesDefine(RedrawEvent):
    id: int
    style: Style


@dataclass(frozen=True)
class GridLine(RedrawEvent):
    grid: int
    row: int
    column_start: int
    cells: list[GridLineCell] = field(default_factory=list)


@dataclass(frozen=True)
class Clear(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class Destroy(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class CursorGoto(RedrawEvent):
    grid: int
    row: int
    column: int


@dataclass(frozen=True)
class Scroll(RedrawEvent):
    grid: int
    top: int
    bottom: int
    left: int
    right: int
    rows: int
    columns: int


@dataclass(frozen=True)
class WindowPosition(RedrawEvent):
    grid: int
    start_row: int
    start_column: int
    width: int
    height: int


@dataclass(frozen=True)
class WindowFloatPosition(RedrawEvent):
    grid: int
    anchor: WindowAnchor
    anchor_grid: int
    anchor_row: float
    anchor_column: float
    focusable: bool
    sort_order: int | None = None


@dataclass(frozen=True)
class WindowExternalPosition(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class WindowHide(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class WindowClose(RedrawEvent):
    grid: int


@dataclass(frozen=True)
class MessageSetPosition(RedrawEvent):
    grid: int
    row: int
    scrolled: bool
    separator_character: str


@dataclass(frozen=True)
class WindowViewport(RedrawEvent):
    grid: int
    top_line: float
    bottom_line: float
    current_line: float
    current_column: float
    line_count: float | None = None
    scroll_delta: float | None = None


@dataclass(frozen=True)
class CommandLineShow(RedrawEvent):
    content: StyledContent
    position: int
    first_character: str
    prompt: str
    indent: int
    level: int


@dataclass(frozen=True)
class CommandLinePosition(RedrawEvent):
    position: int
    level: int


@dataclass(frozen=True)
class CommandLineSpecialCharacter(RedrawEvent):
    character: str
    shift: bool
    level: int


@dataclass(frozen=True)
class CommandLineHide(RedrawEvent):
    pass


@dataclass(frozen=True)
class CommandLineBlockShow(RedrawEvent):
    lines: list[StyledContent] = field(default_factory=list)


@dataclass(frozen=True)
class CommandLineBlockAppend(RedrawEvent):
    line: StyledContent = field(default_factory=list)


@dataclass(frozen=True)
class CommandLineBlockHide(RedrawEvent):
    pass


@dataclass(frozen=True)
class MessageShow(RedrawEvent):
    kind: MessageKind
    content: StyledContent
    replace_last: bool


@dataclass(frozen=True)
class MessageClear(RedrawEvent):
    pass


@dataclass(frozen=True)
class MessageShowMode(RedrawEvent):
    content: StyledContent = field(default_factory=list)


@dataclass(frozen=True)
class MessageShowCommand(RedrawEvent):
    content: StyledContent = field(default_factory=list)


@dataclass(frozen=True)
class MessageRuler(RedrawEvent):
    content: StyledContent = field(default_factory=list)


@dataclass(frozen=True)
class MessageHistoryShow(RedrawEvent):
    entries: list[tuple[MessageKind, StyledContent]] = field(default_factory=list)


@dataclass(frozen=True)
class ShowIntro(RedrawEvent):
    message: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Suspend(RedrawEvent):
    pass