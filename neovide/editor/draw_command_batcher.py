"""Draw commands and the batcher that hands them to the renderer."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any

from neovide.bridge.redraw_events import EditorMode
from neovide.editor.cursor import Cursor
from neovide.editor.style import Style
from neovide.event_aggregator import EVENT_AGGREGATOR, EventAggregator


@dataclass(frozen=True)
class WindowDraw:
    """A command for the window that shows grid ``grid_id``."""

    grid_id: int
    command: Any


@dataclass(frozen=True)
class CloseWindow:
    grid_id: int


@dataclass(frozen=True)
class ModeChanged:
    mode: EditorMode


@dataclass(frozen=True)
class DefaultStyleChanged:
    style: Style


@dataclass(frozen=True)
class UpdateCursor:
    cursor: Cursor


@dataclass(frozen=True)
class FontChanged:
    font: str


@dataclass(frozen=True)
class LineSpaceChanged:
    line_space: int


class DrawCommandBatcher:
    """Collects draw commands and sends them on as one list.

    A batch is sent through the event aggregator as a plain ``list``, so
    consumers register for the ``list`` event type.
    """

    def __init__(self, aggregator: EventAggregator | None = None) -> None:
        self._aggregator = EVENT_AGGREGATOR if aggregator is None else aggregator
        self._pending: deque[Any] = deque()

    def queue(self, draw_command: Any) -> None:
        self._pending.append(draw_command)

    def send_batch(self) -> None:
        """Send every queued command, in order, as one batch."""
        batch = []
        while True:
            try:
                batch.append(self._pending.popleft())
            except IndexError:
                break
        self._aggregator.send(batch)