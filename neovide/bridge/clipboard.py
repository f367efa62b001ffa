"""Converting clipboard text to and from Neovim's register format."""

from __future__ import annotations

import sys
from typing import Any

_DEFAULT_ENDLINE = "\r\n" if sys.platform == "win32" else "\n"


def format_clipboard_contents(
    raw: str, file_format: str | None = None
) -> list[Any]:
    """Turn clipboard text into ``[lines, paste_mode]`` for Neovim.

    A trailing newline makes a line-wise paste (``"V"``), otherwise the
    paste is character-wise (``"v"``). With the ``dos`` file format every
    line but the last keeps a carriage return.
    """
    text = raw.replace("\r", "")
    is_line_paste = text.endswith("\n")
    if file_format == "dos":
        text = text.replace("\n", "\r\n")
    lines = text.split("\n")
    return [lines, "V" if is_line_paste else "v"]


def join_clipboard_lines(value: Any, endline: str | None = None) -> str:
    """Join the string lines Neovim sends into clipboard text.

    Non-string entries are skipped and carriage returns are stripped.
    Raises ValueError when ``value`` is not a list.
    """
    if endline is None:
        endline = _DEFAULT_ENDLINE
    if not isinstance(value, (list, tuple)):
        raise ValueError("can't build string from provided text")
    return endline.join(
        line.replace("\r", "") for line in value if isinstance(line, str)
    )