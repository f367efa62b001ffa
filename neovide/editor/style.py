"""Colours and highlight styles for grid cells."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass
class Colors:
    """Foreground, background and special colours, each possibly unset."""

    foreground: Color | None = None
    background: Color | None = None
    special: Color | None = None


class UnderlineStyle(Enum):
    """The kinds of underline a highlight can request."""

    UNDERLINE = "underline"
    UNDER_DOUBLE = "underdouble"
    UNDER_DASH = "underdash"
    UNDER_DOT = "underdot"
    UNDER_CURL = "undercurl"


def _require(color: Color | None, name: str) -> Color:
    if color is None:
        raise ValueError(f"default {name} colour is not set")
    return color


@dataclass
class Style:
    """A highlight definition: colours plus text attributes."""

    colors: Colors
    reverse: bool = False
    italic: bool = False
    bold: bool = False
    strikethrough: bool = False
    blend: int = 0
    underline: UnderlineStyle | None = None

    def foreground(self, default_colors: Colors) -> Color:
        """The colour text is drawn in, honouring ``reverse``."""
        if self.reverse:
            return self.colors.background or _require(
                default_colors.background, "background"
            )
        return self.colors.foreground or _require(
            default_colors.foreground, "foreground"
        )

    def background(self, default_colors: Colors) -> Color:
        """The colour behind the text, honouring ``reverse``."""
        if self.reverse:
            return self.colors.foreground or _require(
                default_colors.foreground, "foreground"
            )
        return self.colors.background or _require(
            default_colors.background, "background"
        )

    def special(self, default_colors: Colors) -> Color:
        """The colour for underlines; falls back to the foreground."""
        return self.colors.special or self.foreground(default_colors)