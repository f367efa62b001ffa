"""Window frame decoration choices."""

from __future__ import annotations

import sys
from enum import Enum


class Frame(Enum):
    """Which window decorations to use."""

    FULL = "full"
    TRANSPARENT = "transparent"
    BUTTONLESS = "buttonless"
    NONE = "none"

    @classmethod
    def variants(cls) -> list[Frame]:
        """The frame styles available on the current platform."""
        if sys.platform == "darwin":
            return [cls.FULL, cls.TRANSPARENT, cls.BUTTONLESS, cls.NONE]
        return [cls.FULL, cls.NONE]

    @classmethod
    def parse(cls, value: str) -> Frame:
        """Look up a frame by name; raise ValueError for unknown names."""
        for variant in cls.variants():
            if variant.value == value:
                return variant
        possible = ", ".join(variant.value for variant in cls.variants())
        raise ValueError(
            f"invalid value '{value}' for frame [possible values: {possible}]"
        )

    def __str__(self) -> str:
        return self.value