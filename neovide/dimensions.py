"""Window dimensions expressed as a width and a height."""

from __future__ import annotations

import math
from dataclasses import dataclass

_U64_MAX = 2**64 - 1

_ZERO_DIMENSION_MESSAGE = (
    "Invalid Dimensions: Window dimensions should be greater than 0."
)


def _parse_u64(text: str) -> int | None:
    """Parse an unsigned 64-bit integer, returning None when it is not one."""
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    value = int(digits)
    if value > _U64_MAX:
        return None
    return value


def _to_u64(value: int | float) -> int:
    """Convert a number to an unsigned integer, saturating at the bounds."""
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return _U64_MAX if value > 0 else 0
    return min(max(int(value), 0), _U64_MAX)


@dataclass(frozen=True)
class Dimensions:
    """A width and a height, both positive integers when parsed from text."""

    width: int
    height: int

    @classmethod
    def from_str(cls, s: str) -> Dimensions:
        """Parse ``<width>x<height>``; raise ValueError on malformed input."""
        invalid = f"Invalid geometry: {s}\nValid format: <width>x<height>"
        values = []
        for part in s.split("x"):
            value = _parse_u64(part)
            if value is None:
                raise ValueError(invalid)
            if value == 0:
                raise ValueError(_ZERO_DIMENSION_MESSAGE)
            values.append(value)
        if len(values) != 2:
            raise ValueError(invalid)
        width, height = values
        return cls(width, height)

    @classmethod
    def from_tuple(cls, pair) -> Dimensions:
        """Build dimensions from a ``(width, height)`` pair of numbers."""
        width, height = pair
        return cls(_to_u64(width), _to_u64(height))

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    def __mul__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions.from_tuple(
            (self.width * other.width, self.height * other.height)
        )

    def __rmul__(self, other):
        if isinstance(other, tuple) and len(other) == 2:
            x, y = other
            return (x * self.width, y * self.height)
        return NotImplemented

    def __floordiv__(self, other):
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions.from_tuple(
            (self.width // other.width, self.height // other.height)
        )