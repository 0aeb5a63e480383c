"""Two-dimensional positions used for layout and hit testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Pos:
    """An immutable point or offset on the board."""

    x: Number
    y: Number

    def translate(self, dx: Number, dy: Number) -> Pos:
        """Return this position moved by ``dx`` and ``dy``."""
        return Pos(self.x + dx, self.y + dy)

    def __add__(self, other: object) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return self.translate(other.x, other.y)

    def __sub__(self, other: object) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.x - other.x, self.y - other.y)

    def almost_eq(self, other: Pos, epsilon: Number) -> bool:
        """True when both coordinates differ by strictly less than ``epsilon``."""
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    def to_float(self) -> Pos:
        """Return a copy with float coordinates."""
        return Pos(float(self.x), float(self.y))

    def to_int(self) -> Pos:
        """Return a copy with integer coordinates, truncated toward zero."""
        return Pos(int(self.x), int(self.y))

    def as_tuple(self) -> tuple[Number, Number]:
        """Return the coordinates as an ``(x, y)`` tuple."""
        return (self.x, self.y)