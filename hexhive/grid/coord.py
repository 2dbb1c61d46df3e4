"""Coord — a position on the unbounded hex grid.

Coordinates are plain values: two signed 16-bit integers in the offset
axial scheme used by ``DynamicHexGrid``.  Any pair inside the 16-bit range
is a legal position; nothing outside it can be represented, so arithmetic
that would leave the range raises instead of wrapping.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass

COORD_MIN = -(2**15)
COORD_MAX = 2**15 - 1


class CoordinateOverflowError(OverflowError):
    """A coordinate component fell outside the signed 16-bit range."""


@dataclass(frozen=True)
class Coord:
    """An immutable ``(x, y)`` grid position.

    Attributes:
        x: Column, in ``[COORD_MIN, COORD_MAX]``.
        y: Row, in ``[COORD_MIN, COORD_MAX]``.

    Raises:
        TypeError: If either component is not an integer.
        CoordinateOverflowError: If either component is out of range.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        # Plain ints, so arithmetic on numpy scalars cannot wrap silently.
        object.__setattr__(self, "x", operator.index(self.x))
        object.__setattr__(self, "y", operator.index(self.y))
        for value in (self.x, self.y):
            if not COORD_MIN <= value <= COORD_MAX:
                msg = f"({self.x}, {self.y}) outside the 16-bit coordinate range"
                raise CoordinateOverflowError(msg)

    def shifted(self, dx: int, dy: int) -> Coord:
        """Return the coordinate offset by ``(dx, dy)``."""
        return Coord(self.x + operator.index(dx), self.y + operator.index(dy))

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
