"""HivePiece — the contents of a Hive board cell.

A cell holds exactly one ``HivePiece``: the top of its stack.  Stacking
is encoded inside the piece itself.  Only a Beetle can climb, so only a
Beetle may carry the piece it stands on in ``beneath``; that piece may in
turn be another climbing Beetle, down to a base piece on the ground::

    HivePiece(WHITE, BEETLE, beneath=HivePiece(BLACK, BEETLE,
              beneath=HivePiece(WHITE, QUEEN_BEE)))

is a stack of height 3 whose visible top is the white Beetle.

A Beetle on the ground simply has ``beneath=None``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto

from hexhive.grid.base import Piece


class InvalidStackError(ValueError):
    """A piece was asked to carry, or climb onto, something it cannot."""


class Color(Enum):
    """The two players."""

    BLACK = auto()
    WHITE = auto()


class Bug(Enum):
    """Closed set of Hive bug kinds."""

    ANT = auto()
    BEETLE = auto()
    GRASSHOPPER = auto()
    QUEEN_BEE = auto()
    SPIDER = auto()


@dataclass(frozen=True)
class HivePiece(Piece):
    """A single bug, plus whatever it is standing on.

    Attributes:
        color: Owning player.
        bug: Which bug this is.
        beneath: The stack this piece has climbed onto.  Always None for
            anything but a Beetle.

    Raises:
        InvalidStackError: If a non-Beetle is given a ``beneath`` piece.
    """

    color: Color
    bug: Bug
    beneath: HivePiece | None = None

    def __post_init__(self) -> None:
        if self.beneath is not None and self.bug is not Bug.BEETLE:
            msg = f"{self.bug.name} cannot stand on another piece"
            raise InvalidStackError(msg)

    @property
    def is_stacked(self) -> bool:
        return self.beneath is not None

    @property
    def height(self) -> int:
        """Number of pieces in the stack, this one included."""
        height = 1
        below = self.beneath
        while below is not None:
            height += 1
            below = below.beneath
        return height

    @property
    def base(self) -> HivePiece:
        """The piece at the bottom of the stack."""
        piece = self
        while piece.beneath is not None:
            piece = piece.beneath
        return piece

    def stack(self) -> tuple[HivePiece, ...]:
        """Return the stack bottom-to-top, each piece detached from the rest."""
        layers: list[HivePiece] = []
        piece: HivePiece | None = self
        while piece is not None:
            layers.append(replace(piece, beneath=None))
            piece = piece.beneath
        return tuple(reversed(layers))

    def climb_onto(self, other: HivePiece) -> HivePiece:
        """Return this Beetle standing on top of ``other``.

        Args:
            other: The full stack currently at the target cell.

        Raises:
            InvalidStackError: If this piece is not a Beetle, or is already
                standing on something.
        """
        if self.bug is not Bug.BEETLE:
            msg = f"only a BEETLE can climb, not {self.bug.name}"
            raise InvalidStackError(msg)
        if self.beneath is not None:
            msg = "beetle must climb off its current stack first"
            raise InvalidStackError(msg)
        return replace(self, beneath=other)

    def climb_off(self) -> tuple[HivePiece, HivePiece | None]:
        """Split the top piece from the stack under it.

        Returns:
            ``(top, rest)`` where ``top`` has ``beneath=None`` and ``rest``
            is what remains at the cell (None if this piece was alone).
        """
        return replace(self, beneath=None), self.beneath
