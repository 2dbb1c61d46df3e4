"""Grid and Piece — the capability boundary of the grid layer.

``Piece`` is a marker: a type becomes storable in a grid by subclassing
it.  ``Grid`` is the contract every grid implementation satisfies and every
consumer (move generation, rendering, analysis) programs against.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from hexhive.grid.coord import Coord


class Piece(ABC):
    """Marker base for anything that can occupy a grid cell."""


P = TypeVar("P", bound=Piece)


class Grid(ABC, Generic[P]):
    """Abstract hex grid holding at most one piece per coordinate.

    Bounds are reported as ``(x, y)`` tuples.  An empty grid reports
    ``(0, 0)`` for both corners and ``0`` for both dimensions.
    """

    @abstractmethod
    def height(self) -> int:
        """Number of rows spanned by the bounding box."""

    @abstractmethod
    def width(self) -> int:
        """Number of columns spanned by the bounding box."""

    @abstractmethod
    def min(self) -> tuple[int, int]:
        """Smallest x and smallest y of any occupied coordinate.

        The pair itself need not be occupied, but some cell shares its x
        and some cell shares its y.
        """

    @abstractmethod
    def max(self) -> tuple[int, int]:
        """Largest x and largest y of any occupied coordinate."""

    @abstractmethod
    def add(self, coord: Coord, piece: P) -> None:
        """Place ``piece`` at ``coord``, replacing whatever was there."""

    @abstractmethod
    def remove(self, coord: Coord) -> None:
        """Clear ``coord``.  Clearing an empty coordinate does nothing."""

    @abstractmethod
    def at(self, coord: Coord) -> P | None:
        """Return the piece at ``coord``, or None if it is empty."""

    def occupied(self, coord: Coord) -> bool:
        return self.at(coord) is not None

    @abstractmethod
    def num_pieces(self) -> int:
        """Number of occupied coordinates."""

    @abstractmethod
    def adjacents(self, coord: Coord) -> list[Coord]:
        """Return the six neighbours of ``coord`` in a fixed order.

        Purely geometric: grid contents are never consulted.
        """
