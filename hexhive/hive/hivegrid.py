"""HiveGrid — the Hive board.

A thin layer over ``DynamicHexGrid[HivePiece]``: every ``Grid`` operation
is forwarded unchanged, and the Hive-specific helpers are built on top of
them.  Occupancy always refers to the top-level value at a coordinate, so
a cell holding a three-high stack is one occupied cell.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from hexhive.grid.base import Grid
from hexhive.grid.coord import Coord
from hexhive.grid.dynhex import DynamicHexGrid
from hexhive.hive.pieces import Color, HivePiece, InvalidStackError

# 16M int16 cells, 32 MiB.
_MAX_HEIGHT_MAP_CELLS = 1 << 24


@dataclass
class HiveGrid(Grid[HivePiece]):
    """The Hive playing surface.

    Attributes:
        base_grid: Underlying sparse grid holding one stack per cell.
    """

    base_grid: DynamicHexGrid[HivePiece] = field(
        default_factory=DynamicHexGrid,
        repr=False,
    )

    def height(self) -> int:
        return self.base_grid.height()

    def width(self) -> int:
        return self.base_grid.width()

    def min(self) -> tuple[int, int]:
        return self.base_grid.min()

    def max(self) -> tuple[int, int]:
        return self.base_grid.max()

    def add(self, coord: Coord, piece: HivePiece) -> None:
        self.base_grid.add(coord, piece)

    def remove(self, coord: Coord) -> None:
        self.base_grid.remove(coord)

    def at(self, coord: Coord) -> HivePiece | None:
        return self.base_grid.at(coord)

    def num_pieces(self) -> int:
        return self.base_grid.num_pieces()

    def adjacents(self, coord: Coord) -> list[Coord]:
        return self.base_grid.adjacents(coord)

    def adjacent_occupied(self, coord: Coord) -> list[Coord]:
        """Neighbours of ``coord`` that hold a piece, in adjacency order."""
        return [c for c in self.adjacents(coord) if self.occupied(c)]

    def adjacent_empty(self, coord: Coord) -> list[Coord]:
        """Neighbours of ``coord`` that are free, in adjacency order."""
        return [c for c in self.adjacents(coord) if not self.occupied(c)]

    def stack_at(self, coord: Coord) -> tuple[HivePiece, ...]:
        """Return the pieces at ``coord`` bottom-to-top (empty if none)."""
        top = self.at(coord)
        return () if top is None else top.stack()

    def push(self, coord: Coord, piece: HivePiece) -> None:
        """Put ``piece`` on top of whatever stands at ``coord``.

        On an empty cell this is a plain ``add``.  On an occupied cell the
        existing stack becomes the piece's ``beneath`` and the combined
        stack replaces it.

        Raises:
            InvalidStackError: If ``piece`` is already carrying a stack, or
                ``coord`` is occupied and ``piece`` is not a Beetle.
        """
        if piece.is_stacked:
            msg = "piece must climb off its current stack before it is pushed"
            raise InvalidStackError(msg)
        existing = self.at(coord)
        if existing is None:
            self.add(coord, piece)
        else:
            self.add(coord, piece.climb_onto(existing))

    def pop(self, coord: Coord) -> HivePiece | None:
        """Lift the top piece off ``coord``.

        The piece beneath, if any, is left in place; otherwise the cell is
        cleared.

        Returns:
            The lifted piece with ``beneath=None``, or None if ``coord`` was
            empty.
        """
        existing = self.at(coord)
        if existing is None:
            return None
        top, rest = existing.climb_off()
        if rest is None:
            self.remove(coord)
        else:
            self.add(coord, rest)
        return top

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Coord, HivePiece]]:
        """Iterate over ``(coord, top piece)`` pairs.

        Args:
            color: If given, only cells whose top piece belongs to this
                player are yielded.
        """
        for coord, piece in self.base_grid.items():
            if color is None or piece.color is color:
                yield coord, piece

    def height_map(self, max_cells: int = _MAX_HEIGHT_MAP_CELLS) -> NDArray[np.int16]:
        """Return stack heights over the bounding box as a dense array.

        The array is indexed ``[y - min_y, x - min_x]``; empty cells are 0.
        An empty board yields a ``(0, 0)`` array.  Memory grows with the
        bounding box, not the piece count: two far-apart pieces span a
        huge mostly-empty array.

        Args:
            max_cells: Largest ``height * width`` allowed.

        Raises:
            ValueError: If the bounding box holds more than ``max_cells``
                cells.
        """
        cells = self.height() * self.width()
        if cells > max_cells:
            msg = (
                f"bounding box {self.width()}x{self.height()} exceeds "
                f"{max_cells} cells"
            )
            raise ValueError(msg)
        heights = np.zeros((self.height(), self.width()), dtype=np.int16)
        if self.num_pieces() == 0:
            return heights
        min_x, min_y = self.min()
        for coord, piece in self.base_grid.items():
            heights[coord.y - min_y, coord.x - min_x] = piece.height
        return heights
