"""DynamicHexGrid — sparse, unbounded hex grid.

Pieces live in a dict keyed by ``Coord``, so the board grows in every
direction without preallocation.  The bounding box is cached and only
recomputed lazily:

- Inserting a new coordinate or deleting an existing one marks the cache
  dirty; nothing else is done at mutation time.
- The next ``min``/``max``/``height``/``width`` call scans every key once,
  computing all four extrema together, and clears the flag.
- Further reads are O(1) until the next structural mutation.

Shrinking after removing an extreme cell therefore costs one scan at read
time instead of one per removal, and any burst of mutations between two
reads is coalesced into a single scan.

Neighbour topology uses offset rows: row ``y`` is shifted half a cell
relative to rows ``y - 1`` and ``y + 1``.  The six neighbours of ``(x, y)``
are always returned in ``Direction`` order::

    (x, y-1)  (x+1, y-1)
 (x-1, y)   (x, y)   (x+1, y)
    (x-1, y+1)  (x, y+1)

The grid is not thread-safe; bounds queries write the cache.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

from hexhive.grid.base import Grid, P
from hexhive.grid.coord import Coord

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """The six hex directions, valued by their position in ``adjacents``."""

    UP_LEFT = 0
    UP_RIGHT = 1
    LEFT = 2
    RIGHT = 3
    DOWN_LEFT = 4
    DOWN_RIGHT = 5

    @property
    def offset(self) -> tuple[int, int]:
        return HEX_OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        # Offsets are laid out so that mirrored directions sum to 5.
        return Direction(5 - self)


HEX_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
)


def neighbour(coord: Coord, direction: Direction) -> Coord:
    """Return the cell one step from ``coord`` in ``direction``.

    Raises:
        CoordinateOverflowError: If the step leaves the 16-bit range.
    """
    dx, dy = HEX_OFFSETS[direction]
    return coord.shifted(dx, dy)


@dataclass
class DynamicHexGrid(Grid[P]):
    """Sparse hex grid with a lazily recomputed bounding box.

    Two grids compare equal when they hold the same pieces at the same
    coordinates; cache state is ignored.
    """

    _pieces: dict[Coord, P] = field(default_factory=dict, init=False, repr=False)

    _min_max_dirty: bool = field(default=False, init=False, repr=False, compare=False)
    _min_x: int = field(default=0, init=False, repr=False, compare=False)
    _min_y: int = field(default=0, init=False, repr=False, compare=False)
    _max_x: int = field(default=0, init=False, repr=False, compare=False)
    _max_y: int = field(default=0, init=False, repr=False, compare=False)

    def _ensure_min_max(self) -> None:
        if self._min_max_dirty:
            self._recompute_bounds()

    def _recompute_bounds(self) -> None:
        """Rescan every key and refresh all four cached extrema."""
        if self._pieces:
            xy = np.array(
                [(c.x, c.y) for c in self._pieces],
                dtype=np.int32,
            )
            lo = xy.min(axis=0)
            hi = xy.max(axis=0)
            self._min_x, self._min_y = int(lo[0]), int(lo[1])
            self._max_x, self._max_y = int(hi[0]), int(hi[1])
        else:
            self._min_x = self._min_y = self._max_x = self._max_y = 0
        self._min_max_dirty = False
        logger.debug(
            "Recomputed bounds over %d pieces: (%d, %d)-(%d, %d)",
            len(self._pieces),
            self._min_x,
            self._min_y,
            self._max_x,
            self._max_y,
        )

    def min(self) -> tuple[int, int]:
        self._ensure_min_max()
        return (self._min_x, self._min_y)

    def max(self) -> tuple[int, int]:
        self._ensure_min_max()
        return (self._max_x, self._max_y)

    def height(self) -> int:
        # An empty grid's degenerate (0, 0)-(0, 0) box would otherwise read as 1.
        if self.num_pieces() == 0:
            return 0
        return self.max()[1] - self.min()[1] + 1

    def width(self) -> int:
        if self.num_pieces() == 0:
            return 0
        return self.max()[0] - self.min()[0] + 1

    def add(self, coord: Coord, piece: P) -> None:
        if coord not in self._pieces:
            self._min_max_dirty = True
        self._pieces[coord] = piece

    def remove(self, coord: Coord) -> None:
        if coord in self._pieces:
            del self._pieces[coord]
            self._min_max_dirty = True

    def at(self, coord: Coord) -> P | None:
        return self._pieces.get(coord)

    def num_pieces(self) -> int:
        return len(self._pieces)

    def adjacents(self, coord: Coord) -> list[Coord]:
        """Return the six neighbours of ``coord`` in ``Direction`` order.

        Raises:
            CoordinateOverflowError: If ``coord`` sits on the edge of the
                16-bit range and a neighbour cannot be represented.
        """
        return [coord.shifted(dx, dy) for dx, dy in HEX_OFFSETS]

    def coords(self) -> Iterator[Coord]:
        """Iterate over occupied coordinates in insertion order."""
        return iter(self._pieces)

    def items(self) -> Iterator[tuple[Coord, P]]:
        """Iterate over ``(coord, piece)`` pairs in insertion order."""
        return iter(self._pieces.items())

    def __len__(self) -> int:
        return len(self._pieces)

    def __bool__(self) -> bool:
        # A grid is a container object, truthy even when it holds nothing.
        return True

    def __contains__(self, coord: object) -> bool:
        return coord in self._pieces
