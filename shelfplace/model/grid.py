from __future__ import annotations

from itertools import product
from numbers import Integral
from typing import Dict, Iterator, Tuple

import numpy as np

from .entities import FREE, GRID_SIZE, Coordinate, GridEntry, Item


class Grid:
    """Fixed cube of storage cells.

    Every coordinate in ``[0, size)^3`` always has exactly one entry. Occupancy
    is kept in a boolean numpy mask indexed ``[row, shelf, zone]`` and the
    resident item of an anchor cell in a dict keyed by coordinate, so the key
    set never changes after construction; only values do.
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size < 1:
            raise ValueError("grid size must be positive")
        self.size = size
        self._occupied = np.zeros((size, size, size), dtype=np.bool_)
        self._residents: Dict[Coordinate, Item] = {}

    def _key(self, coordinate) -> Coordinate:
        if coordinate not in self:
            raise KeyError(coordinate)
        return Coordinate(*(int(c) for c in coordinate))

    def get(self, coordinate: Coordinate) -> GridEntry:
        coordinate = self._key(coordinate)
        if not self._occupied[coordinate.row, coordinate.shelf, coordinate.zone]:
            return FREE
        return GridEntry(occupied=True, item=self._residents.get(coordinate))

    def set(self, coordinate: Coordinate, entry: GridEntry) -> None:
        coordinate = self._key(coordinate)
        if entry.item is not None and not entry.occupied:
            raise ValueError(f"free cell {coordinate} cannot hold an item")
        self._occupied[coordinate.row, coordinate.shelf, coordinate.zone] = entry.occupied
        if entry.item is None:
            self._residents.pop(coordinate, None)
        else:
            self._residents[coordinate] = entry.item

    def is_occupied(self, coordinate: Coordinate) -> bool:
        coordinate = self._key(coordinate)
        return bool(self._occupied[coordinate.row, coordinate.shelf, coordinate.zone])

    def span_is_free(self, anchor: Coordinate, span: int) -> bool:
        """True iff ``span`` cells from ``anchor`` along the zone axis fit and are all free."""
        anchor = self._key(anchor)
        if span < 1 or anchor.zone + span > self.size:
            return False
        cells = self._occupied[anchor.row, anchor.shelf, anchor.zone:anchor.zone + span]
        return not cells.any()

    def coordinates(self) -> Iterator[Coordinate]:
        # row outer, shelf middle, zone inner
        for row, shelf, zone in product(range(self.size), repeat=3):
            yield Coordinate(row, shelf, zone)

    def residents(self) -> Iterator[Tuple[Coordinate, Item]]:
        for coordinate in sorted(self._residents):
            yield coordinate, self._residents[coordinate]

    def occupied_count(self) -> int:
        return int(self._occupied.sum())

    def occupancy(self) -> np.ndarray:
        """Read-only view of the occupancy mask."""
        view = self._occupied.view()
        view.flags.writeable = False
        return view

    def __contains__(self, coordinate: object) -> bool:
        return (
            isinstance(coordinate, tuple)
            and len(coordinate) == 3
            and all(
                isinstance(c, Integral) and not isinstance(c, bool) and 0 <= c < self.size
                for c in coordinate
            )
        )

    def __len__(self) -> int:
        return self.size ** 3

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, occupied={self.occupied_count()})"
