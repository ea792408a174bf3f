from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .entities import Coordinate, Fragile, Item, Normal, Oversized
from .grid import Grid


class Strategy(ABC):
    """Searches the grid for an anchor coordinate. Must not mutate the grid."""

    name = "strategy"

    @abstractmethod
    def allocate(self, item: Item, grid: Grid) -> Optional[Coordinate]:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RowMajorScan(Strategy):
    """First free coordinate in ascending (row, shelf, zone) order that fits the item."""

    name = "row_major"

    def is_position_valid(self, coordinate: Coordinate, item: Item, grid: Grid) -> bool:
        quality = item.quality
        if isinstance(quality, Normal):
            return True
        if isinstance(quality, Fragile):
            return coordinate.row < quality.max_row
        if isinstance(quality, Oversized):
            return grid.span_is_free(coordinate, quality.span)
        raise TypeError(f"unknown quality {quality!r}")

    def allocate(self, item: Item, grid: Grid) -> Optional[Coordinate]:
        for coordinate in grid.coordinates():
            if grid.is_occupied(coordinate):
                continue
            if self.is_position_valid(coordinate, item, grid):
                return coordinate
        return None


STRATEGIES: Dict[str, Type[Strategy]] = {
    RowMajorScan.name: RowMajorScan,
}


def register_strategy(cls: Type[Strategy]) -> Type[Strategy]:
    STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str) -> Strategy:
    """Factory function to create a strategy by its registered name."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"unknown strategy {name!r}, expected one of {sorted(STRATEGIES)}"
        ) from None
