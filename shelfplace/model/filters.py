from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .entities import Fragile, Item, Oversized
from .grid import Grid


class Filter(ABC):
    """Admission predicate over a candidate item and the current grid."""

    name = "filter"

    @abstractmethod
    def check_allowed(self, item: Item, grid: Grid) -> bool:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({vars(self)})"


class MaxSpanFilter(Filter):
    """Oversized items must not be larger than ``cutoff``."""

    name = "max_span"

    def __init__(self, cutoff: int) -> None:
        self.cutoff = cutoff

    def check_allowed(self, item: Item, grid: Grid) -> bool:
        if isinstance(item.quality, Oversized):
            return item.quality.span <= self.cutoff
        return True


class MinFlexibilityFilter(Filter):
    """Fragile items must at least allow rows below ``cutoff``."""

    name = "min_flexibility"

    def __init__(self, cutoff: int) -> None:
        self.cutoff = cutoff

    def check_allowed(self, item: Item, grid: Grid) -> bool:
        if isinstance(item.quality, Fragile):
            return item.quality.max_row >= self.cutoff
        return True


class FilterChain:
    def __init__(self, filters: Optional[Iterable[Filter]] = None) -> None:
        self.filters: List[Filter] = list(filters or [])

    def rejecting(self, item: Item, grid: Grid) -> Optional[Filter]:
        """First filter that refuses ``item``, or None when all admit it."""
        for filt in self.filters:
            if not filt.check_allowed(item, grid):
                return filt
        return None

    def admit(self, item: Item, grid: Grid) -> bool:
        return self.rejecting(item, grid) is None

    def __len__(self) -> int:
        return len(self.filters)

    def __iter__(self):
        return iter(self.filters)
