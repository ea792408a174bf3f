from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from ..logger import logger
from .entities import FREE, Coordinate, ExpirationDate, Fragile, GridEntry, Item
from .errors import BlockedByFilter, FailedAdd, FailedAllocation, FailedRemove
from .filters import Filter, FilterChain
from .grid import Grid
from .strategies import RowMajorScan, Strategy


class AllocationEngine:
    """Owns the grid, the strategy, the filter chain and the three indices.

    ``add`` runs filter chain -> strategy -> grid mutation -> index update and
    ``remove`` runs id index -> grid release -> index cleanup. A failing call
    leaves every structure as it found it.
    """

    def __init__(
        self,
        strategy: Optional[Strategy] = None,
        filters: Optional[Iterable[Filter]] = None,
        grid: Optional[Grid] = None,
    ) -> None:
        self.grid = grid if grid is not None else Grid()
        self.strategy = strategy if strategy is not None else RowMajorScan()
        self.filter_chain = FilterChain(filters)
        self._by_id: Dict[int, Item] = {}
        self._by_name: Dict[str, Item] = {}
        self._positions: Dict[int, Tuple[Coordinate, ...]] = {}

    def configure_filters(self, filters: Iterable[Filter]) -> None:
        self.filter_chain = FilterChain(filters)

    # ---- mutations ----

    def add(self, item: Item) -> Tuple[Coordinate, ...]:
        rejecting = self.filter_chain.rejecting(item, self.grid)
        if rejecting is not None:
            logger.warning(f"Item {item.id} blocked by filter {rejecting.name}")
            raise BlockedByFilter(item)

        if item.id in self._by_id:
            logger.warning(f"Rejected item {item.id}: id already placed")
            raise FailedAdd(item, "id already placed")
        if item.name in self._by_name:
            logger.warning(f"Rejected item {item.id}: name {item.name!r} already placed")
            raise FailedAdd(item, "name already placed")

        anchor = self.strategy.allocate(item, self.grid)
        if anchor is None:
            logger.warning(f"{self.strategy.name} found no position for item {item.id}")
            raise FailedAllocation(item)

        if anchor not in self.grid or not self.grid.span_is_free(anchor, item.quality.cells):
            logger.error(f"{self.strategy.name} returned unusable position {anchor} for item {item.id}")
            raise FailedAdd(item, f"position {anchor} is not free")

        positions = tuple(anchor.shifted(k) for k in range(item.quality.cells))
        self.grid.set(anchor, GridEntry(occupied=True, item=item))
        for coordinate in positions[1:]:
            self.grid.set(coordinate, GridEntry(occupied=True))
        self._positions[item.id] = positions
        self._by_id[item.id] = item
        self._by_name[item.name] = item

        if self.grid.get(anchor).item != item:
            logger.error(f"Anchor {anchor} does not hold item {item.id} after placement")
            self._release(item)
            raise FailedAdd(item, f"anchor {anchor} does not hold the item")

        logger.info(f"Placed item {item.id} ({item.name}) at {', '.join(map(str, positions))}")
        return positions

    def remove(self, item_id: int) -> Item:
        item = self._by_id.get(item_id)
        if item is None:
            logger.warning(f"Cannot remove item {item_id}: not placed")
            raise FailedRemove(item_id)
        self._release(item)
        logger.info(f"Removed item {item_id} ({item.name})")
        return item

    def _release(self, item: Item) -> None:
        for coordinate in self._positions.pop(item.id, ()):
            self.grid.set(coordinate, FREE)
        self._by_id.pop(item.id, None)
        if self._by_name.get(item.name) == item:
            del self._by_name[item.name]

    # ---- queries ----

    def alphabetical(self) -> List[Item]:
        return sorted(
            (item for _, item in self.grid.residents()),
            key=lambda item: item.name.lower(),
        )

    def find_by_id(self, item_id: int) -> Optional[Item]:
        return self._by_id.get(item_id)

    def find_by_name(self, name: str) -> Optional[Item]:
        return self._by_name.get(name)

    def positions_of(self, item_id: int) -> Optional[Tuple[Coordinate, ...]]:
        return self._positions.get(item_id)

    def expired(self, reference_date: ExpirationDate) -> Optional[FrozenSet[Item]]:
        """Fragile items whose expiration date is on or before ``reference_date``."""
        expired_items = frozenset(
            item
            for _, item in self.grid.residents()
            if isinstance(item.quality, Fragile)
            and item.quality.expiration_date <= reference_date
        )
        return expired_items or None

    def placements(self) -> List[Tuple[Coordinate, Item]]:
        return list(self.grid.residents())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __str__(self) -> str:
        return "".join(f"{coordinate} -> {item}\n" for coordinate, item in self.placements())

    def __repr__(self) -> str:
        return (
            f"AllocationEngine(strategy={self.strategy!r}, "
            f"filters={self.filter_chain.filters!r}, items={len(self)})"
        )
