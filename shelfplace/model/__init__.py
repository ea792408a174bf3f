"""
Model package - the slot allocation core.

Re-exports:
- entities: Coordinate, ExpirationDate, qualities, Item, GridEntry
- grid: the fixed storage cube
- filters: admission predicates and the filter chain
- strategies: anchor search algorithms
- engine: AllocationEngine, the orchestrator keeping grid and indices in step
"""

from __future__ import annotations

from .entities import (
    GRID_SIZE,
    Coordinate,
    ExpirationDate,
    Normal,
    Fragile,
    Oversized,
    Quality,
    Item,
    GridEntry,
)
from .grid import Grid
from .errors import (
    PlacementError,
    BlockedByFilter,
    FailedAllocation,
    FailedAdd,
    FailedRemove,
)
from .filters import Filter, MaxSpanFilter, MinFlexibilityFilter, FilterChain
from .strategies import (
    Strategy,
    RowMajorScan,
    STRATEGIES,
    register_strategy,
    create_strategy,
)
from .engine import AllocationEngine

__all__ = [
    # Entities
    "GRID_SIZE",
    "Coordinate",
    "ExpirationDate",
    "Normal",
    "Fragile",
    "Oversized",
    "Quality",
    "Item",
    "GridEntry",
    "Grid",
    # Errors
    "PlacementError",
    "BlockedByFilter",
    "FailedAllocation",
    "FailedAdd",
    "FailedRemove",
    # Filters
    "Filter",
    "MaxSpanFilter",
    "MinFlexibilityFilter",
    "FilterChain",
    # Strategies
    "Strategy",
    "RowMajorScan",
    "STRATEGIES",
    "register_strategy",
    "create_strategy",
    # Engine
    "AllocationEngine",
]
