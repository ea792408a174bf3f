from __future__ import annotations

from .entities import Item


class PlacementError(Exception):
    """Base class for recoverable engine failures."""


class BlockedByFilter(PlacementError):
    def __init__(self, item: Item) -> None:
        self.item = item
        super().__init__(f"The item {item} triggered some filter")


class FailedAllocation(PlacementError):
    def __init__(self, item: Item) -> None:
        self.item = item
        super().__init__(f"The allocator could not find a position for item {item}")


class FailedAdd(PlacementError):
    def __init__(self, item: Item, reason: str = "") -> None:
        self.item = item
        self.reason = reason
        message = f"Could not add item {item}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FailedRemove(PlacementError):
    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Could not remove item with Id {item_id}")
