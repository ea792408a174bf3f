from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import NamedTuple, Optional, Union

GRID_SIZE = 10


class Coordinate(NamedTuple):
    row: int
    shelf: int
    zone: int

    @classmethod
    def checked(cls, row: int, shelf: int, zone: int, size: int = GRID_SIZE) -> "Coordinate":
        for axis, value in (("row", row), ("shelf", shelf), ("zone", zone)):
            if not 0 <= value < size:
                raise ValueError(f"{axis} {value} is outside [0, {size})")
        return cls(row, shelf, zone)

    def shifted(self, zones: int) -> "Coordinate":
        """Same row and shelf, ``zones`` cells further along."""
        return Coordinate(self.row, self.shelf, self.zone + zones)

    def __str__(self) -> str:
        return f"({self.row}, {self.shelf}, {self.zone})"


@total_ordering
@dataclass(frozen=True)
class ExpirationDate:
    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        if not 1 <= self.day <= 31:
            raise ValueError(f"day {self.day} is outside [1, 31]")
        if not 1 <= self.month <= 12:
            raise ValueError(f"month {self.month} is outside [1, 12]")
        if self.year < 0:
            raise ValueError("year must be non-negative")

    @classmethod
    def parse(cls, raw: str) -> "ExpirationDate":
        """Parse ``dd-mm-yyyy``."""
        parts = [p.strip() for p in raw.strip().split("-")]
        if len(parts) != 3:
            raise ValueError(f"Invalid Date Format: {raw.strip()}")
        try:
            day, month, year = (int(p) for p in parts)
        except ValueError:
            raise ValueError(f"Invalid Date Format: {raw.strip()}") from None
        return cls(day, month, year)

    def sort_key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: "ExpirationDate") -> bool:
        if not isinstance(other, ExpirationDate):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.day:02d}-{self.month:02d}-{self.year}"


@dataclass(frozen=True)
class Normal:
    kind = "normal"

    @property
    def cells(self) -> int:
        return 1

    def __str__(self) -> str:
        return "Normal"


@dataclass(frozen=True)
class Fragile:
    expiration_date: ExpirationDate
    max_row: int
    kind = "fragile"

    @property
    def cells(self) -> int:
        return 1

    def __str__(self) -> str:
        return f"Fragile (Expiration: {self.expiration_date}, Row: {self.max_row})"


@dataclass(frozen=True)
class Oversized:
    span: int
    kind = "oversized"

    def __post_init__(self) -> None:
        if self.span < 1:
            raise ValueError("span must be at least 1")

    @property
    def cells(self) -> int:
        return self.span

    def __str__(self) -> str:
        return f"Oversized (Continuous Zones: {self.span})"


Quality = Union[Normal, Fragile, Oversized]


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    quantity: int
    quality: Quality = Normal()

    def __str__(self) -> str:
        return f"{self.id} - {self.name}, quantity: {self.quantity}, quality: {self.quality}"


@dataclass(frozen=True)
class GridEntry:
    """Value stored per cell. ``item`` is only set on an item's anchor."""

    occupied: bool = False
    item: Optional[Item] = None

    @property
    def is_anchor(self) -> bool:
        return self.item is not None


FREE = GridEntry()
