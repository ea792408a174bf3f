from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from shelfplace import schemas
from shelfplace.config import Settings, settings as default_settings
from shelfplace.logger import logger
from shelfplace.model import (
    AllocationEngine,
    Coordinate,
    ExpirationDate,
    Filter,
    Fragile,
    Item,
    MaxSpanFilter,
    MinFlexibilityFilter,
    Normal,
    Oversized,
    Quality,
    create_strategy,
)


class QualityAbstractFactory(ABC):
    """Converts one quality variant between request schemas and model values."""

    @abstractmethod
    def create_model(self, data: schemas.QualityBase) -> Quality:
        pass

    @abstractmethod
    def create_schema(self, quality: Quality) -> schemas.QualityBase:
        pass


class NormalFactory(QualityAbstractFactory):
    def create_model(self, data: schemas.NormalQuality) -> Normal:
        return Normal()

    def create_schema(self, quality: Normal) -> schemas.NormalQuality:
        return schemas.NormalQuality()


class FragileFactory(QualityAbstractFactory):
    def create_model(self, data: schemas.FragileQuality) -> Fragile:
        date = data.expiration_date
        return Fragile(
            expiration_date=ExpirationDate(date.day, date.month, date.year),
            max_row=data.max_row,
        )

    def create_schema(self, quality: Fragile) -> schemas.FragileQuality:
        date = quality.expiration_date
        return schemas.FragileQuality(
            expiration_date=schemas.DateBase(day=date.day, month=date.month, year=date.year),
            max_row=quality.max_row,
        )


class OversizedFactory(QualityAbstractFactory):
    def create_model(self, data: schemas.OversizedQuality) -> Oversized:
        return Oversized(span=data.span)

    def create_schema(self, quality: Oversized) -> schemas.OversizedQuality:
        return schemas.OversizedQuality(span=quality.span)


quality_factories: Dict[str, QualityAbstractFactory] = {
    "normal": NormalFactory(),
    "fragile": FragileFactory(),
    "oversized": OversizedFactory(),
}


def item_from_schema(data: schemas.ItemBase) -> Item:
    quality = quality_factories[data.quality.kind].create_model(data.quality)
    return Item(id=data.id, name=data.name, quantity=data.quantity, quality=quality)


def item_to_schema(item: Item) -> schemas.ItemBase:
    quality = quality_factories[item.quality.kind].create_schema(item.quality)
    return schemas.ItemBase(
        id=item.id, name=item.name, quantity=item.quantity, quality=quality
    )


def coordinate_to_schema(coordinate: Coordinate) -> schemas.CoordinateBase:
    return schemas.CoordinateBase(
        row=coordinate.row, shelf=coordinate.shelf, zone=coordinate.zone
    )


def create_filters(config: Settings) -> List[Filter]:
    filters: List[Filter] = []
    if config.max_span is not None:
        filters.append(MaxSpanFilter(config.max_span))
    if config.min_flexibility is not None:
        filters.append(MinFlexibilityFilter(config.min_flexibility))
    return filters


DEMO_ITEMS = (
    Item(id=1, name="Item1", quantity=1, quality=Normal()),
    Item(id=2, name="Item2", quantity=1, quality=Oversized(span=3)),
    Item(id=3, name="Item3", quantity=1, quality=Normal()),
    Item(id=4, name="Item4", quantity=1, quality=Oversized(span=3)),
    Item(
        id=5,
        name="Item5",
        quantity=1,
        quality=Fragile(expiration_date=ExpirationDate(1, 1, 1999), max_row=2),
    ),
)


def seed_demo(engine: AllocationEngine) -> None:
    for item in DEMO_ITEMS:
        engine.add(item)
    logger.info(f"Seeded {len(DEMO_ITEMS)} demo items")


def create_engine(config: Optional[Settings] = None) -> AllocationEngine:
    """Factory function to build an engine from configuration."""
    config = config or default_settings
    engine = AllocationEngine(
        strategy=create_strategy(config.strategy),
        filters=create_filters(config),
    )
    logger.info(f"Created engine {engine!r}")
    if config.seed_demo:
        seed_demo(engine)
    return engine
