import os

os.environ.setdefault("SHELFPLACE_LOG_DIR", "")
os.environ.setdefault("SHELFPLACE_SEED_DEMO", "false")

import pytest  # noqa: E402

from shelfplace.model import (  # noqa: E402
    AllocationEngine,
    ExpirationDate,
    Fragile,
    Item,
    MaxSpanFilter,
    MinFlexibilityFilter,
    Normal,
    Oversized,
)


@pytest.fixture
def engine():
    return AllocationEngine()


@pytest.fixture
def filtered_engine():
    return AllocationEngine(filters=[MaxSpanFilter(3), MinFlexibilityFilter(2)])


def normal(item_id, name=None):
    return Item(id=item_id, name=name or f"Item{item_id}", quantity=1, quality=Normal())


def oversized(item_id, span, name=None):
    return Item(id=item_id, name=name or f"Item{item_id}", quantity=1, quality=Oversized(span))


def fragile(item_id, max_row, date=(1, 1, 1999), name=None):
    return Item(
        id=item_id,
        name=name or f"Item{item_id}",
        quantity=1,
        quality=Fragile(expiration_date=ExpirationDate(*date), max_row=max_row),
    )
