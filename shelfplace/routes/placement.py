import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from shelfplace import factories, schemas
from shelfplace.logger import logger
from shelfplace.model import (
    AllocationEngine,
    BlockedByFilter,
    ExpirationDate,
    FailedAdd,
    FailedAllocation,
    FailedRemove,
)

router = APIRouter(tags=["Placement"])


class EngineProvider:
    """Owns the single engine and serializes every call against it."""

    def __init__(self, engine: AllocationEngine) -> None:
        self._engine = engine
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[AllocationEngine]:
        with self._lock:
            yield self._engine


def get_provider(request: Request) -> EngineProvider:
    return request.app.state.engine_provider


@router.post(
    "/items/",
    response_model=schemas.PlacementResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_item(item: schemas.ItemCreate, provider: EngineProvider = Depends(get_provider)):
    model_item = factories.item_from_schema(item)
    try:
        with provider.locked() as engine:
            positions = engine.add(model_item)
    except BlockedByFilter as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (FailedAllocation, FailedAdd) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return {
        "item": factories.item_to_schema(model_item),
        "positions": [factories.coordinate_to_schema(c) for c in positions],
    }


@router.delete("/items/{item_id}", response_model=schemas.deleteResponse)
def remove_item(item_id: int, provider: EngineProvider = Depends(get_provider)):
    try:
        with provider.locked() as engine:
            item = engine.remove(item_id)
    except FailedRemove as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f"Removed item {item}"}


@router.get("/items/", response_model=List[schemas.ItemBase])
def list_alphabetical(provider: EngineProvider = Depends(get_provider)):
    with provider.locked() as engine:
        items = engine.alphabetical()
    return [factories.item_to_schema(item) for item in items]


@router.get("/items/by-name/{name:path}", response_model=schemas.ItemBase)
def get_by_name(name: str, provider: EngineProvider = Depends(get_provider)):
    with provider.locked() as engine:
        item = engine.find_by_name(name)
    if item is None:
        raise HTTPException(status_code=404, detail="No items correspond to provided Name")
    return factories.item_to_schema(item)


@router.get("/items/{item_id}", response_model=schemas.ItemBase)
def get_by_id(item_id: int, provider: EngineProvider = Depends(get_provider)):
    with provider.locked() as engine:
        item = engine.find_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="No items correspond to provided ID")
    return factories.item_to_schema(item)


@router.get("/items/{item_id}/positions", response_model=List[schemas.CoordinateBase])
def get_positions(item_id: int, provider: EngineProvider = Depends(get_provider)):
    with provider.locked() as engine:
        positions = engine.positions_of(item_id)
    if positions is None:
        raise HTTPException(status_code=404, detail="No items correspond to provided ID")
    return [factories.coordinate_to_schema(c) for c in positions]


@router.get("/expired/", response_model=List[schemas.ItemBase])
def list_expired(
    date: str = Query(description="dd-mm-yyyy"),
    provider: EngineProvider = Depends(get_provider),
):
    try:
        reference = ExpirationDate.parse(date)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    with provider.locked() as engine:
        expired: Optional[frozenset] = engine.expired(reference)
    if expired is None:
        logger.info(f"No expired items on {reference}")
        return []
    ordered = sorted(expired, key=lambda item: (item.quality.expiration_date.sort_key(), item.id))
    return [factories.item_to_schema(item) for item in ordered]


@router.get("/grid/", response_model=List[schemas.GridRow])
def list_grid(provider: EngineProvider = Depends(get_provider)):
    with provider.locked() as engine:
        placements = engine.placements()
    return [
        {
            "anchor": factories.coordinate_to_schema(anchor),
            "item": factories.item_to_schema(item),
        }
        for anchor, item in placements
    ]
