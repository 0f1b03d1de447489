from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from app.inventory import InventoryStore, get_store
from app.queries import (
    filter_by_category,
    filter_by_supplier,
    get_categories,
    get_suppliers,
    search_items,
)
from app.schemas import InventoryItem, InventoryStatus, ItemsResponse


router = APIRouter(prefix="/items")


def _status(store: InventoryStore) -> InventoryStatus:
    return InventoryStatus(
        loading=store.loading,
        error=store.error,
        count=len(store.items),
        fetched_at=store.fetched_at,
    )


@router.get("", response_model=ItemsResponse)
def list_items(
    q: Optional[str] = None,
    category: Optional[str] = None,
    supplier: Optional[str] = None,
    store: InventoryStore = Depends(get_store),
):
    rows = search_items(store.items, q or "")
    rows = filter_by_category(rows, category or "")
    rows = filter_by_supplier(rows, supplier or "")
    return ItemsResponse(
        count=len(rows),
        loading=store.loading,
        error=store.error,
        items=[InventoryItem(**r) for r in rows],
    )


@router.get("/categories", response_model=List[str])
def list_categories(store: InventoryStore = Depends(get_store)):
    return get_categories(store.items)


@router.get("/suppliers", response_model=List[str])
def list_suppliers(store: InventoryStore = Depends(get_store)):
    return get_suppliers(store.items)


@router.get("/status", response_model=InventoryStatus)
def status(store: InventoryStore = Depends(get_store)):
    return _status(store)


@router.post("/refresh", response_model=InventoryStatus)
async def refresh(store: InventoryStore = Depends(get_store)):
    await store.refresh()
    if store.error:
        raise HTTPException(status_code=502, detail=store.error)
    return _status(store)
