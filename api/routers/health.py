from fastapi import APIRouter, Depends

from app.inventory import InventoryStore, get_store


router = APIRouter()


@router.get("/health")
def health(store: InventoryStore = Depends(get_store)) -> dict:
    # Degraded when nothing has loaded yet and the last fetch failed
    degraded = store.error is not None and store.fetched_at is None
    return {"status": "degraded" if degraded else "ok", "items": len(store.items)}
