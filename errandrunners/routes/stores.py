"""Store directory API routes"""

from fastapi import APIRouter, HTTPException, Query, Depends

from ..models.store import Store, StoreSummary
from ..core.dependencies import get_store_db
from ..database.stores import StoreDatabase

router = APIRouter(prefix="/api/stores", tags=["Stores"])


@router.get("", response_model=list[StoreSummary])
async def list_stores(
    open_only: bool = Query(False, description="Only show open stores"),
    stores: StoreDatabase = Depends(get_store_db),
):
    """List stores with their locations"""
    return [StoreSummary(**s.model_dump(exclude={"products"})) for s in stores.list_stores(open_only)]


@router.get("/{store_id}", response_model=Store)
async def get_store(store_id: str, stores: StoreDatabase = Depends(get_store_db)):
    """Get a store with its products"""
    store = stores.get_store(store_id)
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")
    return store
