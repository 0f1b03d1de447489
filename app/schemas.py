from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class InventoryItem(BaseModel):
    # Sheets may carry extra columns; they pass through untouched
    model_config = ConfigDict(extra="allow")

    item_name: str = ""
    category: str = ""
    default_supplier: str = ""
    supplier_alternative: str = ""
    order_quantity: float = 0
    measure_unit: str = ""
    default_quantity: float = 0
    brand_tag: str = ""


class ItemsResponse(BaseModel):
    count: int
    loading: bool
    error: Optional[str] = None
    items: List[InventoryItem]


class InventoryStatus(BaseModel):
    loading: bool
    error: Optional[str] = None
    count: int
    fetched_at: Optional[datetime] = None
