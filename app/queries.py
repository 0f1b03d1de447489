from __future__ import annotations

from typing import List

from app.csv_records import Record


NAME_KEY = "item_name"
CATEGORY_KEY = "category"
SUPPLIER_KEY = "default_supplier"
ALT_SUPPLIER_KEY = "supplier_alternative"


def _text(item: Record, key: str) -> str:
    value = item.get(key, "")
    return value if isinstance(value, str) else str(value)


def get_categories(items: List[Record]) -> List[str]:
    return sorted({_text(i, CATEGORY_KEY) for i in items} - {""})


def get_suppliers(items: List[Record]) -> List[str]:
    suppliers = {_text(i, SUPPLIER_KEY) for i in items}
    suppliers.update(_text(i, ALT_SUPPLIER_KEY) for i in items)
    suppliers.discard("")
    return sorted(suppliers)


def search_items(items: List[Record], query: str) -> List[Record]:
    """Case-insensitive substring match on name, category and default supplier."""
    if not query.strip():
        return list(items)
    term = query.lower()
    return [
        i
        for i in items
        if term in _text(i, NAME_KEY).lower()
        or term in _text(i, CATEGORY_KEY).lower()
        or term in _text(i, SUPPLIER_KEY).lower()
    ]


def filter_by_category(items: List[Record], category: str) -> List[Record]:
    if not category:
        return list(items)
    return [i for i in items if _text(i, CATEGORY_KEY) == category]


def filter_by_supplier(items: List[Record], supplier: str) -> List[Record]:
    if not supplier:
        return list(items)
    return [
        i
        for i in items
        if _text(i, SUPPLIER_KEY) == supplier or _text(i, ALT_SUPPLIER_KEY) == supplier
    ]
