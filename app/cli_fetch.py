from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from app.csv_records import Record, parse_records
from app.queries import filter_by_category, filter_by_supplier, search_items
from app.settings import settings
from app.sources.sheets import FetchError, fetch_inventory_csv


def _format_row(item: Record) -> str:
    qty = item.get("order_quantity", "")
    unit = item.get("measure_unit", "")
    supplier = item.get("default_supplier", "")
    return f"{item.get('item_name', '')} | {item.get('category', '')} | {qty} {unit} | {supplier}".rstrip()


async def load_items(url: str) -> List[Record]:
    csv_text = await fetch_inventory_csv(url, timeout_seconds=settings.fetch_timeout_seconds)
    return parse_records(csv_text, settings.numeric_keys, required_key=settings.required_key)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch the inventory sheet and print matching items")
    parser.add_argument("--url", default=settings.inventory_csv_url, help="CSV export URL")
    parser.add_argument("--search", default="", help="Case-insensitive text search")
    parser.add_argument("--category", default="", help="Exact category")
    parser.add_argument("--supplier", default="", help="Exact default or alternative supplier")
    parser.add_argument("--json", action="store_true", help="Print items as a JSON array")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s | %(name)s | %(message)s")

    try:
        items = asyncio.run(load_items(args.url))
    except FetchError as e:
        print(f"Error fetching inventory data: {e}", file=sys.stderr)
        return 1

    rows = search_items(items, args.search)
    rows = filter_by_category(rows, args.category)
    rows = filter_by_supplier(rows, args.supplier)

    if args.json:
        print(json.dumps(rows, indent=2))
        return 0
    print(f"[inventory] {len(rows)} of {len(items)} items", flush=True)
    for r in rows:
        print(_format_row(r))
    return 0


if __name__ == "__main__":
    sys.exit(main())
