from __future__ import annotations

import logging
from datetime import datetime, UTC
from typing import Iterable, List, Optional

from app.csv_records import Record, parse_records
from app.settings import Settings, settings
from app.sources.sheets import FetchError, fetch_inventory_csv


logger = logging.getLogger(__name__)


class InventoryStore:
    """Current inventory list plus the loading flag and last error message."""

    def __init__(
        self,
        url: str,
        *,
        numeric_keys: Iterable[str] = (),
        required_key: Optional[str] = None,
        timeout_seconds: float = 30,
    ) -> None:
        self.url = url
        self.numeric_keys = set(numeric_keys)
        self.required_key = required_key
        self.timeout_seconds = timeout_seconds
        self.items: List[Record] = []
        self.loading = False
        self.error: Optional[str] = None
        self.fetched_at: Optional[datetime] = None

    @classmethod
    def from_settings(cls, cfg: Settings) -> "InventoryStore":
        return cls(
            cfg.inventory_csv_url,
            numeric_keys=cfg.numeric_keys,
            required_key=cfg.required_key,
            timeout_seconds=cfg.fetch_timeout_seconds,
        )

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    def set_error(self, message: Optional[str]) -> None:
        self.error = message

    def set_items(self, items: List[Record]) -> None:
        self.items = items
        self.fetched_at = datetime.now(UTC)

    async def refresh(self) -> List[Record]:
        self.set_loading(True)
        self.set_error(None)
        try:
            csv_text = await fetch_inventory_csv(self.url, timeout_seconds=self.timeout_seconds)
            self.set_items(
                parse_records(csv_text, self.numeric_keys, required_key=self.required_key)
            )
            logger.info("Loaded %d inventory items from %s", len(self.items), self.url)
        except FetchError as e:
            self.set_error(str(e))
            logger.error("Error fetching inventory data: %s", e)
        finally:
            self.set_loading(False)
        return self.items


_store: Optional[InventoryStore] = None


def get_store() -> InventoryStore:
    global _store
    if _store is None:
        _store = InventoryStore.from_settings(settings)
    return _store
