from __future__ import annotations

from typing import Optional

import httpx


class FetchError(Exception):
    """The spreadsheet export could not be retrieved."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


async def fetch_inventory_csv(url: str, *, timeout_seconds: float = 30) -> str:
    # Published sheet links answer with a redirect to the content host
    async with httpx.AsyncClient(timeout=timeout_seconds, follow_redirects=True) as client:
        try:
            r = await client.get(url)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise FetchError(f"HTTP error! status: {status}", status_code=status) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch inventory data: {e}") from e
        return r.text
