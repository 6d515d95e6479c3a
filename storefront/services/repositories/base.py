"""Base repository with shared Supabase client."""

import asyncio
from typing import Any

from supabase import Client


class BaseRepository:
    """Base class for all repositories.

    The sync client blocks, so every query is executed in a worker thread.
    """

    table: str = ""

    def __init__(self, client: Client) -> None:
        self.client = client

    def query(self):
        return self.client.table(self.table)

    async def _execute(self, builder) -> list[dict[str, Any]]:
        """Run a built query off the event loop and return its rows."""
        result = await asyncio.to_thread(builder.execute)
        return result.data or []

    async def _first(self, builder) -> dict[str, Any] | None:
        rows = await self._execute(builder)
        return rows[0] if rows else None

    async def _next_order(self) -> int:
        """Position for a new row in a manually ordered table (last + 1)."""
        last = await self._first(
            self.query().select("order").order("order", desc=True).limit(1)
        )
        return (last.get("order") or 0) + 1 if last else 1

    async def delete(self, row_id: str) -> None:
        await self._execute(self.query().delete().eq("id", row_id))
