"""Category Repository."""
from __future__ import annotations

from typing import Any, Optional

from storefront.db import Tables
from storefront.services.models import Category
from .base import BaseRepository


class CategoryRepository(BaseRepository):
    """Category database operations (manually ordered)."""

    table = Tables.CATEGORIES

    async def list(self) -> list[Category]:
        rows = await self._execute(self.query().select("*").order("order"))
        return [Category(**row) for row in rows]

    async def create(self, data: dict[str, Any]) -> Category:
        payload = {**data, "order": await self._next_order()}
        row = await self._first(self.query().insert(payload))
        return Category(**row)

    async def update(self, category_id: str, data: dict[str, Any]) -> Optional[Category]:
        row = await self._first(self.query().update(data).eq("id", category_id))
        return Category(**row) if row else None
