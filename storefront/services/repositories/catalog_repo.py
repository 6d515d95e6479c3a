"""Catalog Repository - downloadable PDF catalogs."""
from __future__ import annotations

from typing import Any, Optional

from storefront.db import Tables
from storefront.services.models import Catalog
from .base import BaseRepository


class CatalogRepository(BaseRepository):
    table = Tables.CATALOGS

    async def list(self, include_inactive: bool = False) -> list[Catalog]:
        builder = self.query().select("*")
        if not include_inactive:
            builder = builder.eq("is_active", True)
        rows = await self._execute(builder.order("created_at", desc=True))
        return [Catalog(**row) for row in rows]

    async def create(self, data: dict[str, Any]) -> Catalog:
        row = await self._first(self.query().insert(data))
        return Catalog(**row)

    async def update(self, catalog_id: str, data: dict[str, Any]) -> Optional[Catalog]:
        row = await self._first(self.query().update(data).eq("id", catalog_id))
        return Catalog(**row) if row else None
