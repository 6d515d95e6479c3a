"""Product Repository - Product catalog operations."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from storefront.db import Tables
from storefront.services.models import Product
from .base import BaseRepository

PRODUCT_WITH_CATEGORY = "*, category:categories(id, name, slug)"
PRODUCT_WITH_DETAILS = (
    "*, category:categories(id, name, slug), images:product_images(id, url, alt, order)"
)


class ProductRepository(BaseRepository):
    """Product database operations."""

    table = Tables.PRODUCTS

    async def list(
        self,
        featured: bool = False,
        category_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        include_inactive: bool = False,
    ) -> list[Product]:
        """List products, newest first."""
        builder = self.query().select(PRODUCT_WITH_CATEGORY)
        if not include_inactive:
            builder = builder.eq("is_active", True)
        builder = builder.order("created_at", desc=True)

        if featured:
            builder = builder.eq("is_featured", True)
        if category_id:
            builder = builder.eq("category_id", category_id)
        if limit:
            builder = builder.limit(limit)
        if offset and limit:
            builder = builder.range(offset, offset + limit - 1)

        return [Product(**row) for row in await self._execute(builder)]

    async def get_by_slug(self, slug: str) -> Optional[Product]:
        row = await self._first(self.query().select(PRODUCT_WITH_DETAILS).eq("slug", slug).limit(1))
        return Product(**row) if row else None

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        row = await self._first(self.query().select(PRODUCT_WITH_DETAILS).eq("id", product_id).limit(1))
        return Product(**row) if row else None

    async def search(self, query: str) -> list[Product]:
        """Search active products by name or description."""
        builder = (
            self.query()
            .select(PRODUCT_WITH_CATEGORY)
            .eq("is_active", True)
            .or_(f"name.ilike.%{query}%,description.ilike.%{query}%")
            .limit(20)
        )
        return [Product(**row) for row in await self._execute(builder)]

    async def create(self, data: dict[str, Any]) -> Product:
        row = await self._first(self.query().insert(data))
        return Product(**row)

    async def update(self, product_id: str, data: dict[str, Any]) -> Optional[Product]:
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        row = await self._first(self.query().update(payload).eq("id", product_id))
        return Product(**row) if row else None
