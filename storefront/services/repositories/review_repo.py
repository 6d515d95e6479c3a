"""Review Repository - testimonials shown on the home page."""
from __future__ import annotations

from typing import Any, Optional

from storefront.db import Tables
from storefront.services.models import Review
from .base import BaseRepository


class ReviewRepository(BaseRepository):
    table = Tables.REVIEWS

    async def list(self, featured: bool = False, include_inactive: bool = False) -> list[Review]:
        builder = self.query().select("*").order("created_at", desc=True)
        if not include_inactive:
            builder = builder.eq("is_active", True)
        if featured:
            builder = builder.eq("is_featured", True)
        return [Review(**row) for row in await self._execute(builder)]

    async def create(self, data: dict[str, Any]) -> Review:
        row = await self._first(self.query().insert(data))
        return Review(**row)

    async def update(self, review_id: str, data: dict[str, Any]) -> Optional[Review]:
        row = await self._first(self.query().update(data).eq("id", review_id))
        return Review(**row) if row else None
