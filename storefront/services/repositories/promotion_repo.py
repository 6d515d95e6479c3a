"""Promotion Repository."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Optional

from storefront.db import Tables
from storefront.services.models import Promotion
from .base import BaseRepository

DEFAULT_PROMOTION_DAYS = 30


class PromotionRepository(BaseRepository):
    table = Tables.PROMOTIONS

    async def list(self, include_inactive: bool = False) -> list[Promotion]:
        builder = self.query().select("*")
        if not include_inactive:
            builder = builder.eq("is_active", True)
        rows = await self._execute(builder.order("created_at", desc=True))
        return [Promotion(**row) for row in rows]

    async def create(self, data: dict[str, Any]) -> Promotion:
        """Insert a promotion; percentage discount running 30 days from today unless given."""
        today = date.today()
        payload = {
            **data,
            "discount_type": data.get("discount_type") or "percentage",
            "start_date": data.get("start_date") or today.isoformat(),
            "end_date": data.get("end_date")
            or (today + timedelta(days=DEFAULT_PROMOTION_DAYS)).isoformat(),
        }
        row = await self._first(self.query().insert(payload))
        return Promotion(**row)

    async def update(self, promotion_id: str, data: dict[str, Any]) -> Optional[Promotion]:
        row = await self._first(self.query().update(data).eq("id", promotion_id))
        return Promotion(**row) if row else None
