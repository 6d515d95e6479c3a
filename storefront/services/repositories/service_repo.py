"""Service Repository - printing, sublimation and other in-store services."""
from __future__ import annotations

from typing import Any, Optional

from storefront.db import Tables
from storefront.services.models import Service
from .base import BaseRepository


class ServiceRepository(BaseRepository):
    """Service database operations (manually ordered).

    Lists include inactive rows; the admin panel needs them.
    """

    table = Tables.SERVICES

    async def list(self) -> list[Service]:
        rows = await self._execute(self.query().select("*").order("order"))
        return [Service(**row) for row in rows]

    async def create(self, data: dict[str, Any]) -> Service:
        payload = {**data, "order": await self._next_order()}
        row = await self._first(self.query().insert(payload))
        return Service(**row)

    async def update(self, service_id: str, data: dict[str, Any]) -> Optional[Service]:
        row = await self._first(self.query().update(data).eq("id", service_id))
        return Service(**row) if row else None
