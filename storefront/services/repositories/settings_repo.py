"""Site Settings Repository - key/value JSON settings."""
from datetime import datetime, timezone
from typing import Any

from storefront.db import Tables
from .base import BaseRepository


class SettingsRepository(BaseRepository):
    table = Tables.SITE_SETTINGS

    async def get_all(self) -> dict[str, Any]:
        """All settings as a `{key: value}` mapping."""
        rows = await self._execute(self.query().select("*"))
        return {row["key"]: row.get("value") for row in rows}

    async def get(self, key: str) -> Any:
        row = await self._first(self.query().select("value").eq("key", key).limit(1))
        return row.get("value") if row else None

    async def upsert(self, key: str, value: Any) -> dict[str, Any] | None:
        payload = {
            "key": key,
            "value": value,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        return await self._first(self.query().upsert(payload, on_conflict="key"))
