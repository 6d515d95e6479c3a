"""Admin user lookups (Supabase auth users granted panel access)."""
from storefront.db import Tables
from .base import BaseRepository


class AdminRepository(BaseRepository):
    table = Tables.ADMIN_USERS

    async def get_role(self, user_id: str) -> str | None:
        row = await self._first(self.query().select("role").eq("id", user_id).limit(1))
        return row.get("role") if row else None
