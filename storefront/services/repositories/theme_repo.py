"""Seasonal Theme Repository.

At most one theme is active; activating a theme deactivates the others
first. Theme slugs are unique and `save_by_slug` updates in place.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from storefront.db import Tables
from storefront.services.models import SeasonalThemeRow
from .base import BaseRepository

# Columns an admin may write through `save_by_slug`
_THEME_FIELDS = ("name", "primary_color", "secondary_color", "accent_color", "banner_image")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ThemeRepository(BaseRepository):
    table = Tables.SEASONAL_THEMES

    async def list(self, slug: Optional[str] = None) -> list[SeasonalThemeRow]:
        builder = self.query().select("*").order("created_at", desc=True)
        if slug:
            builder = builder.eq("slug", slug)
        return [SeasonalThemeRow(**row) for row in await self._execute(builder)]

    async def get_active(self) -> Optional[SeasonalThemeRow]:
        row = await self._first(
            self.query()
            .select("*")
            .eq("is_active", True)
            .order("updated_at", desc=True)
            .limit(1)
        )
        return SeasonalThemeRow(**row) if row else None

    async def get_by_id(self, theme_id: str) -> Optional[SeasonalThemeRow]:
        row = await self._first(self.query().select("*").eq("id", theme_id).limit(1))
        return SeasonalThemeRow(**row) if row else None

    async def get_by_slug(self, slug: str) -> Optional[SeasonalThemeRow]:
        row = await self._first(self.query().select("*").eq("slug", slug).limit(1))
        return SeasonalThemeRow(**row) if row else None

    async def deactivate_all(self, except_id: Optional[str] = None) -> None:
        builder = self.query().update({"is_active": False})
        if except_id:
            builder = builder.neq("id", except_id)
        else:
            builder = builder.eq("is_active", True)
        await self._execute(builder)

    async def save_by_slug(self, data: dict[str, Any]) -> tuple[SeasonalThemeRow, bool]:
        """
        Create a theme or update the one sharing its slug.

        Returns:
            (theme, created)
        """
        is_active = bool(data.get("is_active", False))
        if is_active:
            await self.deactivate_all()

        fields = {name: data.get(name) for name in _THEME_FIELDS}
        existing = await self._first(self.query().select("id").eq("slug", data["slug"]).limit(1))

        if existing:
            payload = {**fields, "is_active": is_active, "updated_at": _now().isoformat()}
            row = await self._first(self.query().update(payload).eq("id", existing["id"]))
            return SeasonalThemeRow(**row), False

        now = _now()
        try:
            one_year_later = now.replace(year=now.year + 1)
        except ValueError:  # Feb 29
            one_year_later = now.replace(year=now.year + 1, day=28)
        payload = {
            **fields,
            "slug": data["slug"],
            "banner_image": fields["banner_image"] or None,
            "is_active": is_active,
            "start_date": now.isoformat(),
            "end_date": one_year_later.isoformat(),
        }
        row = await self._first(self.query().insert(payload))
        return SeasonalThemeRow(**row), True

    async def update(self, theme_id: str, data: dict[str, Any]) -> Optional[SeasonalThemeRow]:
        if data.get("is_active") is True:
            await self.deactivate_all(except_id=theme_id)
        payload = {**data, "updated_at": _now().isoformat()}
        row = await self._first(self.query().update(payload).eq("id", theme_id))
        return SeasonalThemeRow(**row) if row else None

    async def activate(self, theme_id: str) -> Optional[SeasonalThemeRow]:
        return await self.update(theme_id, {"is_active": True})
