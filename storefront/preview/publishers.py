"""Write-through targets for published drafts."""
from typing import Callable

from storefront.content import SiteContent
from storefront.db import SettingKeys
from storefront.logging import get_logger
from storefront.services.database import Database, get_database
from storefront.themes import SeasonalTheme

logger = get_logger(__name__)


class ContentPublisher:
    """Upserts the `site_content` setting."""

    def __init__(self, db_provider: Callable[[], Database] = get_database):
        self._db_provider = db_provider

    async def __call__(self, content: SiteContent) -> bool:
        db = self._db_provider()
        await db.settings.upsert(SettingKeys.SITE_CONTENT, content.to_json())
        return True


class ThemePublisher:
    """Saves the theme by slug and makes it the only active theme."""

    def __init__(self, db_provider: Callable[[], Database] = get_database):
        self._db_provider = db_provider

    async def __call__(self, theme: SeasonalTheme) -> bool:
        db = self._db_provider()
        row, created = await db.themes.save_by_slug(theme.to_row(is_active=True))
        logger.info(f"Theme {row.slug} {'created' if created else 'updated'} and activated")
        return True
