"""
Supabase Database Service

Provides the Database facade over the per-table repositories.

Usage:
    from storefront.services.database import get_database

    db = get_database()
    products = await db.products.list(featured=True)
    settings = await db.settings.get_all()
"""

from typing import Optional

from supabase import Client

from storefront.db import get_supabase_sync
from storefront.logging import get_logger
from storefront.services.repositories import (
    AdminRepository,
    CatalogRepository,
    CategoryRepository,
    ProductRepository,
    PromotionRepository,
    ReviewRepository,
    ServiceRepository,
    SettingsRepository,
    ThemeRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Supabase database client with one repository per table.

    Construct with an explicit client in tests; production code goes
    through `get_database()`.
    """

    def __init__(self, client: Client):
        self.client = client

        self.products = ProductRepository(client)
        self.categories = CategoryRepository(client)
        self.services = ServiceRepository(client)
        self.promotions = PromotionRepository(client)
        self.reviews = ReviewRepository(client)
        self.catalogs = CatalogRepository(client)
        self.settings = SettingsRepository(client)
        self.themes = ThemeRepository(client)
        self.admins = AdminRepository(client)

    async def is_admin(self, user_id: str) -> bool:
        return await self.admins.get_role(user_id) is not None


_database: Optional[Database] = None


def get_database() -> Database:
    """Get Database singleton (creates the Supabase client on first use)."""
    global _database
    if _database is None:
        _database = Database(get_supabase_sync())
        logger.info("Database initialized")
    return _database


def reset_database() -> None:
    global _database
    _database = None
