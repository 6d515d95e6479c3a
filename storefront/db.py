"""
Database Module - Supabase client

Provides a lazily created singleton Supabase client. The service role key is
used server-side; row level security is enforced by the admin dependency in
`storefront.auth`, not by the key.
"""

from typing import Optional

from supabase import Client, create_client

from storefront import config

_supabase_client: Optional[Client] = None


def is_supabase_configured() -> bool:
    """True when both the project URL and key are present."""
    return bool(config.SUPABASE_URL and config.SUPABASE_SERVICE_ROLE_KEY)


def get_supabase_sync() -> Client:
    """
    Get synchronous Supabase client (singleton).

    Calls are blocking; async callers wrap them in `asyncio.to_thread`.
    """
    global _supabase_client

    if _supabase_client is None:
        if not is_supabase_configured():
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        _supabase_client = create_client(config.SUPABASE_URL, config.SUPABASE_SERVICE_ROLE_KEY)

    return _supabase_client


def reset_supabase_client() -> None:
    """Drop the cached client (used by tests and on credential rotation)."""
    global _supabase_client
    _supabase_client = None


class Tables:
    """Table names used across repositories."""

    PRODUCTS = "products"
    PRODUCT_IMAGES = "product_images"
    CATEGORIES = "categories"
    SERVICES = "services"
    PROMOTIONS = "promotions"
    REVIEWS = "reviews"
    CATALOGS = "catalogs"
    SITE_SETTINGS = "site_settings"
    SEASONAL_THEMES = "seasonal_themes"
    ADMIN_USERS = "admin_users"


class SettingKeys:
    """Well-known keys of the `site_settings` table."""

    SITE_CONTENT = "site_content"
