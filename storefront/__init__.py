"""
Storefront Core Module

This package contains the storefront backend components:
- db: Supabase client
- cart: session-scoped cart manager
- preview: draft preview/publish controllers for theme and site content
- services: repositories, database facade, Cloudinary media
- routers: FastAPI routers (public, cart, admin)

Note: Imports are lazy to avoid circular dependency issues
and ensure clean module loading in serverless environments.
"""

__all__ = [
    "get_supabase_sync",
    "is_supabase_configured",
]


def __getattr__(name):
    """Lazy attribute access for clean serverless loading."""
    if name == "get_supabase_sync":
        from storefront.db import get_supabase_sync
        return get_supabase_sync
    elif name == "is_supabase_configured":
        from storefront.db import is_supabase_configured
        return is_supabase_configured
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
