"""
Shared Dependencies for Routers

Database access, session lookups and the response headers that carry
session tokens back to the client.
"""

from typing import Optional

from fastapi import Header, HTTPException, Response

from storefront.cart import CartSession, get_cart_store
from storefront.content import SiteContent, merge_site_content
from storefront.db import SettingKeys, is_supabase_configured
from storefront.errors import ERROR_SUPABASE_NOT_CONFIGURED
from storefront.preview import AdminPreviewSession, get_preview_store
from storefront.services.database import Database, get_database

CART_SESSION_HEADER = "X-Cart-Session"
PREVIEW_SESSION_HEADER = "X-Preview-Session"


# ==================== DATABASE ====================

def optional_database() -> Optional[Database]:
    """Database for public reads; None when Supabase is not configured."""
    if not is_supabase_configured():
        return None
    return get_database()


def require_database() -> Database:
    """Database for writes; 503 when Supabase is not configured."""
    if not is_supabase_configured():
        raise HTTPException(status_code=503, detail=ERROR_SUPABASE_NOT_CONFIGURED)
    return get_database()


async def load_site_content(db: Optional[Database]) -> SiteContent:
    """Persisted site content overlaid on the defaults."""
    stored = await db.settings.get(SettingKeys.SITE_CONTENT) if db else None
    return merge_site_content(stored)


async def effective_site_content(
    db: Optional[Database],
    preview: Optional[AdminPreviewSession],
) -> SiteContent:
    """Site content as the caller sees it: the admin's draft while previewing."""
    persisted = await load_site_content(db)
    if preview is None:
        return persisted
    preview.content.load_persisted(persisted)
    return preview.content.effective_value()


# ==================== SESSIONS ====================

def get_cart_session(
    response: Response,
    x_cart_session: Optional[str] = Header(None, alias=CART_SESSION_HEADER),
) -> CartSession:
    """Cart for the caller's session, issuing a new session token when needed."""
    token, cart = get_cart_store().get_or_create(x_cart_session)
    response.headers[CART_SESSION_HEADER] = token
    return cart


def get_preview_session(
    x_preview_session: Optional[str] = Header(None, alias=PREVIEW_SESSION_HEADER),
) -> Optional[AdminPreviewSession]:
    """Existing preview session, if the caller sent a live token. Never creates one."""
    return get_preview_store().get(x_preview_session)
