"""
Public Storefront Router

Read-only endpoints consumed by the storefront pages. Without Supabase
configured every collection is empty, so the site still renders on defaults.

A request carrying a live `X-Preview-Session` token sees that admin's
drafts in `/site-content` and `/themes/active`.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.icons import resolve_icon
from storefront.logging import get_logger
from storefront.preview import AdminPreviewSession
from storefront.services.database import Database
from storefront.themes import SeasonalTheme, theme_css_variables, theme_from_row
from storefront.whatsapp import Messages, phone_url, resolve_whatsapp_number, whatsapp_url
from .deps import effective_site_content, get_preview_session, optional_database

logger = get_logger(__name__)
router = APIRouter(tags=["public"])


def _with_icon(item: dict) -> dict:
    # Stored names outside the icon set render as the fallback
    return {**item, "icon": resolve_icon(item.get("icon")).value}


# ==================== CATALOG ====================

@router.get("/products")
async def get_products(
    featured: bool = False,
    category_id: Optional[str] = Query(None, alias="categoryId"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    offset: Optional[int] = Query(None, ge=0),
    db: Optional[Database] = Depends(optional_database),
):
    """List active products, newest first."""
    if db is None:
        return {"products": []}
    products = await db.products.list(
        featured=featured, category_id=category_id, limit=limit, offset=offset
    )
    return {"products": [p.to_presentation() for p in products]}


@router.get("/products/search")
async def search_products(
    q: str = Query(..., min_length=1),
    db: Optional[Database] = Depends(optional_database),
):
    if db is None:
        return {"products": []}
    products = await db.products.search(q)
    return {"products": [p.to_presentation() for p in products]}


@router.get("/products/{slug}")
async def get_product(
    slug: str,
    db: Optional[Database] = Depends(optional_database),
    preview: Optional[AdminPreviewSession] = Depends(get_preview_session),
):
    """Single product with WhatsApp enquiry link."""
    product = await db.products.get_by_slug(slug) if db else None
    if product is None or not product.is_active:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    content = await effective_site_content(db, preview)
    enquiry = whatsapp_url(resolve_whatsapp_number(content), Messages.product(product.name))
    return {"product": product.to_presentation(), "whatsappUrl": enquiry}


@router.get("/categories")
async def get_categories(db: Optional[Database] = Depends(optional_database)):
    if db is None:
        return {"categories": []}
    categories = await db.categories.list()
    return {
        "categories": [_with_icon(c.to_presentation()) for c in categories if c.is_active]
    }


@router.get("/services")
async def get_services(db: Optional[Database] = Depends(optional_database)):
    if db is None:
        return {"services": []}
    services = await db.services.list()
    return {"services": [_with_icon(s.to_presentation()) for s in services if s.is_active]}


@router.get("/promotions")
async def get_promotions(db: Optional[Database] = Depends(optional_database)):
    if db is None:
        return {"promotions": []}
    promotions = await db.promotions.list()
    return {"promotions": [p.to_presentation() for p in promotions]}


@router.get("/reviews")
async def get_reviews(
    featured: bool = False,
    include_all: bool = Query(False, alias="all"),
    db: Optional[Database] = Depends(optional_database),
):
    """Testimonials. `all=true` includes hidden reviews (admin listing)."""
    if db is None:
        return {"reviews": []}
    reviews = await db.reviews.list(featured=featured, include_inactive=include_all)
    return {"reviews": [r.to_presentation() for r in reviews]}


@router.get("/catalogs")
async def get_catalogs(db: Optional[Database] = Depends(optional_database)):
    if db is None:
        return {"catalogs": []}
    catalogs = await db.catalogs.list()
    return {"catalogs": [c.to_presentation() for c in catalogs]}


# ==================== SITE CONFIGURATION ====================

@router.get("/settings")
async def get_settings(db: Optional[Database] = Depends(optional_database)):
    if db is None:
        return {"settings": {}}
    return {"settings": await db.settings.get_all()}


@router.get("/site-content")
async def get_site_content(
    db: Optional[Database] = Depends(optional_database),
    preview: Optional[AdminPreviewSession] = Depends(get_preview_session),
):
    """Effective site content plus the contact links derived from it."""
    content = await effective_site_content(db, preview)

    number = resolve_whatsapp_number(content)
    return {
        "content": content.to_json(),
        "isPreview": preview is not None and preview.content.is_active,
        "links": {
            "whatsapp": whatsapp_url(number),
            "phone": phone_url(content),
        },
    }


@router.get("/themes/active")
async def get_active_theme(
    db: Optional[Database] = Depends(optional_database),
    preview: Optional[AdminPreviewSession] = Depends(get_preview_session),
):
    """Effective seasonal theme, or null when none is active."""
    persisted: Optional[SeasonalTheme] = None
    row = await db.themes.get_active() if db else None
    if row is not None:
        try:
            persisted = theme_from_row(row)
        except ValidationError as e:
            logger.warning(f"Active theme {row.slug} is malformed: {e.error_count()} errors")

    theme = persisted
    if preview is not None:
        preview.theme.load_persisted(persisted)
        theme = preview.theme.effective_value()

    return {
        "theme": theme.to_json() if theme else None,
        "cssVariables": theme_css_variables(theme),
        "isPreview": preview is not None and preview.theme.is_active,
    }
