"""
Admin Seasonal Themes Router

At most one theme is active at a time; saving or activating a theme
deactivates all others.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import verify_admin
from storefront.errors import ERROR_THEME_NOT_FOUND
from storefront.logging import get_logger
from storefront.routers.deps import require_database
from storefront.services.database import Database
from storefront.themes import DEFAULT_THEMES
from storefront.utils import is_hsl_color
from .models import ThemeSave, ThemeUpdate

logger = get_logger(__name__)
router = APIRouter(tags=["admin-themes"])

_COLOR_FIELDS = ("primary_color", "secondary_color", "accent_color")


@router.get("/themes")
async def admin_get_themes(
    slug: Optional[str] = None,
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    themes = await db.themes.list(slug=slug)
    return {"themes": [t.to_presentation() for t in themes]}


@router.get("/themes/defaults")
async def admin_get_default_themes(admin=Depends(verify_admin)):
    """Predefined palettes for the theme picker."""
    return {"themes": [theme.to_json() for theme in DEFAULT_THEMES.values()]}


@router.post("/themes")
async def admin_save_theme(
    request: ThemeSave, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    """Create a theme, or update the existing theme with the same slug."""
    row, created = await db.themes.save_by_slug(request.to_row(is_active=request.is_active))
    logger.info(f"Theme {row.slug} {'created' if created else 'updated'}")
    return {"success": True, "created": created, "theme": row.to_presentation()}


@router.put("/themes/{theme_id}")
async def admin_update_theme(
    theme_id: str,
    request: ThemeUpdate,
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    data = request.to_row()
    for name in _COLOR_FIELDS:
        if name in data and not is_hsl_color(data[name] or ""):
            raise HTTPException(status_code=400, detail=f"Invalid {name}: expected an HSL triplet")
    theme = await db.themes.update(theme_id, data)
    if theme is None:
        raise HTTPException(status_code=404, detail=ERROR_THEME_NOT_FOUND)
    return {"success": True, "theme": theme.to_presentation()}


@router.post("/themes/{theme_id}/activate")
async def admin_activate_theme(
    theme_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    theme = await db.themes.activate(theme_id)
    if theme is None:
        raise HTTPException(status_code=404, detail=ERROR_THEME_NOT_FOUND)
    logger.info(f"Theme {theme.slug} activated")
    return {"success": True, "theme": theme.to_presentation()}


@router.post("/themes/deactivate")
async def admin_deactivate_themes(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    """Back to the stylesheet defaults."""
    await db.themes.deactivate_all()
    return {"success": True}


@router.delete("/themes/{theme_id}")
async def admin_delete_theme(
    theme_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    await db.themes.delete(theme_id)
    return {"success": True}
