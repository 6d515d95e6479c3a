"""
Admin API Router

Admin-only endpoints for the catalog, marketing content, themes, settings,
media uploads and draft previews. Every endpoint depends on `verify_admin`.
Combines all sub-routers into a single router with tag "admin".
"""
from fastapi import APIRouter

from .products import router as products_router
from .catalog import router as catalog_router
from .marketing import router as marketing_router
from .themes import router as themes_router
from .settings import router as settings_router
from .media import router as media_router
from .preview import router as preview_router

router = APIRouter(tags=["admin"])

router.include_router(products_router)
router.include_router(catalog_router)
router.include_router(marketing_router)
router.include_router(themes_router)
router.include_router(settings_router)
router.include_router(media_router)
router.include_router(preview_router)

__all__ = ["router"]
