"""
Admin Settings Router

Key/value site settings and the site content document.
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from storefront.auth import verify_admin
from storefront.content import parse_site_content
from storefront.db import SettingKeys
from storefront.errors import ERROR_KEY_REQUIRED
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.routers.deps import load_site_content, require_database
from storefront.services.database import Database
from .models import SettingUpsert

logger = get_logger(__name__)
router = APIRouter(tags=["admin-settings"])


@router.get("/settings")
async def admin_get_settings(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    return {"settings": await db.settings.get_all()}


@router.post("/settings")
async def admin_upsert_setting(
    request: SettingUpsert, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    """Insert or replace one setting."""
    key = request.key.strip()
    if not key:
        raise HTTPException(status_code=400, detail=ERROR_KEY_REQUIRED)
    if key == SettingKeys.SITE_CONTENT and request.value is not None:
        # Same shape checks as the content editor
        try:
            parse_site_content(request.value)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid site content: {e.error_count()} errors")

    row = await db.settings.upsert(key, request.value)
    logger.info(f"Setting {sanitize_string_for_logging(key)} saved")
    return {"success": True, "setting": row}


@router.get("/site-content")
async def admin_get_site_content(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    """Persisted content merged on the defaults (the editor's starting point)."""
    content = await load_site_content(db)
    return {"content": content.to_json()}


@router.put("/site-content")
async def admin_save_site_content(
    payload: dict, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    """Save content directly, without going through preview."""
    try:
        content = parse_site_content(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid site content: {e.error_count()} errors")
    await db.settings.upsert(SettingKeys.SITE_CONTENT, content.to_json())
    return {"success": True, "content": content.to_json()}
