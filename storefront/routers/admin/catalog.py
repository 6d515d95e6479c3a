"""
Admin Categories & Services Router

Both tables are manually ordered and carry an icon name. Icon names are
checked against the supported set on every write.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import verify_admin
from storefront.errors import ERROR_NOT_FOUND
from storefront.icons import UnknownIconError, resolve_icon
from storefront.routers.deps import require_database
from storefront.services.database import Database
from storefront.utils import generate_slug
from .models import CategoryCreate, CategoryUpdate, ServiceCreate, ServiceUpdate

router = APIRouter(tags=["admin-catalog"])


def _checked_icon(name: Optional[str]) -> Optional[str]:
    """Canonical icon name, 400 for names outside the icon set."""
    if not name:
        return name
    try:
        return resolve_icon(name, strict=True).value
    except UnknownIconError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _with_checked_icon(data: dict) -> dict:
    if "icon" in data:
        data["icon"] = _checked_icon(data["icon"])
    return data


# ==================== CATEGORIES ====================

@router.get("/categories")
async def admin_get_categories(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    categories = await db.categories.list()
    return {"categories": [c.to_presentation() for c in categories]}


@router.post("/categories")
async def admin_create_category(
    request: CategoryCreate, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    data = _with_checked_icon(request.to_row())
    data["slug"] = request.slug or generate_slug(request.name)
    category = await db.categories.create(data)
    return {"success": True, "category": category.to_presentation()}


@router.put("/categories/{category_id}")
async def admin_update_category(
    category_id: str,
    request: CategoryUpdate,
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    category = await db.categories.update(category_id, _with_checked_icon(request.to_row()))
    if category is None:
        raise HTTPException(status_code=404, detail=ERROR_NOT_FOUND)
    return {"success": True, "category": category.to_presentation()}


@router.delete("/categories/{category_id}")
async def admin_delete_category(
    category_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    await db.categories.delete(category_id)
    return {"success": True}


# ==================== SERVICES ====================

def _service_row(data: dict) -> dict:
    data = _with_checked_icon(data)
    if "name" in data:
        data["title"] = data.pop("name")
    return data


@router.get("/services")
async def admin_get_services(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    services = await db.services.list()
    return {"services": [s.to_presentation() for s in services]}


@router.post("/services")
async def admin_create_service(
    request: ServiceCreate, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    data = _service_row(request.to_row())
    data["slug"] = request.slug or generate_slug(request.name)
    service = await db.services.create(data)
    return {"success": True, "service": service.to_presentation()}


@router.put("/services/{service_id}")
async def admin_update_service(
    service_id: str,
    request: ServiceUpdate,
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    service = await db.services.update(service_id, _service_row(request.to_row()))
    if service is None:
        raise HTTPException(status_code=404, detail=ERROR_NOT_FOUND)
    return {"success": True, "service": service.to_presentation()}


@router.delete("/services/{service_id}")
async def admin_delete_service(
    service_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    await db.services.delete(service_id)
    return {"success": True}
