"""
Admin Promotions, Reviews & Catalogs Router
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import verify_admin
from storefront.errors import ERROR_NOT_FOUND
from storefront.routers.deps import require_database
from storefront.services.database import Database
from .models import (
    CatalogCreate,
    CatalogUpdate,
    PromotionCreate,
    PromotionUpdate,
    ReviewCreate,
    ReviewUpdate,
)

router = APIRouter(tags=["admin-marketing"])


# ==================== PROMOTIONS ====================

@router.get("/promotions")
async def admin_get_promotions(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    promotions = await db.promotions.list(include_inactive=True)
    return {"promotions": [p.to_presentation() for p in promotions]}


@router.post("/promotions")
async def admin_create_promotion(
    request: PromotionCreate, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    """Create a promotion (percentage, running 30 days, unless specified)."""
    promotion = await db.promotions.create(request.to_row())
    return {"success": True, "promotion": promotion.to_presentation()}


@router.put("/promotions/{promotion_id}")
async def admin_update_promotion(
    promotion_id: str,
    request: PromotionUpdate,
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    promotion = await db.promotions.update(promotion_id, request.to_row())
    if promotion is None:
        raise HTTPException(status_code=404, detail=ERROR_NOT_FOUND)
    return {"success": True, "promotion": promotion.to_presentation()}


@router.delete("/promotions/{promotion_id}")
async def admin_delete_promotion(
    promotion_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    await db.promotions.delete(promotion_id)
    return {"success": True}


# ==================== REVIEWS ====================

@router.get("/reviews")
async def admin_get_reviews(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    reviews = await db.reviews.list(include_inactive=True)
    return {"reviews": [r.to_presentation() for r in reviews]}


@router.post("/reviews")
async def admin_create_review(
    request: ReviewCreate, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    review = await db.reviews.create(request.to_row())
    return {"success": True, "review": review.to_presentation()}


@router.put("/reviews/{review_id}")
async def admin_update_review(
    review_id: str,
    request: ReviewUpdate,
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    data = request.to_row()
    if data.get("response"):
        data["responded_at"] = datetime.now(timezone.utc).isoformat()
    review = await db.reviews.update(review_id, data)
    if review is None:
        raise HTTPException(status_code=404, detail=ERROR_NOT_FOUND)
    return {"success": True, "review": review.to_presentation()}


@router.delete("/reviews/{review_id}")
async def admin_delete_review(
    review_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    await db.reviews.delete(review_id)
    return {"success": True}


# ==================== CATALOGS ====================

@router.get("/catalogs")
async def admin_get_catalogs(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    catalogs = await db.catalogs.list(include_inactive=True)
    return {"catalogs": [c.to_presentation() for c in catalogs]}


@router.post("/catalogs")
async def admin_create_catalog(
    request: CatalogCreate, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    catalog = await db.catalogs.create(request.to_row())
    return {"success": True, "catalog": catalog.to_presentation()}


@router.put("/catalogs/{catalog_id}")
async def admin_update_catalog(
    catalog_id: str,
    request: CatalogUpdate,
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    catalog = await db.catalogs.update(catalog_id, request.to_row())
    if catalog is None:
        raise HTTPException(status_code=404, detail=ERROR_NOT_FOUND)
    return {"success": True, "catalog": catalog.to_presentation()}


@router.delete("/catalogs/{catalog_id}")
async def admin_delete_catalog(
    catalog_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    await db.catalogs.delete(catalog_id)
    return {"success": True}
