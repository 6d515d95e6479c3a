"""
Admin Products Router

Product CRUD. Listing includes inactive products.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.auth import verify_admin
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.routers.deps import require_database
from storefront.services.database import Database
from storefront.utils import generate_slug
from .models import ProductCreate, ProductUpdate

logger = get_logger(__name__)
router = APIRouter(tags=["admin-products"])


@router.get("/products")
async def admin_get_products(db: Database = Depends(require_database), admin=Depends(verify_admin)):
    """Get all products for admin (including inactive)"""
    products = await db.products.list(include_inactive=True)
    return {"products": [p.to_presentation() for p in products]}


@router.get("/products/{product_id}")
async def admin_get_product(
    product_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    product = await db.products.get_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"product": product.to_presentation()}


@router.post("/products")
async def admin_create_product(
    request: ProductCreate, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    """Create a new product. The slug defaults to one derived from the name."""
    data = request.to_row()
    data["slug"] = request.slug or generate_slug(request.name)
    product = await db.products.create(data)
    logger.info(f"Product {sanitize_id_for_logging(product.id)} created")
    return {"success": True, "product": product.to_presentation()}


@router.put("/products/{product_id}")
async def admin_update_product(
    product_id: str,
    request: ProductUpdate,
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    product = await db.products.update(product_id, request.to_row())
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return {"success": True, "product": product.to_presentation()}


@router.delete("/products/{product_id}")
async def admin_delete_product(
    product_id: str, db: Database = Depends(require_database), admin=Depends(verify_admin)
):
    await db.products.delete(product_id)
    logger.info(f"Product {sanitize_id_for_logging(product_id)} deleted")
    return {"success": True}
