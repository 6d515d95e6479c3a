"""
Cart Router

Session cart endpoints. The session token travels in the `X-Cart-Session`
header and is echoed back on every response (a new one is issued when the
request carries none or an expired one).

Prices always come from the products table, never from the request body.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.cart import CartProduct, CartSession
from storefront.errors import ERROR_PRODUCT_NOT_FOUND
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.preview import AdminPreviewSession
from storefront.services.database import Database
from .deps import (
    effective_site_content,
    get_cart_session,
    get_preview_session,
    optional_database,
    require_database,
)

logger = get_logger(__name__)
router = APIRouter(tags=["cart"])


class AddItemRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str = Field(min_length=1)


class UpdateQuantityRequest(BaseModel):
    quantity: int


class SetOpenRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_open: bool


@router.get("")
async def get_cart(cart: CartSession = Depends(get_cart_session)):
    return cart.to_dict()


@router.post("/items")
async def add_item(
    request: AddItemRequest,
    cart: CartSession = Depends(get_cart_session),
    db: Database = Depends(require_database),
):
    """Add one unit of an active product."""
    product = await db.products.get_by_id(request.product_id)
    if product is None or not product.is_active:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)

    cart.add_to_cart(CartProduct.from_product(product))
    logger.debug(f"Added {sanitize_id_for_logging(product.id)} to cart")
    return cart.to_dict()


@router.put("/items/{product_id}")
async def update_item(
    product_id: str,
    request: UpdateQuantityRequest,
    cart: CartSession = Depends(get_cart_session),
):
    """Set a line's quantity. Zero or less removes the line."""
    cart.update_quantity(product_id, request.quantity)
    return cart.to_dict()


@router.delete("/items/{product_id}")
async def remove_item(product_id: str, cart: CartSession = Depends(get_cart_session)):
    cart.remove_from_cart(product_id)
    return cart.to_dict()


@router.delete("")
async def clear_cart(cart: CartSession = Depends(get_cart_session)):
    cart.clear_cart()
    return cart.to_dict()


@router.put("/open")
async def set_cart_open(request: SetOpenRequest, cart: CartSession = Depends(get_cart_session)):
    """Show or hide the cart drawer."""
    cart.set_open(request.is_open)
    return cart.to_dict()


@router.post("/checkout")
async def checkout(
    cart: CartSession = Depends(get_cart_session),
    db: Optional[Database] = Depends(optional_database),
    preview: Optional[AdminPreviewSession] = Depends(get_preview_session),
):
    """
    Build the WhatsApp order link for the client to open.

    The cart is left as is; the order only exists once the customer sends
    the pre-filled message.
    """
    content = await effective_site_content(db, preview)
    opened: list[str] = []
    url = cart.send_to_whatsapp(opened.append, content)
    return {"sent": url is not None, "url": url, "cart": cart.to_dict()}
