"""Cart package: models, session cart and session storage."""
from .models import CartItem, CartProduct
from .service import CartSession
from .storage import get_cart_store

__all__ = [
    "CartItem",
    "CartProduct",
    "CartSession",
    "get_cart_store",
]
