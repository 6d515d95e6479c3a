"""In-memory cart sessions keyed by the `X-Cart-Session` token."""
from typing import Optional

from storefront import config
from storefront.sessions import SessionStore
from .service import CartSession

_cart_store: Optional[SessionStore[CartSession]] = None


def get_cart_store() -> SessionStore[CartSession]:
    """Get the cart SessionStore singleton."""
    global _cart_store
    if _cart_store is None:
        _cart_store = SessionStore(CartSession, config.CART_SESSION_TTL_SECONDS, name="cart")
    return _cart_store
