"""Session cart: the shopping list of one browser session."""
from decimal import Decimal
from typing import Any, Callable, Optional

from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_phone_for_logging
from storefront.whatsapp import build_order_message, resolve_whatsapp_number, whatsapp_url
from .models import CartItem, CartProduct

logger = get_logger(__name__)

# Receives the checkout URL, e.g. `webbrowser.open` or a response collector
UrlOpener = Callable[[str], Any]


class CartSession:
    """
    In-memory cart for one session.

    Holds at most one line per product id; a line never has quantity < 1.
    Nothing here is persisted: checkout produces a WhatsApp link that the
    customer sends by hand.
    """

    def __init__(self):
        self.items: list[CartItem] = []
        self.is_open = False

    def _find(self, product_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.product.id == product_id), None)

    def add_to_cart(self, product: CartProduct) -> None:
        """Add one unit. A product already in the cart gets its quantity bumped."""
        existing = self._find(product.id)
        if existing:
            existing.quantity += 1
        else:
            self.items.append(CartItem(product=product, quantity=1))
        self.is_open = True

    def remove_from_cart(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.product.id != product_id]

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return
        existing = self._find(product_id)
        if existing:
            existing.quantity = quantity

    def clear_cart(self) -> None:
        self.items = []

    def get_total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))

    def get_item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def set_open(self, is_open: bool) -> None:
        self.is_open = is_open

    def send_to_whatsapp(
        self,
        opener: UrlOpener,
        content: Any = None,
    ) -> Optional[str]:
        """
        Open the checkout link once. An empty cart does nothing.

        Fire-and-forget: no confirmation is read back and the cart is kept.
        """
        if not self.items:
            return None
        number = resolve_whatsapp_number(content)
        url = whatsapp_url(number, build_order_message(self.items, self.get_total()))
        logger.info(
            f"Checkout link opened for {sanitize_phone_for_logging(number)} "
            f"({self.get_item_count()} items)"
        )
        opener(url)
        return url

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "itemCount": self.get_item_count(),
            "total": float(self.get_total()),
            "isOpen": self.is_open,
        }

    def __repr__(self) -> str:
        ids = ",".join(sanitize_id_for_logging(item.product.id) for item in self.items)
        return f"CartSession(items=[{ids}])"
