"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from storefront.services.money import multiply, to_decimal, to_float


@dataclass
class CartProduct:
    """The slice of a product the cart needs to price and describe a line."""
    id: str
    name: str
    price: Decimal
    sale_price: Optional[Decimal] = None
    slug: str = ""
    image: str = ""

    def __post_init__(self):
        self.price = to_decimal(self.price)
        if self.sale_price is not None:
            self.sale_price = to_decimal(self.sale_price)

    @property
    def unit_price(self) -> Decimal:
        """Sale price when set (and non-zero), otherwise the list price."""
        return self.sale_price if self.sale_price else self.price

    @classmethod
    def from_product(cls, product) -> "CartProduct":
        """Build from a `storefront.services.models.Product` row."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            sale_price=product.sale_price,
            slug=product.slug,
            image=product.image,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "image": self.image,
            "price": to_float(self.price),
            "salePrice": to_float(self.sale_price) if self.sale_price is not None else None,
        }


@dataclass
class CartItem:
    """Single line in the cart. Quantity is always >= 1."""
    product: CartProduct
    quantity: int = 1
    added_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @property
    def unit_price(self) -> Decimal:
        return self.product.unit_price

    @property
    def subtotal(self) -> Decimal:
        return multiply(self.unit_price, self.quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "product": self.product.to_dict(),
            "quantity": self.quantity,
            "unitPrice": to_float(self.unit_price),
            "subtotal": to_float(self.subtotal),
            "addedAt": self.added_at,
        }
