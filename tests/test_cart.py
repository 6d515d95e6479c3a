"""
Tests for the session cart
"""

from decimal import Decimal
from urllib.parse import parse_qs, urlparse

import pytest

from storefront.cart import CartItem, CartProduct, CartSession
from storefront.services.models import Product


def make_product(product_id="p1", name="Cuaderno", price="8.00", sale_price=None):
    return CartProduct(id=product_id, name=name, price=price, sale_price=sale_price)


@pytest.fixture
def cart():
    return CartSession()


class TestCartProduct:
    """Tests for CartProduct pricing."""

    def test_prices_normalized_to_decimal(self):
        product = make_product(price=12.5, sale_price=10)
        assert product.price == Decimal("12.5")
        assert product.sale_price == Decimal("10")

    def test_unit_price_prefers_sale_price(self):
        assert make_product(price="10", sale_price="7.5").unit_price == Decimal("7.5")

    def test_unit_price_falls_back_to_price(self):
        assert make_product(price="10").unit_price == Decimal("10")

    def test_zero_sale_price_is_ignored(self):
        assert make_product(price="10", sale_price="0").unit_price == Decimal("10")

    def test_from_product_row(self, sample_product):
        product = CartProduct.from_product(Product(**{**sample_product, "sale_price": 6.5}))

        assert product.id == "product-123"
        assert product.slug == "cuaderno-a4-cuadriculado"
        assert product.unit_price == Decimal("6.5")


class TestCartItem:
    """Tests for CartItem dataclass."""

    def test_subtotal(self):
        item = CartItem(product=make_product(price="8"), quantity=3)
        assert item.subtotal == Decimal("24")

    def test_to_dict(self):
        item = CartItem(product=make_product(price="8", sale_price="6"), quantity=2)
        data = item.to_dict()

        assert data["quantity"] == 2
        assert data["unitPrice"] == 6.0
        assert data["subtotal"] == 12.0
        assert data["product"]["salePrice"] == 6.0
        assert data["addedAt"] != ""


class TestCartSession:
    """Tests for cart operations."""

    def test_add_new_product(self, cart):
        cart.add_to_cart(make_product())

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 1
        assert cart.is_open is True

    def test_add_same_product_bumps_quantity(self, cart):
        product = make_product()
        cart.add_to_cart(product)
        cart.add_to_cart(product)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2

    def test_add_keeps_insertion_order(self, cart):
        cart.add_to_cart(make_product("a"))
        cart.add_to_cart(make_product("b"))
        cart.add_to_cart(make_product("a"))

        assert [item.product.id for item in cart.items] == ["a", "b"]

    def test_remove_from_cart(self, cart):
        cart.add_to_cart(make_product("a"))
        cart.add_to_cart(make_product("b"))
        cart.remove_from_cart("a")

        assert [item.product.id for item in cart.items] == ["b"]

    def test_remove_missing_is_noop(self, cart):
        cart.add_to_cart(make_product("a"))
        cart.remove_from_cart("zzz")

        assert len(cart.items) == 1

    def test_update_quantity(self, cart):
        cart.add_to_cart(make_product("a"))
        cart.update_quantity("a", 5)

        assert cart.items[0].quantity == 5

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_update_quantity_non_positive_removes(self, cart, quantity):
        cart.add_to_cart(make_product("a"))
        cart.add_to_cart(make_product("b"))

        removed = CartSession()
        removed.add_to_cart(make_product("a"))
        removed.add_to_cart(make_product("b"))
        removed.remove_from_cart("a")

        cart.update_quantity("a", quantity)

        assert [i.product.id for i in cart.items] == [i.product.id for i in removed.items]

    def test_update_quantity_unknown_id_is_noop(self, cart):
        cart.update_quantity("missing", 4)
        assert cart.items == []

    def test_clear_cart(self, cart):
        cart.add_to_cart(make_product("a"))
        cart.clear_cart()

        assert cart.items == []
        assert cart.get_total() == Decimal("0")

    def test_total_uses_sale_price(self, cart):
        # A: 10 on sale for 8, quantity 2; B: 5, quantity 1
        cart.add_to_cart(make_product("a", price="10", sale_price="8"))
        cart.add_to_cart(make_product("a", price="10", sale_price="8"))
        cart.add_to_cart(make_product("b", price="5"))

        assert cart.get_total() == Decimal("21")
        assert cart.get_item_count() == 3

    def test_empty_cart_totals(self, cart):
        assert cart.get_total() == Decimal("0")
        assert cart.get_item_count() == 0

    def test_set_open(self, cart):
        cart.add_to_cart(make_product("a"))
        cart.set_open(False)

        assert cart.is_open is False
        assert cart.get_item_count() == 1

        cart.add_to_cart(make_product("a"))
        assert cart.is_open is True

    def test_total_has_no_float_drift(self, cart):
        cart.add_to_cart(make_product("a", price=0.1))
        cart.add_to_cart(make_product("b", price=0.2))

        assert cart.get_total() == Decimal("0.3")

    def test_to_dict(self, cart):
        cart.add_to_cart(make_product("a", price="2.5"))
        cart.update_quantity("a", 2)
        data = cart.to_dict()

        assert data["itemCount"] == 2
        assert data["total"] == 5.0
        assert data["isOpen"] is True
        assert len(data["items"]) == 1


class TestSendToWhatsApp:
    """Tests for checkout link generation."""

    def test_empty_cart_does_nothing(self, cart):
        opened = []

        assert cart.send_to_whatsapp(opened.append) is None
        assert opened == []

    def test_opens_link_once(self, cart):
        opened = []
        cart.add_to_cart(make_product("a", name="Cuaderno", price="8"))

        url = cart.send_to_whatsapp(opened.append)

        assert opened == [url]
        assert url.startswith("https://wa.me/51987654321?text=")

    def test_message_lists_items_and_total(self, cart):
        cart.add_to_cart(make_product("a", name="Cuaderno", price="10", sale_price="8"))
        cart.add_to_cart(make_product("a", name="Cuaderno", price="10", sale_price="8"))
        cart.add_to_cart(make_product("b", name="Lápiz", price="5"))

        url = cart.send_to_whatsapp(lambda _: None)
        message = parse_qs(urlparse(url).query)["text"][0]

        assert "1. *Cuaderno*" in message
        assert "Cantidad: 2" in message
        assert "S/ 16.00" in message
        assert "2. *Lápiz*" in message
        assert "TOTAL ESTIMADO: S/ 21.00" in message

    def test_uses_content_number(self, cart):
        cart.add_to_cart(make_product())
        content = {"contact": {"whatsapp": "+51 932-371-532"}}

        url = cart.send_to_whatsapp(lambda _: None, content)

        assert url.startswith("https://wa.me/51932371532?")

    def test_cart_kept_after_send(self, cart):
        cart.add_to_cart(make_product())
        cart.send_to_whatsapp(lambda _: None)

        assert len(cart.items) == 1
