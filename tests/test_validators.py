"""Tests for input helpers and money formatting"""
from decimal import Decimal

import pytest

from storefront.services.money import format_money, round_money, to_decimal
from storefront.utils import generate_slug, is_hsl_color


@pytest.mark.parametrize("name,slug", [
    ("Cuaderno A4 Económico", "cuaderno-a4-economico"),
    ("  Lápices de Colores x12  ", "lapices-de-colores-x12"),
    ("Útiles -- Escolares!", "utiles-escolares"),
    ("Niño & Niña", "nino-nina"),
])
def test_generate_slug(name, slug):
    assert generate_slug(name) == slug


@pytest.mark.parametrize("value,valid", [
    ("340 82% 52%", True),
    ("0 0% 100%", True),
    ("210.5 100% 50.5%", True),
    ("#ff0000", False),
    ("340, 82%, 52%", False),
    ("", False),
])
def test_is_hsl_color(value, valid):
    assert is_hsl_color(value) is valid


def test_to_decimal():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("12.50") == Decimal("12.50")
    assert to_decimal(None) == Decimal("0")
    assert to_decimal("abc") == Decimal("0")


def test_round_money_half_up():
    assert round_money("2.345") == Decimal("2.35")


def test_format_money():
    assert format_money(Decimal("12.5")) == "S/ 12.50"
    assert format_money(3) == "S/ 3.00"
    assert format_money(7, prefix="$") == "$ 7.00"
