"""Tests for icon lookup"""
import pytest

from storefront.icons import FALLBACK_ICON, IconName, UnknownIconError, resolve_icon, search_icons


def test_resolve_known_icon():
    assert resolve_icon("Backpack") is IconName.BACKPACK
    assert resolve_icon("BookOpen") is IconName.BOOK_OPEN


def test_resolve_is_case_insensitive():
    assert resolve_icon("bookopen") is IconName.BOOK_OPEN
    assert resolve_icon("  Printer ") is IconName.PRINTER


@pytest.mark.parametrize("name", ["Rocket", "", None])
def test_lenient_fallback(name):
    assert resolve_icon(name) is FALLBACK_ICON
    assert FALLBACK_ICON.value == "HelpCircle"


def test_strict_rejects_unknown():
    with pytest.raises(UnknownIconError) as exc_info:
        resolve_icon("Rocket", strict=True)

    assert exc_info.value.name == "Rocket"
    assert isinstance(exc_info.value, ValueError)


def test_strict_accepts_known():
    assert resolve_icon("Gift", strict=True) is IconName.GIFT


def test_icon_values_are_strings():
    assert IconName.CPU == "Cpu"


def test_search_icons():
    assert search_icons("book") == ["Book", "BookOpen"]
    assert "HelpCircle" in search_icons()
    assert search_icons("nothing-matches") == []
