"""
Icon names for categories and services.

Icons are stored as strings in the database and rendered by the frontend
icon set. Only the names below are supported.
"""
from enum import Enum


class UnknownIconError(ValueError):
    """Raised for an icon name outside `IconName`."""

    def __init__(self, name: str):
        super().__init__(f"Unknown icon: {name!r}")
        self.name = name


class IconName(str, Enum):
    BACKPACK = "Backpack"
    BOOK = "Book"
    BOOK_OPEN = "BookOpen"
    PENCIL = "Pencil"
    PEN_TOOL = "PenTool"
    RULER = "Ruler"
    SCISSORS = "Scissors"
    LAPTOP = "Laptop"
    MONITOR = "Monitor"
    MOUSE = "Mouse"
    KEYBOARD = "Keyboard"
    CPU = "Cpu"
    WIFI = "Wifi"
    HARD_DRIVE = "HardDrive"
    FILE_TEXT = "FileText"
    FILE_CHECK = "FileCheck"
    PRINTER = "Printer"
    SCAN = "Scan"
    COPY = "Copy"
    FOLDERS = "Folders"
    GIFT = "Gift"
    PACKAGE = "Package"
    SHOPPING_BAG = "ShoppingBag"
    TAG = "Tag"
    CREDIT_CARD = "CreditCard"
    PALETTE = "Palette"
    IMAGE = "Image"
    CAMERA = "Camera"
    MUSIC = "Music"
    HEADPHONES = "Headphones"
    HELP_CIRCLE = "HelpCircle"


# Fixed lookup table keyed by exact and lower-cased name
_ICON_TABLE: dict[str, IconName] = {}
for _icon in IconName:
    _ICON_TABLE[_icon.value] = _icon
    _ICON_TABLE.setdefault(_icon.value.lower(), _icon)

FALLBACK_ICON = IconName.HELP_CIRCLE


def resolve_icon(name: str | None, strict: bool = False) -> IconName:
    """
    Look up an icon by its stored name.

    Unknown or empty names raise `UnknownIconError` when `strict`, otherwise
    resolve to `FALLBACK_ICON`.
    """
    key = (name or "").strip()
    icon = _ICON_TABLE.get(key) or _ICON_TABLE.get(key.lower())
    if icon is not None:
        return icon
    if strict:
        raise UnknownIconError(key)
    return FALLBACK_ICON


def search_icons(query: str = "") -> list[str]:
    """Icon names containing `query`, case-insensitive (icon picker filter)."""
    needle = query.strip().lower()
    return [icon.value for icon in IconName if needle in icon.value.lower()]
