"""Input normalization for admin forms."""
import re
import unicodedata

_NON_SLUG = re.compile(r"[^a-z0-9]+")
_HSL = re.compile(r"^\d{1,3}(\.\d+)? \d{1,3}(\.\d+)?% \d{1,3}(\.\d+)?%$")


def generate_slug(name: str) -> str:
    """
    URL slug from a display name.

    Accents are stripped before non-alphanumerics collapse to `-`:
    `"Cuadernos A4 Económicos"` -> `"cuadernos-a4-economicos"`.
    """
    decomposed = unicodedata.normalize("NFD", name.lower())
    ascii_only = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_SLUG.sub("-", ascii_only).strip("-")


def is_hsl_color(value: str) -> bool:
    """True for an HSL triplet as stored for themes, e.g. `340 82% 52%`."""
    return bool(_HSL.match(value.strip()))
