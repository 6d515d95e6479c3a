"""Utility helpers."""
from .validators import generate_slug, is_hsl_color

__all__ = ["generate_slug", "is_hsl_color"]
