"""Seasonal themes: colour palettes applied site-wide for a season."""
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from storefront.services.models import SeasonalThemeRow
from storefront.utils.validators import is_hsl_color

CSS_PRIMARY = "--theme-primary"
CSS_SECONDARY = "--theme-secondary"
CSS_ACCENT = "--theme-accent"


class SeasonalTheme(BaseModel):
    """Presentation shape of a theme. Colours are HSL triplets, e.g. `340 82% 52%`."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    name: str
    slug: str
    primary_color: str
    secondary_color: str
    accent_color: str
    banner_image: Optional[str] = None

    @field_validator("primary_color", "secondary_color", "accent_color")
    @classmethod
    def check_hsl(cls, v: str) -> str:
        if not is_hsl_color(v):
            raise ValueError(f"Expected an HSL triplet like '340 82% 52%', got {v!r}")
        return v.strip()

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_row(self, is_active: bool = True) -> dict[str, Any]:
        """Fields for `ThemeRepository.save_by_slug`."""
        return {
            "name": self.name,
            "slug": self.slug,
            "primary_color": self.primary_color,
            "secondary_color": self.secondary_color,
            "accent_color": self.accent_color,
            "banner_image": self.banner_image,
            "is_active": is_active,
        }


def theme_from_row(row: SeasonalThemeRow | Mapping[str, Any]) -> SeasonalTheme:
    """Map a snake_case row onto the presentation model."""
    if isinstance(row, SeasonalThemeRow):
        row = row.model_dump()
    return SeasonalTheme.model_validate(row)


def theme_css_variables(theme: Optional[SeasonalTheme]) -> dict[str, str]:
    """CSS custom properties for a theme. No theme means the stylesheet defaults."""
    if theme is None:
        return {}
    return {
        CSS_PRIMARY: theme.primary_color,
        CSS_SECONDARY: theme.secondary_color,
        CSS_ACCENT: theme.accent_color,
    }


def _theme(slug: str, name: str, primary: str, secondary: str, accent: str) -> SeasonalTheme:
    return SeasonalTheme(
        id=slug, name=name, slug=slug,
        primary_color=primary, secondary_color=secondary, accent_color=accent,
    )


# Predefined palettes offered in the admin theme picker
DEFAULT_THEMES: dict[str, SeasonalTheme] = {
    theme.slug: theme
    for theme in (
        _theme("default", "Default", "220 14% 10%", "220 14% 96%", "142 72% 50%"),
        _theme("san-valentin", "San Valentín", "340 82% 52%", "340 100% 95%", "340 82% 45%"),
        _theme("dia-madre", "Día de la Madre", "300 76% 50%", "300 100% 95%", "300 76% 45%"),
        _theme("fiestas-patrias", "Fiestas Patrias", "0 100% 50%", "0 0% 100%", "0 0% 0%"),
        _theme("navidad", "Navidad", "120 61% 34%", "0 100% 50%", "43 74% 49%"),
        _theme("regreso-clases", "Regreso a Clases", "210 100% 50%", "48 100% 50%", "142 72% 50%"),
    )
}


def get_default_theme(slug: str) -> Optional[SeasonalTheme]:
    return DEFAULT_THEMES.get(slug)
