"""
Editable site content.

The admin panel edits one JSON document stored under the `site_content`
settings key. Stored documents are overlaid on `DEFAULT_SITE_CONTENT` one
section at a time: a stored section replaces the default section wholesale.
"""
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from storefront import config
from storefront.logging import get_logger

logger = get_logger(__name__)


class _Section(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class HeroContent(_Section):
    title: str = ""
    subtitle: str = ""
    cta_text: str = ""
    cta_link: str = "/"
    secondary_cta_text: Optional[str] = None
    secondary_cta_link: Optional[str] = None
    background_image: Optional[str] = None
    show_search: bool = True


class BannerContent(_Section):
    text: str = ""
    link: Optional[str] = None
    is_visible: bool = False
    background_color: Optional[str] = None
    text_color: Optional[str] = None


class Stat(_Section):
    label: str
    value: str


class AboutContent(_Section):
    title: str = ""
    subtitle: str = ""
    description: str = ""
    image: Optional[str] = None
    stats: list[Stat] = []


class OpeningHours(_Section):
    opens: str = ""
    closes: str = ""


class BusinessHours(_Section):
    weekdays: OpeningHours = OpeningHours()
    saturday: OpeningHours = OpeningHours()
    sunday: OpeningHours = OpeningHours()


class ContactContent(_Section):
    title: str = ""
    subtitle: str = ""
    phone: str = ""
    whatsapp: str = ""
    email: str = ""
    address: str = ""
    map_url: Optional[str] = None
    business_hours: BusinessHours = BusinessHours()


class SocialLinks(_Section):
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    tiktok: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None


class QuickLink(_Section):
    label: str
    url: str


class FooterContent(_Section):
    description: str = ""
    copyright_text: str = ""
    show_social_links: bool = True
    quick_links: list[QuickLink] = []


class SectionVisibility(_Section):
    hero: bool = True
    top_banner: bool = True
    categories: bool = True
    featured_products: bool = True
    services: bool = True
    promotions: bool = True
    about: bool = True
    testimonials: bool = True
    faq: bool = True
    contact: bool = True
    newsletter: bool = True


class ButtonStyles(_Section):
    primary_color: str = "142 72% 50%"
    secondary_color: str = "220 14% 10%"
    border_radius: Literal["none", "sm", "md", "lg", "full"] = "md"


class SiteContent(_Section):
    hero: HeroContent = Field(default_factory=HeroContent)
    top_banner: BannerContent = Field(default_factory=BannerContent)
    about: AboutContent = Field(default_factory=AboutContent)
    contact: ContactContent = Field(default_factory=ContactContent)
    social: SocialLinks = Field(default_factory=SocialLinks)
    footer: FooterContent = Field(default_factory=FooterContent)
    sections: SectionVisibility = Field(default_factory=SectionVisibility)
    buttons: ButtonStyles = Field(default_factory=ButtonStyles)

    def to_json(self) -> dict[str, Any]:
        """camelCase JSON form, as stored and as served."""
        return self.model_dump(by_alias=True, mode="json")


DEFAULT_SITE_CONTENT = SiteContent.model_validate({
    "hero": {
        "title": "Tu Librería de Confianza",
        "subtitle": "Todo lo que necesitas para el colegio, oficina y más. Calidad y precios justos.",
        "ctaText": "Ver Productos",
        "ctaLink": "/productos",
        "secondaryCtaText": "Contáctanos",
        "secondaryCtaLink": "/contacto",
        "showSearch": True,
    },
    "topBanner": {
        "text": "Envío gratis en compras mayores a S/50",
        "isVisible": True,
    },
    "about": {
        "title": "Sobre Nosotros",
        "subtitle": "Tu librería de confianza en San Juan de Lurigancho",
        "description": (
            "Somos una librería con más de 10 años de experiencia ofreciendo "
            "los mejores productos escolares y de oficina."
        ),
        "stats": [
            {"label": "Años de experiencia", "value": "10+"},
            {"label": "Clientes satisfechos", "value": "5000+"},
            {"label": "Productos", "value": "1000+"},
        ],
    },
    "contact": {
        "title": "Contáctanos",
        "subtitle": "Estamos aquí para ayudarte",
        "phone": config.DEFAULT_PHONE,
        "whatsapp": config.DEFAULT_PHONE,
        "email": config.DEFAULT_EMAIL,
        "address": "Av. Principal 123, San Juan de Lurigancho, Lima",
        "businessHours": {
            "weekdays": {"opens": "08:00", "closes": "20:00"},
            "saturday": {"opens": "08:00", "closes": "18:00"},
            "sunday": {"opens": "09:00", "closes": "14:00"},
        },
    },
    "social": {"facebook": "", "instagram": "", "tiktok": ""},
    "footer": {
        "description": "Tu librería de confianza con los mejores productos escolares y de oficina.",
        "copyrightText": "© 2024 Librería Central. Todos los derechos reservados.",
        "showSocialLinks": True,
        "quickLinks": [
            {"label": "Inicio", "url": "/"},
            {"label": "Productos", "url": "/productos"},
            {"label": "Servicios", "url": "/servicios"},
            {"label": "Contacto", "url": "/contacto"},
        ],
    },
})


def merge_site_content(stored: Optional[Mapping[str, Any]]) -> SiteContent:
    """
    Overlay a stored `site_content` value on the defaults, section by section.

    An unparseable stored value is logged and ignored.
    """
    if not stored:
        return DEFAULT_SITE_CONTENT.model_copy(deep=True)
    if not isinstance(stored, Mapping):
        logger.warning(f"Ignoring site_content of type {type(stored).__name__}")
        return DEFAULT_SITE_CONTENT.model_copy(deep=True)

    merged = {**DEFAULT_SITE_CONTENT.to_json(), **stored}
    try:
        return SiteContent.model_validate(merged)
    except ValidationError as e:
        logger.warning(f"Stored site_content is invalid, using defaults: {e.error_count()} errors")
        return DEFAULT_SITE_CONTENT.model_copy(deep=True)


def parse_site_content(payload: Mapping[str, Any]) -> SiteContent:
    """Strict parse of a full content document submitted by the admin."""
    return SiteContent.model_validate(payload)
