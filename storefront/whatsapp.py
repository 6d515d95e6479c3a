"""
WhatsApp click-to-chat links.

Orders and enquiries are not submitted anywhere: the customer is sent to a
`wa.me` link with a pre-filled message and sends it themselves.

The destination number comes from the effective site content
(`contact.whatsapp`), falling back to `config.DEFAULT_WHATSAPP_NUMBER`.
"""
import re
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence
from urllib.parse import quote

from storefront import config
from storefront.services.money import format_money

if TYPE_CHECKING:
    from storefront.cart.models import CartItem
    from storefront.content import SiteContent

WHATSAPP_BASE_URL = "https://wa.me"

_NON_DIGITS = re.compile(r"\D")


def clean_phone_number(phone: str) -> str:
    """Strip every formatting character: `+51 932-371-532` -> `51932371532`."""
    return _NON_DIGITS.sub("", phone or "")


def _contact_field(content: "SiteContent | Mapping[str, Any] | None", name: str) -> str:
    """Read `contact.<name>` from a content model or its JSON form."""
    if content is None:
        return ""
    if isinstance(content, Mapping):
        contact = content.get("contact") or {}
        value = contact.get(name) if isinstance(contact, Mapping) else None
    else:
        value = getattr(getattr(content, "contact", None), name, None)
    return value if isinstance(value, str) else ""


def resolve_whatsapp_number(content: "SiteContent | Mapping[str, Any] | None" = None) -> str:
    """Digits-only WhatsApp number; the configured default when content has none."""
    configured = _contact_field(content, "whatsapp")
    if configured.strip():
        cleaned = clean_phone_number(configured)
        if cleaned:
            return cleaned
    return clean_phone_number(config.DEFAULT_WHATSAPP_NUMBER)


def resolve_phone_number(content: "SiteContent | Mapping[str, Any] | None" = None) -> str:
    """Display phone number, as typed by the admin."""
    configured = _contact_field(content, "phone")
    if configured.strip():
        return configured
    return config.DEFAULT_PHONE


def whatsapp_url(number: str, message: Optional[str] = None) -> str:
    url = f"{WHATSAPP_BASE_URL}/{number}"
    if message:
        url += f"?text={quote(message, safe='')}"
    return url


def phone_url(content: "SiteContent | Mapping[str, Any] | None" = None) -> str:
    return f"tel:+{resolve_whatsapp_number(content)}"


class Messages:
    """Canned opening messages."""

    GENERAL = "¡Hola! Me gustaría obtener más información sobre sus productos y servicios."
    QUOTE = "¡Hola! Me gustaría solicitar una cotización."

    @staticmethod
    def product(product_name: str) -> str:
        return f"¡Hola! Me interesa el producto: {product_name}. ¿Está disponible?"

    @staticmethod
    def service(service_name: str) -> str:
        return f"¡Hola! Quisiera información sobre el servicio de: {service_name}"

    @staticmethod
    def cart(items: str) -> str:
        return f"¡Hola! Me gustaría hacer un pedido:\n\n{items}"


def build_order_message(items: Sequence["CartItem"], total: Decimal) -> str:
    """Quote request listing every cart line and the estimated total."""
    lines = [
        "🛒 *SOLICITUD DE COTIZACIÓN*",
        "",
        "Hola, me gustaría cotizar los siguientes productos:",
        "",
    ]
    for index, item in enumerate(items, start=1):
        lines += [
            f"{index}. *{item.product.name}*",
            f"   📦 Cantidad: {item.quantity}",
            f"   💰 Precio unit.: {format_money(item.unit_price)}",
            f"   📝 Subtotal: {format_money(item.subtotal)}",
            "",
        ]
    lines += [
        "─────────────────",
        f"💵 *TOTAL ESTIMADO: {format_money(total)}*",
        "",
        "Por favor confirmar disponibilidad y precio final. ¡Gracias!",
    ]
    return "\n".join(lines)
