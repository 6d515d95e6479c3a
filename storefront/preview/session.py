"""Per-admin preview session holding the theme and content drafts."""
from typing import Literal, Optional

from storefront import config
from storefront.content import SiteContent
from storefront.sessions import SessionStore
from storefront.themes import SeasonalTheme
from .controller import PreviewController, Publisher
from .publishers import ContentPublisher, ThemePublisher

PreviewKind = Literal["theme", "content"]

THEME_RETURN_URL = "/admin/temas"
CONTENT_RETURN_URL = "/admin/contenido"


class AdminPreviewSession:
    """
    Both drafts of one admin. They are independent: either, both or neither
    may be active.
    """

    def __init__(
        self,
        theme_publisher: Optional[Publisher] = None,
        content_publisher: Optional[Publisher] = None,
    ):
        self.theme: PreviewController[SeasonalTheme] = PreviewController(
            "theme", theme_publisher or ThemePublisher(), THEME_RETURN_URL
        )
        self.content: PreviewController[SiteContent] = PreviewController(
            "content", content_publisher or ContentPublisher(), CONTENT_RETURN_URL
        )

    def controller(self, kind: PreviewKind) -> PreviewController:
        if kind == "theme":
            return self.theme
        if kind == "content":
            return self.content
        raise ValueError(f"Unknown preview kind: {kind}")

    def active_banner(self) -> Optional[PreviewKind]:
        """Which preview bar to show. Only one renders; theme wins."""
        if self.theme.is_active:
            return "theme"
        if self.content.is_active:
            return "content"
        return None

    def to_dict(self) -> dict:
        return {
            "banner": self.active_banner(),
            "theme": self.theme.to_dict(lambda theme: theme.to_json()),
            "content": self.content.to_dict(lambda content: content.to_json()),
        }


_preview_store: Optional[SessionStore[AdminPreviewSession]] = None


def get_preview_store() -> SessionStore[AdminPreviewSession]:
    """Get the preview SessionStore singleton, keyed by `X-Preview-Session`."""
    global _preview_store
    if _preview_store is None:
        _preview_store = SessionStore(
            AdminPreviewSession, config.PREVIEW_SESSION_TTL_SECONDS, name="preview"
        )
    return _preview_store
