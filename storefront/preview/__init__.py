"""Preview package: draft preview/publish for seasonal themes and site content."""
from .controller import PreviewController, PreviewState
from .session import AdminPreviewSession, PreviewKind, get_preview_store

__all__ = [
    "PreviewController",
    "PreviewState",
    "AdminPreviewSession",
    "PreviewKind",
    "get_preview_store",
]
