"""
Draft preview/publish controller.

An admin stages a draft, sees it rendered on the live site (only their own
session sees it), then either publishes it to the backing store or discards
it. One controller type serves both seasonal themes and site content.

States: inactive -> previewing -> inactive (cancel or successful publish).
A failed publish stays in previewing so the admin can retry.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from storefront.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Writes a draft through to persistent storage; falsy result means failure
Publisher = Callable[[T], Awaitable[bool]]


@dataclass(frozen=True)
class PreviewState(Generic[T]):
    """Replaced wholesale on every transition, never mutated."""
    is_active: bool = False
    draft: Optional[T] = None
    return_url: str = ""


class PreviewController(Generic[T]):
    """Holds one draft and the last known persisted value."""

    def __init__(
        self,
        name: str,
        publisher: Publisher,
        default_return_url: str,
        persisted: Optional[T] = None,
    ):
        self.name = name
        self._publisher = publisher
        self.default_return_url = default_return_url
        self._persisted = persisted
        self._state: PreviewState[T] = PreviewState(return_url=default_return_url)
        self._publishing = False

    @property
    def state(self) -> PreviewState[T]:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state.is_active

    @property
    def is_publishing(self) -> bool:
        return self._publishing

    @property
    def persisted(self) -> Optional[T]:
        return self._persisted

    def load_persisted(self, value: Optional[T]) -> None:
        """Refresh the persisted value read from the store."""
        self._persisted = value

    def effective_value(self) -> Optional[T]:
        """The draft while previewing, otherwise the persisted value."""
        if self._state.is_active and self._state.draft is not None:
            return self._state.draft
        return self._persisted

    def enter_preview(self, payload: T, return_url: Optional[str] = None) -> None:
        """Start (or replace) the preview. Last write wins, nothing is merged."""
        self._state = PreviewState(
            is_active=True,
            draft=payload,
            return_url=return_url or self.default_return_url,
        )
        logger.info(f"{self.name} preview started")

    def cancel_preview(self) -> None:
        """Discard the draft. Navigation to `return_url` is up to the caller."""
        self._reset()
        logger.info(f"{self.name} preview cancelled")

    async def publish_preview(self) -> bool:
        """
        Write the draft through to the store.

        On success the draft becomes the persisted value and the preview
        ends. On failure (falsy publisher result or exception) the draft is
        kept for a retry. Never raises.
        """
        draft = self._state.draft
        if not self._state.is_active or draft is None:
            return False

        self._publishing = True
        try:
            ok = bool(await self._publisher(draft))
        except Exception as e:
            logger.error(f"Failed to publish {self.name}: {e}", exc_info=True)
            ok = False
        finally:
            self._publishing = False

        if not ok:
            logger.warning(f"{self.name} publish rejected, draft kept")
            return False

        self._persisted = draft
        # A newer draft entered while publishing stays in preview
        if self._state.draft is draft:
            self._reset()
        logger.info(f"{self.name} published")
        return True

    def _reset(self) -> None:
        self._state = PreviewState(return_url=self.default_return_url)

    def to_dict(self, serialize: Callable[[T], Any] = lambda value: value) -> dict[str, Any]:
        draft = self._state.draft
        return {
            "isActive": self._state.is_active,
            "draft": serialize(draft) if draft is not None else None,
            "returnUrl": self._state.return_url,
            "isPublishing": self._publishing,
        }
