"""Process-local session registry.

Sessions live only in memory and expire after a period of inactivity;
nothing is written to the database. Used for shopping carts and for admin
preview drafts.
"""
import secrets
import time
from typing import Callable, Generic, Optional, TypeVar

from storefront.logging import get_logger, sanitize_token_for_logging

logger = get_logger(__name__)

T = TypeVar("T")


class SessionStore(Generic[T]):
    """Maps opaque session tokens to per-session state objects."""

    def __init__(self, factory: Callable[[], T], ttl_seconds: int, name: str = "session"):
        self.name = name
        self._factory = factory
        self._ttl = ttl_seconds
        self._sessions: dict[str, tuple[T, float]] = {}

    def _expired(self, last_seen: float) -> bool:
        return time.monotonic() - last_seen > self._ttl

    def get(self, token: Optional[str]) -> Optional[T]:
        """Existing live session for a token, refreshing its idle timer."""
        if not token:
            return None
        entry = self._sessions.get(token)
        if entry is None:
            return None
        state, last_seen = entry
        if self._expired(last_seen):
            del self._sessions[token]
            logger.debug(f"{self.name} {sanitize_token_for_logging(token)} expired")
            return None
        self._sessions[token] = (state, time.monotonic())
        return state

    def get_or_create(self, token: Optional[str]) -> tuple[str, T]:
        """Return `(token, state)`, issuing a new token when needed."""
        state = self.get(token)
        if state is not None:
            return token, state
        self.purge_expired()
        new_token = secrets.token_urlsafe(24)
        state = self._factory()
        self._sessions[new_token] = (state, time.monotonic())
        logger.debug(f"{self.name} {sanitize_token_for_logging(new_token)} issued")
        return new_token, state

    def discard(self, token: str) -> None:
        self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        stale = [token for token, (_, seen) in self._sessions.items() if self._expired(seen)]
        for token in stale:
            del self._sessions[token]
        if stale:
            logger.info(f"Purged {len(stale)} expired {self.name} sessions")
        return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)
