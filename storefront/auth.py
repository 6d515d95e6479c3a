"""
Admin Authentication

Sign-in itself is handled by Supabase Auth in the admin panel; the API only
checks the bearer token it forwards. Two kinds of token are accepted:

- `ADMIN_API_KEY` (scripts, CI seeding)
- a Supabase access token whose user id is listed in `admin_users`
"""

import asyncio
import secrets
from dataclasses import dataclass
from typing import Optional

from fastapi import Header, HTTPException

from storefront import config
from storefront.db import get_supabase_sync, is_supabase_configured
from storefront.errors import ERROR_ADMIN_REQUIRED, ERROR_UNAUTHORIZED
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


@dataclass(frozen=True)
class AdminIdentity:
    """Authenticated admin. `user_id` is None for the static API key."""
    user_id: Optional[str]
    email: Optional[str] = None
    role: str = "admin"


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None


async def _supabase_user(token: str):
    """Resolve an access token to a Supabase auth user, or None."""
    client = get_supabase_sync()
    try:
        response = await asyncio.to_thread(client.auth.get_user, token)
    except Exception as e:
        logger.warning(f"Supabase token rejected: {type(e).__name__}")
        return None
    return getattr(response, "user", None)


async def verify_admin(
    authorization: str = Header(None, alias="Authorization"),
) -> AdminIdentity:
    """
    Verify that the caller is an admin.

    Missing or malformed header -> 401, valid user without admin row -> 403.
    """
    token = _bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)

    if config.ADMIN_API_KEY and secrets.compare_digest(token, config.ADMIN_API_KEY):
        return AdminIdentity(user_id=None, role="service")

    if not is_supabase_configured():
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)

    user = await _supabase_user(token)
    if user is None:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)

    from storefront.services.database import get_database
    role = await get_database().admins.get_role(user.id)
    if role is None:
        logger.warning(f"Non-admin user {sanitize_id_for_logging(user.id)} denied")
        raise HTTPException(status_code=403, detail=ERROR_ADMIN_REQUIRED)

    return AdminIdentity(user_id=user.id, email=getattr(user, "email", None), role=role)
