"""
Admin Preview Router

Stage a theme or site content draft, view it on the live site, then publish
or discard it. Drafts live in the admin's preview session (in memory); the
token travels in `X-Preview-Session` and is issued when a preview starts.
Public reads carrying the token render the drafts.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response
from pydantic import ValidationError

from storefront.auth import verify_admin
from storefront.content import SiteContent, parse_site_content
from storefront.errors import (
    ERROR_NO_ACTIVE_PREVIEW,
    ERROR_PUBLISH_FAILED,
    ERROR_PUBLISH_IN_PROGRESS,
)
from storefront.logging import get_logger
from storefront.preview import AdminPreviewSession, PreviewKind, get_preview_store
from storefront.routers.deps import PREVIEW_SESSION_HEADER, get_preview_session, require_database
from storefront.services.database import Database
from storefront.themes import SeasonalTheme
from .models import PreviewRequest

logger = get_logger(__name__)
router = APIRouter(tags=["admin-preview"])


def _parse_draft(kind: PreviewKind, draft: dict) -> SeasonalTheme | SiteContent:
    try:
        if kind == "theme":
            return SeasonalTheme.model_validate(draft)
        return parse_site_content(draft)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid {kind} draft: {e.error_count()} errors")


def _existing_session(session: Optional[AdminPreviewSession]) -> AdminPreviewSession:
    if session is None:
        raise HTTPException(status_code=404, detail=ERROR_NO_ACTIVE_PREVIEW)
    return session


@router.get("/preview")
async def admin_get_preview(
    session: Optional[AdminPreviewSession] = Depends(get_preview_session),
    admin=Depends(verify_admin),
):
    """Both drafts and which preview bar to show."""
    if session is None:
        return {"banner": None, "theme": None, "content": None}
    return session.to_dict()


@router.post("/preview/{kind}")
async def admin_enter_preview(
    kind: PreviewKind,
    request: PreviewRequest,
    response: Response,
    x_preview_session: Optional[str] = Header(None, alias=PREVIEW_SESSION_HEADER),
    admin=Depends(verify_admin),
):
    """Start or replace the draft for `kind`."""
    draft = _parse_draft(kind, request.draft)
    token, session = get_preview_store().get_or_create(x_preview_session)
    session.controller(kind).enter_preview(draft, request.return_url)

    response.headers[PREVIEW_SESSION_HEADER] = token
    return {"session": token, **session.to_dict()}


@router.delete("/preview/{kind}")
async def admin_cancel_preview(
    kind: PreviewKind,
    session: Optional[AdminPreviewSession] = Depends(get_preview_session),
    admin=Depends(verify_admin),
):
    """Discard the draft. Nothing is written."""
    controller = _existing_session(session).controller(kind)
    return_url = controller.state.return_url
    controller.cancel_preview()
    return {"success": True, "returnUrl": return_url, **session.to_dict()}


@router.post("/preview/{kind}/publish")
async def admin_publish_preview(
    kind: PreviewKind,
    session: Optional[AdminPreviewSession] = Depends(get_preview_session),
    db: Database = Depends(require_database),
    admin=Depends(verify_admin),
):
    """
    Persist the draft. On failure the draft is kept so the admin can retry.
    """
    controller = _existing_session(session).controller(kind)
    if controller.is_publishing:
        raise HTTPException(status_code=409, detail=ERROR_PUBLISH_IN_PROGRESS)
    if not controller.is_active:
        raise HTTPException(status_code=400, detail=ERROR_NO_ACTIVE_PREVIEW)

    return_url = controller.state.return_url
    if not await controller.publish_preview():
        raise HTTPException(status_code=500, detail=ERROR_PUBLISH_FAILED)
    return {"success": True, "returnUrl": return_url, **session.to_dict()}
