"""
Admin Media Router

Image and PDF uploads to Cloudinary (multipart form: `file`, optional
`folder`, optional comma separated `tags`).
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile

from storefront.auth import verify_admin
from storefront.errors import ERROR_CLOUDINARY_NOT_CONFIGURED, ERROR_ID_REQUIRED, ERROR_NO_FILE
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services import media

logger = get_logger(__name__)
router = APIRouter(tags=["admin-media"])


def _require_cloudinary() -> None:
    if not media.is_cloudinary_configured():
        raise HTTPException(status_code=503, detail=ERROR_CLOUDINARY_NOT_CONFIGURED)


@router.post("/upload")
async def admin_upload_image(
    file: Optional[UploadFile] = File(None),
    folder: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    admin=Depends(verify_admin),
):
    if file is None:
        raise HTTPException(status_code=400, detail=ERROR_NO_FILE)
    _require_cloudinary()

    data = await file.read()
    try:
        result = await media.upload_image(data, file.content_type, folder, media.parse_tags(tags))
    except media.MediaValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_response()


@router.post("/upload-pdf")
async def admin_upload_pdf(
    file: Optional[UploadFile] = File(None),
    folder: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    admin=Depends(verify_admin),
):
    if file is None:
        raise HTTPException(status_code=400, detail=ERROR_NO_FILE)
    _require_cloudinary()

    data = await file.read()
    try:
        result = await media.upload_pdf(data, file.content_type, folder, media.parse_tags(tags))
    except media.MediaValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_response()


@router.delete("/upload")
async def admin_delete_upload(
    public_id: Optional[str] = Query(None, alias="publicId"),
    resource_type: str = Query("image", alias="resourceType", pattern="^(image|raw|video)$"),
    admin=Depends(verify_admin),
):
    if not public_id:
        raise HTTPException(status_code=400, detail=ERROR_ID_REQUIRED)
    _require_cloudinary()

    deleted = await media.delete_file(public_id, resource_type)
    if not deleted:
        logger.warning(f"Cloudinary did not delete {sanitize_string_for_logging(public_id)}")
    return {"success": deleted}
