"""
Cloudinary media hosting - product images and PDF catalogs.

Uploads are sent as base64 data URIs. The SDK is blocking, so calls run in
a worker thread.
"""
import asyncio
import base64
from dataclasses import dataclass, field
from typing import Optional

import cloudinary
import cloudinary.uploader

from storefront import config
from storefront.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)

IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")
PDF_TYPE = "application/pdf"
MAX_IMAGE_BYTES = 10 * 1024 * 1024
MAX_PDF_BYTES = 50 * 1024 * 1024

# Transformation presets: (width, height)
IMAGE_PRESETS = {
    "thumbnail": (150, 150),
    "card": (400, 400),
    "product": (600, 600),
    "banner": (1200, 400),
    "hero": (1920, 1080),
    "og": (1200, 630),
}


class MediaValidationError(ValueError):
    """Rejected upload (wrong type or too large)."""


@dataclass
class UploadResult:
    public_id: str
    url: str
    secure_url: str
    pages: Optional[int] = None
    extra: dict = field(default_factory=dict)

    def to_response(self) -> dict:
        data = {
            "success": True,
            "publicId": self.public_id,
            "url": self.url,
            "secureUrl": self.secure_url,
        }
        if self.pages is not None:
            data["pages"] = self.pages
        return data


_configured = False


def is_cloudinary_configured() -> bool:
    return bool(config.CLOUDINARY_URL or config.CLOUDINARY_CLOUD_NAME)


def _ensure_configured() -> None:
    global _configured
    if _configured:
        return
    if config.CLOUDINARY_URL:
        # SDK reads CLOUDINARY_URL from the environment itself
        cloudinary.config(secure=True)
    else:
        cloudinary.config(
            cloud_name=config.CLOUDINARY_CLOUD_NAME,
            api_key=config.CLOUDINARY_API_KEY,
            api_secret=config.CLOUDINARY_API_SECRET,
            secure=True,
        )
    _configured = True


def _data_uri(data: bytes, content_type: str) -> str:
    return f"data:{content_type};base64,{base64.b64encode(data).decode('ascii')}"


def validate_image(content_type: str | None, size: int) -> None:
    if content_type not in IMAGE_TYPES:
        raise MediaValidationError("Invalid file type. Use JPG, PNG, WebP or GIF.")
    if size > MAX_IMAGE_BYTES:
        raise MediaValidationError("File too large. Maximum 10MB.")


def validate_pdf(content_type: str | None, size: int) -> None:
    if content_type != PDF_TYPE:
        raise MediaValidationError("Only PDF files are allowed.")
    if size > MAX_PDF_BYTES:
        raise MediaValidationError("File too large. Maximum 50MB.")


async def upload_image(
    data: bytes,
    content_type: str,
    folder: Optional[str] = None,
    tags: Optional[list[str]] = None,
) -> UploadResult:
    """Validate and upload an image."""
    validate_image(content_type, len(data))
    _ensure_configured()

    result = await asyncio.to_thread(
        cloudinary.uploader.upload,
        _data_uri(data, content_type),
        folder=folder or config.CLOUDINARY_DEFAULT_FOLDER,
        tags=tags,
        resource_type="image",
    )
    logger.info(f"Uploaded image {sanitize_string_for_logging(result.get('public_id'))}")
    return UploadResult(
        public_id=result["public_id"],
        url=result.get("url", ""),
        secure_url=result.get("secure_url", ""),
    )


async def upload_pdf(
    data: bytes,
    content_type: str,
    folder: Optional[str] = None,
    tags: Optional[list[str]] = None,
) -> UploadResult:
    """Validate and upload a PDF catalog as a raw resource."""
    validate_pdf(content_type, len(data))
    _ensure_configured()

    result = await asyncio.to_thread(
        cloudinary.uploader.upload,
        _data_uri(data, PDF_TYPE),
        folder=folder or f"{config.CLOUDINARY_DEFAULT_FOLDER}/catalogs",
        tags=tags or ["catalog", "pdf"],
        resource_type="raw",
    )
    logger.info(f"Uploaded PDF {sanitize_string_for_logging(result.get('public_id'))}")
    return UploadResult(
        public_id=result["public_id"],
        url=result.get("url", ""),
        secure_url=result.get("secure_url", ""),
        pages=result.get("pages"),
    )


async def delete_file(public_id: str, resource_type: str = "image") -> bool:
    """Destroy an uploaded asset. True when Cloudinary reports `ok`."""
    _ensure_configured()
    result = await asyncio.to_thread(
        cloudinary.uploader.destroy, public_id, resource_type=resource_type
    )
    return result.get("result") == "ok"


def optimized_image_url(public_id: str, preset: str | tuple[int, int]) -> str:
    """
    Build a delivery URL with fill crop and automatic quality/format.

    Returns the id unchanged when no cloud name is configured.
    """
    cloud_name = config.CLOUDINARY_CLOUD_NAME
    if not cloud_name:
        logger.warning("Cloudinary cloud name not configured")
        return public_id

    width, height = IMAGE_PRESETS[preset] if isinstance(preset, str) else preset
    transformation = ",".join([f"w_{width}", f"h_{height}", "c_fill", "q_auto", "f_auto"])
    return f"https://res.cloudinary.com/{cloud_name}/image/upload/{transformation}/{public_id}"


def parse_tags(raw: Optional[str]) -> Optional[list[str]]:
    """Split a comma separated form value into tags."""
    if not raw:
        return None
    return [tag.strip() for tag in raw.split(",") if tag.strip()]
