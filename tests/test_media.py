"""Tests for Cloudinary media hosting"""
import base64

import pytest
from unittest.mock import patch

from storefront.services import media


@pytest.fixture
def uploader():
    with patch("storefront.services.media.cloudinary.uploader") as mock_uploader:
        yield mock_uploader


class TestValidation:
    """Upload checks run before anything is sent."""

    @pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/webp", "image/gif"])
    def test_accepts_image_types(self, content_type):
        media.validate_image(content_type, 1024)

    def test_rejects_other_image_types(self):
        with pytest.raises(media.MediaValidationError):
            media.validate_image("image/svg+xml", 1024)

    def test_rejects_large_image(self):
        with pytest.raises(media.MediaValidationError, match="10MB"):
            media.validate_image("image/png", media.MAX_IMAGE_BYTES + 1)

    def test_rejects_non_pdf(self):
        with pytest.raises(media.MediaValidationError):
            media.validate_pdf("image/png", 10)

    def test_rejects_large_pdf(self):
        with pytest.raises(media.MediaValidationError, match="50MB"):
            media.validate_pdf("application/pdf", media.MAX_PDF_BYTES + 1)


@pytest.mark.asyncio
async def test_upload_image(uploader):
    uploader.upload.return_value = {
        "public_id": "libreria-central/abc",
        "url": "http://res.cloudinary.com/test-cloud/abc.png",
        "secure_url": "https://res.cloudinary.com/test-cloud/abc.png",
    }

    uploaded = await media.upload_image(b"\x89PNG", "image/png", tags=["producto"])

    data_uri = uploader.upload.call_args.args[0]
    assert data_uri == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()
    kwargs = uploader.upload.call_args.kwargs
    assert kwargs["folder"] == "libreria-central"
    assert kwargs["tags"] == ["producto"]
    assert kwargs["resource_type"] == "image"
    assert uploaded.to_response() == {
        "success": True,
        "publicId": "libreria-central/abc",
        "url": "http://res.cloudinary.com/test-cloud/abc.png",
        "secureUrl": "https://res.cloudinary.com/test-cloud/abc.png",
    }


@pytest.mark.asyncio
async def test_upload_invalid_image_not_sent(uploader):
    with pytest.raises(media.MediaValidationError):
        await media.upload_image(b"<svg/>", "image/svg+xml")

    uploader.upload.assert_not_called()


@pytest.mark.asyncio
async def test_upload_pdf(uploader):
    uploader.upload.return_value = {
        "public_id": "libreria-central/catalogs/verano",
        "url": "http://x/verano.pdf",
        "secure_url": "https://x/verano.pdf",
        "pages": 12,
    }

    uploaded = await media.upload_pdf(b"%PDF-1.7", "application/pdf")

    kwargs = uploader.upload.call_args.kwargs
    assert kwargs["resource_type"] == "raw"
    assert kwargs["tags"] == ["catalog", "pdf"]
    assert kwargs["folder"] == "libreria-central/catalogs"
    assert uploaded.to_response()["pages"] == 12


@pytest.mark.asyncio
async def test_delete_file(uploader):
    uploader.destroy.return_value = {"result": "ok"}
    assert await media.delete_file("libreria-central/abc") is True
    uploader.destroy.assert_called_once_with("libreria-central/abc", resource_type="image")

    uploader.destroy.return_value = {"result": "not found"}
    assert await media.delete_file("missing", "raw") is False


def test_optimized_image_url():
    url = media.optimized_image_url("libreria-central/abc", "card")

    assert url == (
        "https://res.cloudinary.com/test-cloud/image/upload/"
        "w_400,h_400,c_fill,q_auto,f_auto/libreria-central/abc"
    )


def test_optimized_image_url_custom_size():
    assert "w_50,h_80" in media.optimized_image_url("abc", (50, 80))


def test_optimized_image_url_without_cloud_name():
    with patch.object(media.config, "CLOUDINARY_CLOUD_NAME", ""):
        assert media.optimized_image_url("abc", "hero") == "abc"


def test_parse_tags():
    assert media.parse_tags("escolar, oferta ,,") == ["escolar", "oferta"]
    assert media.parse_tags("") is None
    assert media.parse_tags(None) is None
