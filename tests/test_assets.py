"""Tests for photo validation and upload reading."""

import pytest

from storefront.exceptions import AssetTooLargeError, ValidationError
from storefront.models.product import PhotoUpload
from storefront.utils.assets import read_upload, validate_asset


def test_empty_blob_is_no_asset():
    assert validate_asset(b"") is False
    assert validate_asset(None) is False


def test_largest_accepted_size():
    assert validate_asset(b"x" * 999_999) is True


@pytest.mark.parametrize("size", [1_000_000, 1_000_001])
def test_limit_and_above_rejected(size):
    with pytest.raises(AssetTooLargeError):
        validate_asset(b"x" * size)


def test_asset_too_large_is_validation_error():
    assert issubclass(AssetTooLargeError, ValidationError)
    assert AssetTooLargeError().status == 400


async def test_read_upload_none():
    assert await read_upload(None) is None


async def test_read_upload_empty_data_skipped():
    assert await read_upload(PhotoUpload(data=b"", content_type="image/png")) is None


async def test_read_upload_from_memory():
    asset = await read_upload(PhotoUpload(data=b"\x89PNG data", content_type="image/png"))
    assert asset.data == b"\x89PNG data"
    assert asset.content_type == "image/png"
    assert asset.size == 9


async def test_read_upload_from_temp_file(tmp_path):
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"jpeg-bytes")

    asset = await read_upload(PhotoUpload(path=path, size=10, content_type="image/jpeg"))

    assert asset.data == b"jpeg-bytes"
    assert asset.content_type == "image/jpeg"


async def test_read_upload_rejects_declared_size_before_reading(tmp_path):
    missing = tmp_path / "never-read.jpg"

    with pytest.raises(AssetTooLargeError):
        await read_upload(PhotoUpload(path=missing, size=1_000_000, content_type="image/jpeg"))


async def test_read_upload_rejects_non_images():
    with pytest.raises(ValidationError):
        await read_upload(PhotoUpload(data=b"%PDF-1.4", content_type="application/pdf"))
