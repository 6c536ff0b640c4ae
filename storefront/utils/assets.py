# storefront/utils/assets.py
import logging
import aiofiles
from typing import Optional
from ..constants import MAX_PHOTO_SIZE
from ..exceptions import AssetTooLargeError, ValidationError
from ..models.product import PhotoAsset, PhotoUpload

logger = logging.getLogger(__name__)

ALLOWED_PHOTO_TYPES = {
    'image/jpeg',
    'image/png',
    'image/gif',
    'image/webp',
}

def validate_asset(blob: Optional[bytes]) -> bool:
    """Check a photo payload against the size limit.

    Returns False for an empty payload (nothing to store) and True for an
    acceptable one. Raises AssetTooLargeError at MAX_PHOTO_SIZE bytes or more.
    """
    size = len(blob) if blob else 0
    if size == 0:
        return False
    if size >= MAX_PHOTO_SIZE:
        raise AssetTooLargeError(error=f"photo is {size} bytes")
    return True

def sniff_content_type(data: bytes) -> str:
    """MIME type detected from the bytes themselves (libmagic)"""
    import magic
    return magic.from_buffer(data, mime=True)

async def read_upload(upload: Optional[PhotoUpload]) -> Optional[PhotoAsset]:
    """Load and validate an uploaded photo; None when there is no photo"""
    if upload is None:
        return None

    # Reject on the declared size before touching the temp file
    if upload.size is not None and upload.size >= MAX_PHOTO_SIZE:
        raise AssetTooLargeError(error=f"photo is {upload.size} bytes")

    data = upload.data
    if data is None and upload.path is not None:
        async with aiofiles.open(upload.path, 'rb') as f:
            data = await f.read()

    if not validate_asset(data):
        return None

    content_type = upload.content_type or sniff_content_type(data)
    if content_type not in ALLOWED_PHOTO_TYPES:
        raise ValidationError("Photo must be a JPEG, PNG, GIF or WebP image",
                              error=f"unsupported content type {content_type}")

    logger.debug(f"Accepted photo upload: {len(data)} bytes, {content_type}")
    return PhotoAsset(data=data, content_type=content_type)
