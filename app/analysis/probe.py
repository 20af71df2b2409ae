"""
Structural metadata probe for fetched blobs.

Only the image header is read: Pillow's `Image.open` is lazy, so `size` and
`format` are available without decoding pixel data.
"""

import io
import logging

from PIL import Image, UnidentifiedImageError

from app.analysis.types import ObjectMetadata
from app.config import settings

# Header-only parse; no pixel data is ever decoded here
Image.MAX_IMAGE_PIXELS = settings.pil_max_image_pixels

logger = logging.getLogger(__name__)


def probe_metadata(blob: bytes) -> ObjectMetadata:
    """
    Extract width, height, encoding and byte size from a blob.

    Non-image or truncated blobs never raise; they yield a record with zero
    dimensions and an empty encoding, which the quality scorer treats as
    low-resolution, unknown-format input.
    """
    byte_size = len(blob)
    try:
        with Image.open(io.BytesIO(blob)) as img:
            width, height = img.size
            encoding = (img.format or "").lower()
    except UnidentifiedImageError:
        logger.debug(f"[PROBE] Unidentified blob ({byte_size} bytes), using defaults")
        return ObjectMetadata(byte_size=byte_size)
    except Exception as e:
        logger.debug(f"[PROBE] Could not read image header ({byte_size} bytes): {e}")
        return ObjectMetadata(byte_size=byte_size)

    logger.info(f"[PROBE] {width}x{height} {encoding or 'unknown'} ({byte_size} bytes)")
    return ObjectMetadata(
        width_px=width,
        height_px=height,
        encoding=encoding,
        byte_size=byte_size,
    )
