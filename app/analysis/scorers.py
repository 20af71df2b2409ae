"""
The three independent sub-score heuristics.

Each scorer is a pure function of its arguments (plus static settings) and is
bounded for every input, including empty or malformed blobs:

  - score_quality      → [65, 100]  from probed metadata
  - score_uniqueness   → [70, 95]   from object id + title
  - score_consistency  → [70, 94]   from the leading blob bytes
"""

from typing import Optional

from app.analysis.types import ObjectMetadata
from app.config import settings

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

UNIQUENESS_BASE = 70
UNIQUENESS_SPAN = 26    # 70..95
CONSISTENCY_BASE = 70
CONSISTENCY_SPAN = 25   # 70..94


def _resolution_bonus(pixels: int) -> int:
    if pixels > settings.quality_pixels_ultra:
        return settings.quality_pixels_ultra_bonus
    if pixels > settings.quality_pixels_high:
        return settings.quality_pixels_high_bonus
    if pixels > settings.quality_pixels_medium:
        return settings.quality_pixels_medium_bonus
    if pixels > settings.quality_pixels_low:
        return settings.quality_pixels_low_bonus
    return 0


def _format_bonus(encoding: str) -> int:
    encoding = (encoding or "").lower()
    if encoding == "png":
        return settings.quality_png_bonus
    if encoding in ("jpg", "jpeg"):
        return settings.quality_jpeg_bonus
    return 0


def _aspect_bonus(width: int, height: int) -> int:
    # Zero height fails the check rather than dividing by zero
    if height <= 0:
        return 0
    ratio = width / height
    if settings.quality_aspect_min < ratio < settings.quality_aspect_max:
        return settings.quality_aspect_bonus
    return 0


def score_quality(metadata: ObjectMetadata) -> int:
    """Resolution, format and aspect-ratio bonuses on a base of 70, clamped to [65, 100]."""
    score = settings.quality_base
    score += _resolution_bonus(metadata.pixel_count)
    score += _format_bonus(metadata.encoding)
    score += _aspect_bonus(metadata.width_px, metadata.height_px)
    return min(settings.quality_max, max(settings.quality_min, score))


def rolling_hash(text: str) -> int:
    """
    31-multiplier string hash over UTF-16 code units, wrapped to a signed
    32-bit integer. Astral characters contribute two units (surrogate pair).
    """
    h = 0
    units = text.encode("utf-16-le")
    for i in range(0, len(units), 2):
        code = units[i] | (units[i + 1] << 8)
        h = (h * 31 + code) & _UINT32_MASK
    if h & _INT32_SIGN:
        h -= 1 << 32
    return h


def score_uniqueness(object_id: str, title: str) -> int:
    """Map the rolling hash of `object_id + title` into [70, 95]."""
    return UNIQUENESS_BASE + abs(rolling_hash(object_id + title)) % UNIQUENESS_SPAN


def score_consistency(blob: bytes, window: Optional[int] = None) -> int:
    """Map the byte sum of the first `window` bytes into [70, 94]."""
    if window is None:
        window = settings.consistency_window
    return CONSISTENCY_BASE + sum(blob[:window]) % CONSISTENCY_SPAN
