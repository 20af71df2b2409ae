"""Unit tests for app/analysis/probe.py — Pillow header probe with degradation."""

import struct
import zlib

from app.analysis.probe import probe_metadata
from app.analysis.scorers import score_quality
from app.analysis.types import ObjectMetadata
from tests.conftest import make_image, make_tiny_jpeg, make_tiny_png


def test_probe_png():
    blob = make_tiny_png()
    meta = probe_metadata(blob)
    assert (meta.width_px, meta.height_px, meta.encoding) == (10, 10, "png")
    assert meta.byte_size == len(blob)
    assert meta.is_probed


def test_probe_jpeg_encoding_is_lowercase():
    meta = probe_metadata(make_tiny_jpeg())
    assert meta.encoding == "jpeg"


def test_probe_non_square():
    meta = probe_metadata(make_image(64, 32, "GIF"))
    assert (meta.width_px, meta.height_px, meta.encoding) == (64, 32, "gif")


def test_probe_non_image_degrades():
    meta = probe_metadata(b"definitely not an image")
    assert meta == ObjectMetadata(byte_size=23)
    assert not meta.is_probed


def test_probe_empty_blob_degrades():
    assert probe_metadata(b"") == ObjectMetadata()


def test_probe_truncated_header_degrades():
    meta = probe_metadata(make_tiny_png()[:10])
    assert meta.pixel_count == 0
    assert meta.encoding == ""
    assert meta.byte_size == 10


def test_probe_synthetic_fallback_blob_degrades():
    meta = probe_metadata(("QmTest123" * 1000).encode())
    assert meta.pixel_count == 0


def _with_png_dimensions(blob: bytes, width: int, height: int) -> bytes:
    """Rewrite the IHDR width/height and its CRC without touching the pixel data."""
    ihdr = blob[12:16] + struct.pack(">II", width, height) + blob[24:29]
    crc = struct.pack(">I", zlib.crc32(ihdr))
    return blob[:12] + ihdr + crc + blob[33:]


def test_oversized_header_reports_real_dimensions():
    # 400 MP header: well past Pillow's default decompression-bomb limit
    blob = _with_png_dimensions(make_image(1, 1, "PNG"), 20000, 20000)
    meta = probe_metadata(blob)

    assert (meta.width_px, meta.height_px, meta.encoding) == (20000, 20000, "png")
    assert score_quality(meta) == 100
