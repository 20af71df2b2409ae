"""
Shared pytest fixtures for all test modules.

The object gateway is always replaced by an in-process fake; no test ever
reaches the network.
"""

import io
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.core.dependencies import get_gateway
from app.main import app


# ---------------------------------------------------------------------------
# Fake gateways
# ---------------------------------------------------------------------------


class UnreachableGateway:
    """Simulates a gateway that is down: every fetch raises a connection error."""

    def __init__(self):
        self.calls = []

    async def fetch(self, object_id: str) -> bytes:
        self.calls.append(object_id)
        raise ConnectionError("gateway unreachable")


class StaticGateway:
    """Serves the same bytes for every object id."""

    def __init__(self, blob: bytes):
        self.blob = blob
        self.calls = []

    async def fetch(self, object_id: str) -> bytes:
        self.calls.append(object_id)
        return self.blob


# ---------------------------------------------------------------------------
# Core infrastructure fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def unreachable_gateway():
    return UnreachableGateway()


@pytest.fixture
def client(unreachable_gateway):
    """
    FastAPI TestClient whose gateway is unreachable.

    http_client initialize()/close() are patched to no-ops so the lifespan
    never opens a real aiohttp session.
    """
    app.dependency_overrides[get_gateway] = lambda: unreachable_gateway
    with (
        patch("app.integrations.http_client.initialize"),
        patch("app.integrations.http_client.close"),
    ):
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Shared test-data helpers
# ---------------------------------------------------------------------------


def make_image(width: int, height: int, fmt: str = "PNG") -> bytes:
    """Create a solid-colour image in memory."""
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=(128, 128, 128)).save(buf, format=fmt)
    return buf.getvalue()


def make_tiny_png() -> bytes:
    return make_image(10, 10, "PNG")


def make_tiny_jpeg() -> bytes:
    return make_image(10, 10, "JPEG")
