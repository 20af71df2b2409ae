"""
Content-addressed object retrieval with graceful degradation.

`ObjectFetcher` makes exactly one bounded attempt through an injected
`Gateway`. Any failure (timeout, non-2xx status, network error) is logged and
replaced by a deterministic synthetic blob so the analysis never blocks or
fails purely because the gateway is unavailable.
"""

import asyncio
import logging
from typing import Optional, Protocol

import aiohttp

from app.analysis.types import FetchResult
from app.config import settings
from app.core.errors import GatewayError
from app.integrations import http_client as http_module

logger = logging.getLogger(__name__)


class Gateway(Protocol):
    async def fetch(self, object_id: str) -> bytes:
        ...


class HttpGateway:
    """`GET <base>/<object_id>` against an IPFS-style HTTP gateway."""

    def __init__(self, base_url: Optional[str] = None, timeout_sec: Optional[float] = None):
        self.base_url = (base_url or settings.ipfs_gateway_url).rstrip("/")
        self.timeout_sec = timeout_sec if timeout_sec is not None else settings.gateway_timeout_sec

    def url_for(self, object_id: str) -> str:
        return f"{self.base_url}/{object_id}"

    async def fetch(self, object_id: str) -> bytes:
        url = self.url_for(object_id)
        logger.info(f"[FETCH] GET {url}")
        async with http_module.request_session() as session:
            async with session.get(
                url, timeout=aiohttp.ClientTimeout(total=self.timeout_sec)
            ) as response:
                if not 200 <= response.status < 300:
                    raise GatewayError(object_id, response.status)
                return await response.read()


def synthesize_blob(object_id: str, repeat: int) -> bytes:
    """Deterministic stand-in content: the object id repeated `repeat` times."""
    if not object_id:
        raise ValueError("object_id must be non-empty to synthesize a blob")
    return (object_id * repeat).encode("utf-8")


class ObjectFetcher:
    def __init__(
        self,
        gateway: Gateway,
        timeout_sec: Optional[float] = None,
        fallback_repeat: Optional[int] = None,
    ):
        self.gateway = gateway
        self.timeout_sec = timeout_sec if timeout_sec is not None else settings.gateway_timeout_sec
        self.fallback_repeat = fallback_repeat or settings.fallback_repeat

    async def fetch(self, object_id: str) -> FetchResult:
        """
        One attempt, bounded by `timeout_sec`. Never raises for gateway
        trouble; `fetched_from_gateway` tells the caller which path was taken.
        """
        if not object_id:
            raise ValueError("object_id must be non-empty")

        try:
            blob = await asyncio.wait_for(
                self.gateway.fetch(object_id), timeout=self.timeout_sec
            )
        except Exception as e:
            reason = "timed out" if isinstance(e, asyncio.TimeoutError) else f"{type(e).__name__}: {e}"
            logger.warning(f"[FETCH] Gateway fetch failed for {object_id} ({reason}); using synthetic blob")
            return FetchResult(
                blob=synthesize_blob(object_id, self.fallback_repeat),
                fetched_from_gateway=False,
            )

        logger.info(f"[FETCH] Fetched {object_id}: {len(blob)} bytes")
        return FetchResult(blob=blob, fetched_from_gateway=True)
