"""
Request-level orchestration for artwork analysis: input validation, object
fetch, pipeline run and response-envelope assembly.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from app.analysis.pipeline import analyze_blob
from app.analysis.weights import ScoringWeights
from app.config import settings
from app.core.errors import ValidationError
from app.integrations.gateway import ObjectFetcher, synthesize_blob

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_analysis_request(payload: Any) -> tuple[str, Optional[str]]:
    """
    Validate an /analyze-artwork body and return (ipfs_hash, artwork_title).

    Raises ValidationError when the body is not an object or `ipfsHash` is
    missing, empty or not a string. A non-string title is ignored.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON body")

    ipfs_hash = payload.get("ipfsHash")
    # Opaque content address: passed through exactly as sent
    if not isinstance(ipfs_hash, str) or not ipfs_hash:
        raise ValidationError("IPFS hash is required")

    title = payload.get("artworkTitle")
    if not isinstance(title, str) or not title:
        title = None
    return ipfs_hash, title


async def analyze_artwork(
    ipfs_hash: str,
    artwork_title: Optional[str],
    fetcher: ObjectFetcher,
    weights: Optional[ScoringWeights] = None,
) -> dict:
    """Fetch the object (or its synthetic stand-in) and wrap the verdict in the response envelope."""
    title = artwork_title or settings.default_title
    logger.info(f"[ANALYSIS] New request: title='{title}', ipfs={ipfs_hash}")

    fetched = await fetcher.fetch(ipfs_hash)
    if not fetched.fetched_from_gateway:
        logger.info(f"[ANALYSIS] Using synthetic blob for {ipfs_hash}")

    verdict = await analyze_blob(fetched.blob, ipfs_hash, title, weights=weights)

    logger.info(
        f"[ANALYSIS] Complete for '{title}': "
        f"score={verdict['authenticityScore']}/100, confidence={verdict['confidenceTier']}"
    )
    return {
        "success": True,
        "ipfsHash": ipfs_hash,
        "artworkTitle": artwork_title or settings.default_display_title,
        "fetchedFromIPFS": fetched.fetched_from_gateway,
        "timestamp": _utc_now_iso(),
        "aiAnalysis": verdict,
    }


async def recompute_analysis(
    ipfs_hash: str, weights: Optional[ScoringWeights] = None
) -> dict:
    """
    Re-derive a verdict for GET /analysis/{hash}. No gateway call is made;
    the blob is synthesized from the hash and nothing is read from storage.
    """
    logger.info(f"[ANALYSIS] Recomputing analysis for {ipfs_hash}")
    blob = synthesize_blob(ipfs_hash, settings.cached_repeat)
    verdict = await analyze_blob(blob, ipfs_hash, settings.cached_title, weights=weights)
    return {
        "success": True,
        "ipfsHash": ipfs_hash,
        "cached": True,
        "timestamp": _utc_now_iso(),
        "aiAnalysis": verdict,
    }
