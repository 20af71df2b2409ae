"""
Per-blob analysis pipeline — public entry point for the analysis routes.

`analyze_blob` orchestrates:
  1. Metadata probe (Pillow header read, degrades to empty metadata)
  2. Quality / uniqueness / consistency sub-scores (independent, pure)
  3. Weighted verdict + confidence / risk tiers
  4. Verification token

Steps 1–3 are CPU work and run in a worker thread. Any exception raised there
is logged and converted into the default moderate verdict; callers always
receive a well-formed result.
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Optional

from app.analysis.probe import probe_metadata
from app.analysis.scorers import (
    CONSISTENCY_BASE,
    UNIQUENESS_BASE,
    score_consistency,
    score_quality,
    score_uniqueness,
)
from app.analysis.token import generate_token
from app.analysis.types import ConfidenceTier, ObjectMetadata, RiskTier, SubScores
from app.analysis.verdict import combine
from app.analysis.weights import ScoringWeights
from app.config import settings

logger = logging.getLogger(__name__)

def degraded_sub_scores() -> SubScores:
    """Default quality score plus the floor of the other two ranges."""
    return SubScores(
        quality=settings.default_score,
        uniqueness=UNIQUENESS_BASE,
        consistency=CONSISTENCY_BASE,
    )


def _format_file_size(byte_size: int) -> str:
    # Round half up, not banker's rounding
    return f"{int(byte_size / 1024 + 0.5)} KB"


def _score_blob(
    blob: bytes, object_id: str, title: str, weights: ScoringWeights
) -> tuple[ObjectMetadata, SubScores, int, ConfidenceTier, RiskTier]:
    metadata = probe_metadata(blob)
    sub_scores = SubScores(
        quality=score_quality(metadata),
        uniqueness=score_uniqueness(object_id, title),
        consistency=score_consistency(blob),
    )
    score, confidence, risk = combine(sub_scores, weights)
    return metadata, sub_scores, score, confidence, risk


def build_verdict(
    object_id: str,
    score: int,
    confidence: ConfidenceTier,
    risk: RiskTier,
    sub_scores: SubScores,
    metadata: ObjectMetadata,
    computed_at: datetime,
    elapsed_sec: float,
    degraded: bool = False,
) -> dict:
    return {
        "authenticityScore": score,
        "confidenceTier": confidence.value,
        "riskTier": risk.value,
        "subScores": {
            "quality": sub_scores.quality,
            "uniqueness": sub_scores.uniqueness,
            "consistency": sub_scores.consistency,
        },
        "verificationToken": generate_token(object_id, score, now=computed_at),
        "computedAt": computed_at.isoformat(),
        "analysis": {
            "resolution": f"{metadata.width_px}x{metadata.height_px}",
            "format": metadata.encoding or None,
            "fileSize": _format_file_size(metadata.byte_size),
            "degraded": degraded,
        },
        "processingTime": f"{elapsed_sec:.2f}s",
        "aiModel": settings.ai_model_label,
    }


def degraded_verdict(
    object_id: str,
    byte_size: int = 0,
    computed_at: Optional[datetime] = None,
    elapsed_sec: float = 0.0,
) -> dict:
    """Fixed moderate verdict returned when scoring fails unexpectedly."""
    if computed_at is None:
        computed_at = datetime.now(timezone.utc)
    return build_verdict(
        object_id,
        settings.default_score,
        ConfidenceTier.MEDIUM,
        RiskTier.MEDIUM,
        degraded_sub_scores(),
        ObjectMetadata(byte_size=byte_size),
        computed_at,
        elapsed_sec,
        degraded=True,
    )


async def analyze_blob(
    blob: bytes,
    object_id: str,
    title: str,
    weights: Optional[ScoringWeights] = None,
    now: Optional[datetime] = None,
) -> dict:
    """
    Score one blob and return the verdict dict (the `aiAnalysis` payload).

    Args:
        blob: Fetched or synthesized object bytes.
        object_id: Content address; feeds the uniqueness score and the token.
        title: Artwork title; feeds the uniqueness score.
        weights: Verdict weights and thresholds. Defaults to settings.
        now: Timestamp for `computedAt` and the token. Pin it for stable tokens.
    """
    if weights is None:
        weights = settings.scoring_weights()
    computed_at = now or datetime.now(timezone.utc)

    logger.info(f"[ANALYSIS] Starting analysis for '{title}' ({object_id})")
    start_time = time.perf_counter()

    try:
        metadata, sub_scores, score, confidence, risk = await asyncio.to_thread(
            _score_blob, blob, object_id, title, weights
        )
    except Exception:
        logger.exception(f"[ANALYSIS] Scoring failed for {object_id}; returning default verdict")
        return degraded_verdict(
            object_id, len(blob), computed_at, time.perf_counter() - start_time
        )

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"[ANALYSIS] {object_id}: quality={sub_scores.quality}, "
        f"uniqueness={sub_scores.uniqueness}, consistency={sub_scores.consistency} "
        f"→ score={score}, confidence={confidence.value} ({elapsed:.3f}s)"
    )
    return build_verdict(
        object_id, score, confidence, risk, sub_scores, metadata, computed_at, elapsed
    )
