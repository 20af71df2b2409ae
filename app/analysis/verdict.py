"""
Weighted combination of sub-scores into the authenticity verdict.

The tier table is evaluated on the clamped score, highest bound first. With
the default floor of 70 the final Low/High row can never match; it is kept so
that lowering the floor through configuration behaves predictably.
"""

import math

from app.analysis.types import ConfidenceTier, RiskTier, SubScores
from app.analysis.weights import ScoringWeights


def weighted_score(sub_scores: SubScores, weights: ScoringWeights) -> int:
    """Floored weighted sum, clamped to [weights.floor, weights.ceiling]."""
    raw = math.floor(
        sub_scores.quality * weights.quality
        + sub_scores.uniqueness * weights.uniqueness
        + sub_scores.consistency * weights.consistency
    )
    return max(weights.floor, min(weights.ceiling, raw))


def classify(score: int, weights: ScoringWeights) -> tuple[ConfidenceTier, RiskTier]:
    if score >= weights.very_high:
        return ConfidenceTier.VERY_HIGH, RiskTier.VERY_LOW
    if score >= weights.high:
        return ConfidenceTier.HIGH, RiskTier.LOW
    if score >= weights.medium:
        return ConfidenceTier.MEDIUM, RiskTier.MEDIUM
    return ConfidenceTier.LOW, RiskTier.HIGH


def combine(
    sub_scores: SubScores, weights: ScoringWeights
) -> tuple[int, ConfidenceTier, RiskTier]:
    score = weighted_score(sub_scores, weights)
    confidence, risk = classify(score, weights)
    return score, confidence, risk
