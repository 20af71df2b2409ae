"""Unit tests for app/analysis/verdict.py — weighted combination and tiers."""

import dataclasses

import pytest

from app.analysis.types import ConfidenceTier, RiskTier, SubScores
from app.analysis.verdict import classify, combine, weighted_score
from app.config import settings

WEIGHTS = settings.scoring_weights()


@pytest.mark.parametrize(
    "score, confidence, risk",
    [
        (100, ConfidenceTier.VERY_HIGH, RiskTier.VERY_LOW),
        (99, ConfidenceTier.VERY_HIGH, RiskTier.VERY_LOW),
        (90, ConfidenceTier.VERY_HIGH, RiskTier.VERY_LOW),
        (89, ConfidenceTier.HIGH, RiskTier.LOW),
        (80, ConfidenceTier.HIGH, RiskTier.LOW),
        (79, ConfidenceTier.MEDIUM, RiskTier.MEDIUM),
        (70, ConfidenceTier.MEDIUM, RiskTier.MEDIUM),
        (69, ConfidenceTier.LOW, RiskTier.HIGH),
    ],
)
def test_classify_boundaries(score, confidence, risk):
    assert classify(score, WEIGHTS) == (confidence, risk)


def test_weighted_score_floors_fraction():
    # 40 + 33.25 + 23.5 = 96.75
    assert weighted_score(SubScores(100, 95, 94), WEIGHTS) == 96


def test_weighted_score_clamps_to_floor():
    # 26 + 24.5 + 17.5 = 68 → raised to 70
    assert weighted_score(SubScores(65, 70, 70), WEIGHTS) == 70


def test_weighted_score_clamps_to_ceiling():
    weights = dataclasses.replace(WEIGHTS, quality=1.0, uniqueness=1.0, consistency=1.0)
    assert weighted_score(SubScores(100, 95, 94), weights) == 100


def test_combine_returns_score_and_tiers():
    assert combine(SubScores(100, 95, 94), WEIGHTS) == (
        96, ConfidenceTier.VERY_HIGH, RiskTier.VERY_LOW
    )


def test_combine_output_always_in_range():
    for q in range(65, 101, 5):
        for u in range(70, 96, 5):
            for c in range(70, 95, 4):
                score, _, _ = combine(SubScores(q, u, c), WEIGHTS)
                assert 70 <= score <= 100


def test_low_tier_unreachable_under_default_clamp():
    for q in range(65, 101):
        for u in range(70, 96):
            for c in range(70, 95):
                _, confidence, risk = combine(SubScores(q, u, c), WEIGHTS)
                assert confidence is not ConfidenceTier.LOW
                assert risk is not RiskTier.HIGH


def test_low_tier_reachable_once_floor_is_lowered():
    weights = dataclasses.replace(WEIGHTS, floor=0)
    assert combine(SubScores(0, 0, 0), weights) == (0, ConfidenceTier.LOW, RiskTier.HIGH)


def test_tier_values_are_display_strings():
    assert ConfidenceTier.VERY_HIGH.value == "Very High"
    assert RiskTier.VERY_LOW.value == "Very Low"
