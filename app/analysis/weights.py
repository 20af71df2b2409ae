"""Immutable scoring knobs handed to the verdict combiner.

Values come from `Settings.scoring_weights()`; there are no defaults here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringWeights:
    quality: float
    uniqueness: float
    consistency: float
    floor: int
    ceiling: int
    # Tier thresholds, highest first
    very_high: int
    high: int
    medium: int
