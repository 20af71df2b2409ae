"""
Value types passed between the analysis stages.

str Enums serialize straight to JSON; the values are the display strings the
wallet UI and ledger writer already consume.
"""

from dataclasses import dataclass
from enum import Enum


class ConfidenceTier(str, Enum):
    VERY_HIGH = "Very High"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class RiskTier(str, Enum):
    VERY_LOW = "Very Low"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class ObjectMetadata:
    """Structural facts about a blob. Zero/empty fields mean "could not probe"."""
    width_px: int = 0
    height_px: int = 0
    encoding: str = ""
    byte_size: int = 0

    @property
    def pixel_count(self) -> int:
        return self.width_px * self.height_px

    @property
    def is_probed(self) -> bool:
        return self.pixel_count > 0


@dataclass(frozen=True)
class SubScores:
    quality: int      # [65, 100]
    uniqueness: int   # [70, 95]
    consistency: int  # [70, 94]


@dataclass(frozen=True)
class FetchResult:
    blob: bytes
    fetched_from_gateway: bool
