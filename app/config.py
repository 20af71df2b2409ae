"""
Central application configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable of the
same name (case-insensitive), e.g.:

    GATEWAY_TIMEOUT_SEC=5 uvicorn app.main:app          # impatient gateway
    export IPFS_GATEWAY_URL=https://ipfs.io/ipfs         # alternate gateway

A `.env` file at the project root is loaded automatically.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.analysis.weights import ScoringWeights


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # GATEWAY_TIMEOUT_SEC == gateway_timeout_sec
        extra="ignore",         # silently drop unknown env vars
    )

    # ------------------------------------------------------------------ #
    # Service                                                             #
    # ------------------------------------------------------------------ #
    service_name: str = Field(
        "CopyrightChain AI Backend", description="Reported by GET /health"
    )
    service_version: str = Field(
        "1.0.0", description="Reported by GET /health"
    )
    port: int = Field(
        3001, description="Listen port when started via `python -m app.main`"
    )
    log_level: str = Field(
        "INFO", description="Root logging level"
    )

    # ------------------------------------------------------------------ #
    # Object Gateway                                                      #
    # ------------------------------------------------------------------ #
    ipfs_gateway_url: str = Field(
        "https://gateway.pinata.cloud/ipfs", description="Base URL; object id is appended"
    )
    gateway_timeout_sec: float = Field(
        15.0, description="Single-attempt fetch bound (seconds)"
    )
    gateway_user_agent: str = Field(
        "CopyrightChain-AI/1.0", description="User-Agent sent to the gateway"
    )

    # ------------------------------------------------------------------ #
    # Synthetic Blobs                                                     #
    # ------------------------------------------------------------------ #
    fallback_repeat: int = Field(
        100_000, gt=0, description="Object id repetitions when the gateway fetch fails"
    )
    cached_repeat: int = Field(
        50_000, gt=0, description="Object id repetitions for GET /analysis/{hash}"
    )

    # ------------------------------------------------------------------ #
    # Image Probe                                                         #
    # ------------------------------------------------------------------ #
    pil_max_image_pixels: Optional[int] = Field(
        None, description="PIL decompression-bomb guard (pixels); None disables it for header-only probing"
    )

    # ------------------------------------------------------------------ #
    # Consistency Scoring                                                 #
    # ------------------------------------------------------------------ #
    consistency_window: int = Field(
        1000, gt=0, description="Leading bytes summed by the consistency scorer"
    )

    # ------------------------------------------------------------------ #
    # Quality Scoring                                                     #
    # ------------------------------------------------------------------ #
    quality_base: int = Field(70, description="Starting quality score")
    quality_min: int = Field(65, description="Quality clamp floor")
    quality_max: int = Field(100, description="Quality clamp ceiling")
    quality_pixels_ultra: int = Field(2_000_000, description="> this → very high resolution")
    quality_pixels_ultra_bonus: int = Field(20, description="Bonus for very high resolution")
    quality_pixels_high: int = Field(1_000_000, description="> this → high resolution")
    quality_pixels_high_bonus: int = Field(15, description="Bonus for high resolution")
    quality_pixels_medium: int = Field(500_000, description="> this → medium resolution")
    quality_pixels_medium_bonus: int = Field(10, description="Bonus for medium resolution")
    quality_pixels_low: int = Field(100_000, description="> this → low resolution")
    quality_pixels_low_bonus: int = Field(5, description="Bonus for low resolution")
    quality_png_bonus: int = Field(5, description="Bonus for lossless PNG")
    quality_jpeg_bonus: int = Field(3, description="Bonus for JPEG")
    quality_aspect_min: float = Field(0.5, description="Aspect ratio must exceed this")
    quality_aspect_max: float = Field(2.0, description="Aspect ratio must stay below this")
    quality_aspect_bonus: int = Field(5, description="Bonus for a non-stretched aspect ratio")

    # ------------------------------------------------------------------ #
    # Verdict                                                             #
    # ------------------------------------------------------------------ #
    weight_quality: float = Field(0.40, description="Quality sub-score weight")
    weight_uniqueness: float = Field(0.35, description="Uniqueness sub-score weight")
    weight_consistency: float = Field(0.25, description="Consistency sub-score weight")
    score_floor: int = Field(70, description="Authenticity score clamp floor")
    score_ceiling: int = Field(100, description="Authenticity score clamp ceiling")
    tier_very_high: int = Field(90, description="Score >= this → Very High / Very Low")
    tier_high: int = Field(80, description="Score >= this → High / Low")
    tier_medium: int = Field(70, description="Score >= this → Medium / Medium")
    default_score: int = Field(
        75, description="Score reported when the analysis degrades on an internal error"
    )

    # ------------------------------------------------------------------ #
    # Titles                                                              #
    # ------------------------------------------------------------------ #
    default_title: str = Field(
        "Untitled", description="Title fed to the uniqueness scorer when none is given"
    )
    default_display_title: str = Field(
        "Untitled Artwork", description="Title echoed in the response when none is given"
    )
    cached_title: str = Field(
        "Cached Analysis", description="Title used by GET /analysis/{hash}"
    )

    # ------------------------------------------------------------------ #
    # Verification Token                                                  #
    # ------------------------------------------------------------------ #
    token_tag: str = Field("CCA", description="Tag at the head of the encoded payload")
    token_prefix: str = Field("AIVERIFIED_", description="Human-readable token marker")
    token_length: int = Field(24, gt=0, description="Base64 characters kept after the marker")
    ai_model_label: str = Field(
        "CopyrightChain-AI-v1.0", description="Model label reported in every verdict"
    )

    def scoring_weights(self) -> ScoringWeights:
        """Snapshot the verdict knobs into the immutable value the combiner takes."""
        return ScoringWeights(
            quality=self.weight_quality,
            uniqueness=self.weight_uniqueness,
            consistency=self.weight_consistency,
            floor=self.score_floor,
            ceiling=self.score_ceiling,
            very_high=self.tier_very_high,
            high=self.tier_high,
            medium=self.tier_medium,
        )


# Single shared instance — import this everywhere.
settings = Settings()
