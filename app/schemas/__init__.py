from app.schemas.analysis import (
    SubScoresModel,
    AnalysisDetails,
    AIAnalysis,
    AnalyzeArtworkResponse,
    CachedAnalysisResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "SubScoresModel",
    "AnalysisDetails",
    "AIAnalysis",
    "AnalyzeArtworkResponse",
    "CachedAnalysisResponse",
    "HealthResponse",
    "ErrorResponse",
]
