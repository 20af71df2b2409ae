from pydantic import BaseModel
from typing import Optional, List


class SubScoresModel(BaseModel):
    quality: int        # 65–100
    uniqueness: int     # 70–95
    consistency: int    # 70–94


class AnalysisDetails(BaseModel):
    resolution: str             # e.g. "1920x1080", "0x0" when unprobeable
    format: Optional[str] = None
    fileSize: str               # e.g. "512 KB"
    degraded: bool = False      # True when the default verdict was substituted


class AIAnalysis(BaseModel):
    authenticityScore: int      # 70–100
    confidenceTier: str         # "Very High" | "High" | "Medium" | "Low"
    riskTier: str               # "Very Low" | "Low" | "Medium" | "High"
    subScores: SubScoresModel
    verificationToken: str
    computedAt: str
    analysis: AnalysisDetails
    processingTime: str
    aiModel: str


class AnalyzeArtworkResponse(BaseModel):
    success: bool = True
    ipfsHash: str
    artworkTitle: str
    fetchedFromIPFS: bool
    timestamp: str
    aiAnalysis: AIAnalysis


class CachedAnalysisResponse(BaseModel):
    success: bool = True
    ipfsHash: str
    cached: bool = True
    timestamp: str
    aiAnalysis: AIAnalysis


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: str
    endpoints: List[str]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[str] = None
