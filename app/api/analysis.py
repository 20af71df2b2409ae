"""
Analysis routes:

  POST /analyze-artwork   { "ipfsHash": "...", "artworkTitle": "..." }
  GET  /analysis/{hash}   recompute a verdict from a synthesized blob

Input validation errors surface as 400 `{success: false, error}`; everything
past validation degrades instead of failing, so a 500 here means a bug.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.analysis.weights import ScoringWeights
from app.core.dependencies import get_object_fetcher, get_scoring_weights
from app.core.errors import ValidationError
from app.integrations.gateway import ObjectFetcher
from app.schemas.analysis import AnalyzeArtworkResponse, CachedAnalysisResponse, ErrorResponse
from app.services.analysis_service import (
    analyze_artwork,
    parse_analysis_request,
    recompute_analysis,
)


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


@router.post(
    "/analyze-artwork",
    response_model=AnalyzeArtworkResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_artwork_route(
    request: Request,
    fetcher: ObjectFetcher = Depends(get_object_fetcher),
    weights: ScoringWeights = Depends(get_scoring_weights),
):
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError("Invalid JSON body")

    ipfs_hash, artwork_title = parse_analysis_request(payload)

    try:
        return await analyze_artwork(ipfs_hash, artwork_title, fetcher, weights)
    except Exception as e:
        logger.exception(f"[ROUTE] Analysis endpoint failed for {ipfs_hash}")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "AI analysis service temporarily unavailable",
                "details": str(e),
            },
        )


@router.get(
    "/analysis/{ipfs_hash}",
    response_model=CachedAnalysisResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_analysis_route(
    ipfs_hash: str,
    weights: ScoringWeights = Depends(get_scoring_weights),
):
    try:
        return await recompute_analysis(ipfs_hash, weights)
    except Exception:
        logger.exception(f"[ROUTE] Cached analysis retrieval failed for {ipfs_hash}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to retrieve cached analysis"},
        )
