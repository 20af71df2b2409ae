"""
System / health routes.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.schemas.analysis import HealthResponse

router = APIRouter(tags=["System"])

ENDPOINTS = ["/analyze-artwork", "/analysis/:hash"]


@router.get("/health", response_model=HealthResponse)
async def health():
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": ENDPOINTS,
    }


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    return "User-agent: *\nDisallow: /"
