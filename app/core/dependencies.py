"""
FastAPI dependency providers for the analysis routes.

Tests swap the gateway via `app.dependency_overrides[get_gateway]` so no
real network access is needed.
"""

from fastapi import Depends

from app.analysis.weights import ScoringWeights
from app.config import settings
from app.integrations.gateway import Gateway, HttpGateway, ObjectFetcher


def get_gateway() -> Gateway:
    return HttpGateway()


def get_object_fetcher(gateway: Gateway = Depends(get_gateway)) -> ObjectFetcher:
    return ObjectFetcher(gateway)


def get_scoring_weights() -> ScoringWeights:
    return settings.scoring_weights()
