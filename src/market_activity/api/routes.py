"""
API route definitions — REST endpoints.

Validates request params, delegates to MarketActivityService, and maps
failures to JSON error bodies.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from market_activity.activity_service import MarketActivityService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_activity_service(request: Request) -> MarketActivityService:
    """Dependency: the app-scoped activity service."""
    return request.app.state.activity_service


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/market-activity")
def market_activity(
    market_id: str | None = Query(default=None, alias="marketId"),
    service: MarketActivityService = Depends(get_activity_service),
) -> JSONResponse:
    """GET /market-activity?marketId=... — timestamped activity feed for one market."""
    if not market_id:
        return JSONResponse(status_code=400, content={"error": "marketId is required"})

    try:
        activities = service.get_market_activity(market_id)
    except Exception as e:
        logger.exception("Market activity failed for %s", market_id)
        return JSONResponse(status_code=500, content={"error": str(e)})

    return JSONResponse(content=[activity.to_json_dict() for activity in activities])
