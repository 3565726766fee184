"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn --factory market_activity.api.app:create_app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import duckdb
from fastapi import FastAPI

from market_activity.activity_service import MarketActivityService
from market_activity.api.routes import router
from market_activity.config import Settings, configure_logging, get_settings
from market_activity.data.block_timestamps import BlockTimestampResolver
from market_activity.data.indexer_client import IndexerClient


def build_activity_service(settings: Settings) -> MarketActivityService:
    """Wire the service against the configured indexer."""
    indexer = IndexerClient(settings.indexer.url, timeout=settings.indexer.timeout_seconds)
    return MarketActivityService(
        indexer=indexer,
        timestamps=BlockTimestampResolver(indexer),
        con=duckdb.connect(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ASGI app; the service is created on startup and closed on shutdown."""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        service = build_activity_service(settings)
        app.state.activity_service = service
        try:
            yield
        finally:
            service.indexer.close()
            service.con.close()

    app = FastAPI(title="Market Activity API", lifespan=lifespan)
    app.include_router(router)
    return app

