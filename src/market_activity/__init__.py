"""
Market Activity Library.

Reconstructs a lending market's activity feed from raw indexer transactions:
    - data: Indexer access (GraphQL queries, block timestamp resolution)
    - domain: Domain models and schemas
    - transformations: Record extraction and timestamp join
    - validation: Data quality checks
    - activity_service: High-level service orchestration
    - api: HTTP surface
"""
from __future__ import annotations

from market_activity.domain import (
    ExtractedTransaction,
    MarketActivity,
    MarketActivityFeed,
    extracted_transactions_schema,
    market_activity_schema,
)
from market_activity.data import (
    BlockTimestampResolver,
    IndexerClient,
    IndexerError,
    IndexerQueryError,
    TimestampResolutionError,
)
from market_activity.transformations import extract_transaction, extract_transactions
from market_activity.activity_service import MarketActivityService

__all__ = [
    # Domain models
    "ExtractedTransaction",
    "MarketActivity",
    "MarketActivityFeed",
    # Schemas
    "extracted_transactions_schema",
    "market_activity_schema",
    # Data layer
    "IndexerClient",
    "BlockTimestampResolver",
    "IndexerError",
    "IndexerQueryError",
    "TimestampResolutionError",
    # Transformations
    "extract_transaction",
    "extract_transactions",
    # Service
    "MarketActivityService",
]
