"""
Domain layer: Core business models and schemas.
"""
from __future__ import annotations

from market_activity.domain.market_activity import (
    DEFAULT_EXTRACTED_TRANSACTION,
    ExtractedTransaction,
    MarketActivity,
    MarketActivityFeed,
)
from market_activity.domain.raw_records import RawEventRecord, lookup
from market_activity.domain.schemas import (
    block_timestamps_schema,
    extracted_transactions_schema,
    market_activity_schema,
)

__all__ = [
    # Record models
    "RawEventRecord",
    "ExtractedTransaction",
    "DEFAULT_EXTRACTED_TRANSACTION",
    "MarketActivity",
    # Feed model
    "MarketActivityFeed",
    # Schemas
    "extracted_transactions_schema",
    "block_timestamps_schema",
    "market_activity_schema",
    # Raw access
    "lookup",
]
