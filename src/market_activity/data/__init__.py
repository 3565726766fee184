"""
Data access layer: indexer queries and block timestamp resolution.
"""
from __future__ import annotations

from market_activity.data.block_timestamps import BlockTimestampResolver
from market_activity.data.errors import (
    IndexerError,
    IndexerQueryError,
    TimestampResolutionError,
)
from market_activity.data.indexer_client import IndexerClient
from market_activity.data.query_builder import (
    MARKET_ACTIVITY_FIELDS,
    TransactionQueryBuilder,
    WhereClauseBuilder,
)

__all__ = [
    "IndexerClient",
    "BlockTimestampResolver",
    "TransactionQueryBuilder",
    "WhereClauseBuilder",
    "MARKET_ACTIVITY_FIELDS",
    "IndexerError",
    "IndexerQueryError",
    "TimestampResolutionError",
]
