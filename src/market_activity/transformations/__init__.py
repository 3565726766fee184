"""
Data transformation layer.
Handles conversion from raw indexer records to the timestamped activity feed.
"""
from __future__ import annotations

from market_activity.transformations.transaction_extraction import (
    build_extracted_table,
    extract_transaction,
    extract_transactions,
)
from market_activity.transformations.timestamp_join import (
    build_block_timestamps_table,
    join_block_timestamps,
)

__all__ = [
    "extract_transaction",
    "extract_transactions",
    "build_extracted_table",
    "build_block_timestamps_table",
    "join_block_timestamps",
]
