"""
Service layer for reconstructing market activity feeds.
Orchestrates the indexer query, record extraction, and timestamp enrichment.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import duckdb

from market_activity.data.block_timestamps import BlockTimestampResolver
from market_activity.data.indexer_client import IndexerClient
from market_activity.domain.market_activity import MarketActivity, MarketActivityFeed
from market_activity.domain.raw_records import RawEventRecord, lookup
from market_activity.domain.schemas import empty_table, market_activity_schema
from market_activity.transformations import (
    build_extracted_table,
    extract_transactions,
    join_block_timestamps,
)

logger = logging.getLogger(__name__)


def decode_transactions(body: bytes | str) -> list[RawEventRecord]:
    """
    Decode the indexer's ``{"data": {"getTransactions": [...]}}`` envelope.

    An undecodable or misshapen envelope reads as zero transactions.

    Args:
        body: Raw response body

    Returns:
        The raw transaction records, possibly empty
    """
    try:
        payload: Any = json.loads(body)
    except ValueError as e:
        logger.warning("Could not decode indexer response; treating as empty: %s", e)
        return []

    transactions = lookup(payload, "data", "getTransactions", expected=list)
    if transactions is None:
        logger.warning("Indexer response has no getTransactions list; treating as empty")
        return []
    return transactions


@dataclass(frozen=True)
class MarketActivityService:
    """
    Service for building market activity feeds.

    Responsibilities:
        - Query the indexer for all transactions of a market
        - Extract typed fields from every raw record
        - Resolve all block heights in one batch and join timestamps

    Indexer and resolver errors propagate unchanged.
    """
    indexer: IndexerClient
    timestamps: BlockTimestampResolver
    con: duckdb.DuckDBPyConnection

    def build_activity_feed(self, *, market_id: str) -> MarketActivityFeed:
        """
        Build the timestamped activity feed for a market.

        Pipeline:
            1. Query the indexer for the market's transactions
            2. Extract every record (malformed records become defaults)
            3. Resolve every referenced block height in one batch
            4. Join timestamps back in indexer order

        Args:
            market_id: Market identifier

        Returns:
            MarketActivityFeed with one row per indexer record

        Raises:
            IndexerQueryError: If the transaction query fails
            TimestampResolutionError: If the height lookup fails
        """
        # Step 1: Fetch raw records
        body = self.indexer.query_market_transactions(market_id)
        records = decode_transactions(body)
        if not records:
            logger.info("Market %s has no transactions", market_id)
            return MarketActivityFeed(market_id=market_id, table=empty_table(market_activity_schema()))

        # Step 2: Extract
        extracted = extract_transactions(records)

        # Step 3: Resolve timestamps in one batch
        heights = [tx.block_height for tx in extracted]
        block_timestamps = self.timestamps.fetch_block_timestamps(heights)

        # Step 4: Join on a private cursor
        cursor = self.con.cursor()
        try:
            table = join_block_timestamps(
                cursor,
                extracted=build_extracted_table(extracted),
                block_timestamps=block_timestamps,
            )
        finally:
            cursor.close()

        logger.info(
            "Built activity for market %s: %d records, %d distinct heights, %d resolved",
            market_id,
            len(extracted),
            len(set(heights)),
            len(block_timestamps),
        )
        return MarketActivityFeed(market_id=market_id, table=table)

    def get_market_activity(self, market_id: str) -> list[MarketActivity]:
        """
        Return the market's activity entries in indexer order.

        Args:
            market_id: Market identifier

        Returns:
            One MarketActivity per indexer record
        """
        return self.build_activity_feed(market_id=market_id).to_activities()
