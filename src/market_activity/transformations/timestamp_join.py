"""
Timestamp join: Attach resolved block timestamps to extracted transactions.
"""
from __future__ import annotations

from collections.abc import Mapping

import duckdb
import pyarrow as pa

from market_activity.domain.schemas import block_timestamps_schema, market_activity_schema


def build_block_timestamps_table(block_timestamps: Mapping[int, str]) -> pa.Table:
    """
    Build the columnar form of a height -> timestamp mapping.

    Args:
        block_timestamps: Resolver output

    Returns:
        Table matching block_timestamps_schema
    """
    heights = list(block_timestamps)
    return pa.table(
        {
            "block_height": pa.array(heights, type=pa.int64()),
            "timestamp": pa.array([block_timestamps[h] for h in heights], type=pa.string()),
        },
        schema=block_timestamps_schema(),
    )


def join_block_timestamps(
    con: duckdb.DuckDBPyConnection,
    *,
    extracted: pa.Table,
    block_timestamps: Mapping[int, str],
) -> pa.Table:
    """
    Left-join timestamps onto extracted transactions by block height.

    Every extracted row yields exactly one output row, in position order.
    Heights missing from ``block_timestamps`` get an empty timestamp.

    Args:
        con: DuckDB connection (or cursor) owned by the caller
        extracted: Table matching extracted_transactions_schema
        block_timestamps: Resolved height -> timestamp mapping

    Returns:
        Table matching market_activity_schema
    """
    con.register("extracted_transactions", extracted)
    con.register("block_timestamps", build_block_timestamps_table(block_timestamps))

    sql = """
        SELECT
            tx."type",
            tx.amount,
            tx.caller,
            tx.hash,
            COALESCE(bt."timestamp", '') AS "timestamp",
            tx.is_amount_in_shares
        FROM extracted_transactions AS tx
        LEFT JOIN block_timestamps AS bt
            ON bt.block_height = tx.block_height
        ORDER BY tx.position
    """

    try:
        joined = con.execute(sql).fetch_arrow_table()
    finally:
        con.unregister("extracted_transactions")
        con.unregister("block_timestamps")

    return joined.cast(market_activity_schema())
