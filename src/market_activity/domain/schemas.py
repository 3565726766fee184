"""
PyArrow schemas for all domain models.
Defines the explicit structure of each data model using PyArrow's schema feature.
"""
from __future__ import annotations

import pyarrow as pa


# ===========================
# Activity Schemas
# ===========================

ACTIVITY_BASE_SCHEMA = pa.schema([
    pa.field("type", pa.string(), nullable=False),
    pa.field("amount", pa.float64(), nullable=False),
    pa.field("caller", pa.string(), nullable=False),
    pa.field("hash", pa.string(), nullable=False),
])


def extracted_transactions_schema() -> pa.Schema:
    """
    Per-record extraction output, one row per raw indexer record.

    position keeps the indexer's response order through the timestamp join.
    """
    return pa.schema([
        pa.field("position", pa.int64(), nullable=False),
        *ACTIVITY_BASE_SCHEMA,
        pa.field("block_height", pa.int64(), nullable=False),
        pa.field("is_amount_in_shares", pa.bool_(), nullable=False),
    ])


def block_timestamps_schema() -> pa.Schema:
    """Resolved block height -> timestamp pairs."""
    return pa.schema([
        pa.field("block_height", pa.int64(), nullable=False),
        pa.field("timestamp", pa.string(), nullable=False),
    ])


def market_activity_schema() -> pa.Schema:
    """Final activity feed (timestamp is "" when the height was not resolved)."""
    return pa.schema([
        *ACTIVITY_BASE_SCHEMA,
        pa.field("timestamp", pa.string(), nullable=False),
        pa.field("is_amount_in_shares", pa.bool_(), nullable=False),
    ])


def empty_table(schema: pa.Schema) -> pa.Table:
    """Create an empty table with the given schema."""
    empty_data = {field.name: pa.array([], type=field.type) for field in schema}
    return pa.table(empty_data, schema=schema)
