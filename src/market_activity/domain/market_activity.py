"""
Domain models for market activity.
Record-level dataclasses plus a PyArrow-backed feed with strict schema checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pyarrow as pa

from market_activity.domain.schemas import market_activity_schema
from market_activity.validation import validate_no_nulls, validate_schema


@dataclass(frozen=True)
class ExtractedTransaction:
    """
    Typed view of one raw indexer record, before timestamp enrichment.

    Defaults double as the fallback for malformed records.
    """
    type: str = ""
    amount: float = 0.0
    caller: str = ""
    hash: str = ""
    block_height: int = 0
    is_amount_in_shares: bool = False


DEFAULT_EXTRACTED_TRANSACTION = ExtractedTransaction()


@dataclass(frozen=True)
class MarketActivity:
    """One entry of the activity feed."""
    type: str
    amount: float
    caller: str
    hash: str
    timestamp: str
    is_amount_in_shares: bool

    def to_json_dict(self) -> dict[str, Any]:
        """Wire form served over HTTP."""
        return {
            "type": self.type,
            "amount": self.amount,
            "caller": self.caller,
            "hash": self.hash,
            "timestamp": self.timestamp,
            "isAmountInShares": self.is_amount_in_shares,
        }


@dataclass(frozen=True)
class MarketActivityFeed:
    """
    Timestamped activity for one market, in indexer response order.

    Schema:
        - type: str
        - amount: float64
        - caller: str
        - hash: str
        - timestamp: str ("" when the block height was not resolved)
        - is_amount_in_shares: bool
    """
    market_id: str
    table: pa.Table

    def __post_init__(self) -> None:
        """Validate schema on initialization."""
        context = f"MarketActivityFeed[{self.market_id}]"
        validate_schema(self.table, expected=self.schema, context=context)
        validate_no_nulls(self.table, cols=self.schema.names, context=context)

    @property
    def schema(self) -> pa.Schema:
        """Return the schema."""
        return market_activity_schema()

    def __len__(self) -> int:
        return self.table.num_rows

    def to_activities(self) -> list[MarketActivity]:
        return [MarketActivity(**row) for row in self.table.select(self.schema.names).to_pylist()]
