"""Tests for market activity domain models."""

from __future__ import annotations

import dataclasses

import pyarrow as pa
import pytest

from market_activity.domain.market_activity import MarketActivity, MarketActivityFeed
from market_activity.domain.schemas import empty_table, market_activity_schema


def _feed_table(**overrides) -> pa.Table:
    data = {
        "type": ["Supply"],
        "amount": [12.5],
        "caller": ["g1alice"],
        "hash": ["abc"],
        "timestamp": ["2025-01-01T00:00:00Z"],
        "is_amount_in_shares": [False],
    }
    data.update(overrides)
    return pa.table(data)


class TestMarketActivity:
    def test_json_field_names(self) -> None:
        activity = MarketActivity(
            type="Repay", amount=3.0, caller="g1bob", hash="h", timestamp="t", is_amount_in_shares=True
        )

        assert activity.to_json_dict() == {
            "type": "Repay",
            "amount": 3.0,
            "caller": "g1bob",
            "hash": "h",
            "timestamp": "t",
            "isAmountInShares": True,
        }

    def test_is_immutable(self) -> None:
        activity = MarketActivity(type="", amount=0.0, caller="", hash="", timestamp="", is_amount_in_shares=False)

        with pytest.raises(dataclasses.FrozenInstanceError):
            activity.amount = 1.0  # type: ignore[misc]


class TestMarketActivityFeed:
    """Schema validation on construction."""

    def test_to_activities(self) -> None:
        feed = MarketActivityFeed(market_id="m", table=_feed_table())

        assert len(feed) == 1
        assert feed.to_activities() == [
            MarketActivity(
                type="Supply",
                amount=12.5,
                caller="g1alice",
                hash="abc",
                timestamp="2025-01-01T00:00:00Z",
                is_amount_in_shares=False,
            )
        ]

    def test_empty_feed(self) -> None:
        feed = MarketActivityFeed(market_id="m", table=empty_table(market_activity_schema()))

        assert feed.to_activities() == []

    def test_missing_column_rejected(self) -> None:
        table = _feed_table().drop_columns(["timestamp"])

        with pytest.raises(ValueError, match="Missing fields"):
            MarketActivityFeed(market_id="m", table=table)

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="amount"):
            MarketActivityFeed(market_id="m", table=_feed_table(amount=["12.5"]))

    def test_null_rejected(self) -> None:
        table = _feed_table(timestamp=pa.array([None], type=pa.string()))

        with pytest.raises(ValueError, match="nulls"):
            MarketActivityFeed(market_id="m", table=table)
