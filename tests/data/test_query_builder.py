"""Tests for GraphQL transaction query construction."""

from __future__ import annotations

import pytest

from market_activity.data.query_builder import MARKET_ACTIVITY_FIELDS, TransactionQueryBuilder


class TestTransactionQueryBuilder:
    def test_market_activity_query(self) -> None:
        qb = TransactionQueryBuilder("getMarketActivity", MARKET_ACTIVITY_FIELDS)
        qb.where().market_id("gno.land/r/demo/market:1")

        query = qb.build()

        assert "query getMarketActivity {" in query
        assert "getTransactions(" in query
        assert 'attrs: { key: { eq: "market_id" }, value: { eq: "gno.land/r/demo/market:1" } }' in query
        assert "GnoEvent" in query
        assert "block_height" in query
        assert "caller" in query

    def test_market_id_is_escaped(self) -> None:
        qb = TransactionQueryBuilder("q")
        qb.where().market_id('evil" } }')

        assert 'value: { eq: "evil\\" } }" }' in qb.build()

    def test_transaction_conditions(self) -> None:
        qb = TransactionQueryBuilder("q")
        qb.where().success().block_height_range(10, 20).add("index: { gt: 0 }")

        query = qb.build()

        assert "success: { eq: true }" in query
        assert "block_height: { gt: 10, lt: 20 }" in query
        assert "index: { gt: 0 }" in query
        assert "response:" not in query

    def test_open_height_range(self) -> None:
        qb = TransactionQueryBuilder("q")
        qb.where().block_height_range(max_height=50)

        assert "block_height: { lt: 50 }" in qb.build()

    def test_event_type_and_reset(self) -> None:
        qb = TransactionQueryBuilder("q")
        where = qb.where().event_type("Borrow")
        assert 'type: { eq: "Borrow" }' in qb.build()

        where.reset()

        assert "Borrow" not in qb.build()

    def test_fields(self) -> None:
        qb = TransactionQueryBuilder("q", "hash").add_fields("block_height")

        assert "hash\n          block_height" in qb.build()
        assert "index" in qb.use_fields("index").build()

    def test_where_returns_to_builder(self) -> None:
        qb = TransactionQueryBuilder("q")

        assert qb.where().success(False).query() is qb
        assert "success: { eq: false }" in qb.build()

    def test_rejects_invalid_operation_name(self) -> None:
        with pytest.raises(ValueError, match="operation_name"):
            TransactionQueryBuilder("get market")
