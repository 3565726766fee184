"""Tests for the indexer HTTP client."""

from __future__ import annotations

import json

import httpx
import pytest

from market_activity.data.errors import IndexerQueryError
from market_activity.data.indexer_client import IndexerClient


def _client(handler) -> IndexerClient:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return IndexerClient("http://indexer.test/", http_client=http)


class TestIndexerClient:
    def test_graphql_url(self) -> None:
        assert IndexerClient("http://indexer.test/").graphql_url == "http://indexer.test/graphql/query"

    def test_query_market_transactions_posts_graphql(self, sample_market_id: str) -> None:
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": {"getTransactions": []}})

        body = _client(handler).query_market_transactions(sample_market_id)

        assert json.loads(body) == {"data": {"getTransactions": []}}
        assert seen["url"] == "http://indexer.test/graphql/query"
        assert seen["body"]["operationName"] == "getMarketActivity"
        assert sample_market_id in seen["body"]["query"]
        assert seen["body"]["variables"] is None

    def test_http_error_raises_query_error(self, sample_market_id: str) -> None:
        client = _client(lambda request: httpx.Response(502, text="bad gateway"))

        with pytest.raises(IndexerQueryError, match="getMarketActivity") as exc_info:
            client.query_market_transactions(sample_market_id)

        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    def test_transport_error_raises_query_error(self, sample_market_id: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(IndexerQueryError, match="connection refused"):
            _client(handler).query_market_transactions(sample_market_id)

    def test_body_is_returned_undecoded(self, sample_market_id: str) -> None:
        client = _client(lambda request: httpx.Response(200, content=b"not json"))

        assert client.query_market_transactions(sample_market_id) == b"not json"

    def test_context_manager_keeps_injected_client_open(self) -> None:
        http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

        with IndexerClient("http://indexer.test", http_client=http):
            pass

        assert not http.is_closed
