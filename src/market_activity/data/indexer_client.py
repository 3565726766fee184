"""HTTP client for the transaction indexer's GraphQL endpoint."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from market_activity.data.errors import IndexerQueryError
from market_activity.data.query_builder import MARKET_ACTIVITY_FIELDS, TransactionQueryBuilder

logger = logging.getLogger(__name__)

DEFAULT_INDEXER_URL = "http://localhost:3100"
DEFAULT_TIMEOUT_SECONDS = 10.0
GRAPHQL_PATH = "/graphql/query"
MARKET_ACTIVITY_OPERATION = "getMarketActivity"


class IndexerClient:
    """
    Executes GraphQL queries against the transaction indexer.

    Responses are returned as raw bytes; decoding belongs to the caller.
    No retries are attempted.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_INDEXER_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Indexer root URL (without the GraphQL path).
            timeout: Request timeout in seconds.
            http_client: Optional preconfigured client, mainly for tests.
        """
        self.base_url = base_url.rstrip("/")
        self._http = http_client or httpx.Client(timeout=timeout)
        self._owns_http = http_client is None

    @property
    def graphql_url(self) -> str:
        return f"{self.base_url}{GRAPHQL_PATH}"

    def post_graphql(
        self,
        query: str,
        operation_name: str,
        variables: dict[str, Any] | None = None,
    ) -> bytes:
        """POST a GraphQL request and return the response body.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status.
        """
        body = {"query": query, "operationName": operation_name, "variables": variables}
        response = self._http.post(self.graphql_url, json=body)
        response.raise_for_status()
        return response.content

    def execute(self, builder: TransactionQueryBuilder) -> bytes:
        """Run a built transaction query.

        Raises:
            IndexerQueryError: If the indexer is unreachable or rejects the request.
        """
        try:
            return self.post_graphql(builder.build(), builder.operation_name)
        except httpx.HTTPError as e:
            logger.warning("Indexer query %s failed: %s", builder.operation_name, e)
            raise IndexerQueryError(f"indexer query {builder.operation_name} failed: {e}") from e

    def query_market_transactions(self, market_id: str) -> bytes:
        """Fetch every transaction that emitted an event for ``market_id``.

        Returns:
            Raw ``{"data": {"getTransactions": [...]}}`` response body.
        """
        builder = TransactionQueryBuilder(MARKET_ACTIVITY_OPERATION, MARKET_ACTIVITY_FIELDS)
        builder.where().market_id(market_id)
        return self.execute(builder)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> IndexerClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
