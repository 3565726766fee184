"""
Batched block height -> timestamp resolution through the indexer.

All distinct heights are resolved in one GraphQL request, one aliased
``getBlocks`` selection per height.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable

import httpx

from market_activity.data.errors import TimestampResolutionError
from market_activity.data.indexer_client import IndexerClient
from market_activity.domain.raw_records import lookup

logger = logging.getLogger(__name__)

BLOCK_TIMESTAMPS_OPERATION = "getBlockTimestamps"


def _alias(height: int) -> str:
    return f"h{height}" if height >= 0 else f"hn{-height}"


def build_block_timestamps_query(heights: Iterable[int]) -> str:
    """Build one query selecting the block at each height."""
    selections = "\n".join(
        f"        {_alias(h)}: getBlocks(where: {{ height: {{ eq: {h} }} }}) {{\n"
        f"          height\n"
        f"          time\n"
        f"        }}"
        for h in heights
    )
    return f"""
      query {BLOCK_TIMESTAMPS_OPERATION} {{
{selections}
      }}
    """


class BlockTimestampResolver:
    """Resolves block heights to the indexer's block time strings."""

    def __init__(self, indexer: IndexerClient) -> None:
        self._indexer = indexer

    def fetch_block_timestamps(self, heights: Iterable[int]) -> dict[int, str]:
        """
        Resolve block heights to timestamps.

        Repeated heights are resolved once. Heights the indexer does not know
        are left out of the result.

        Args:
            heights: Block heights, duplicates allowed

        Returns:
            Mapping of height -> timestamp string

        Raises:
            TimestampResolutionError: If the request fails or the response
                cannot be read
        """
        distinct = sorted({int(h) for h in heights})
        if not distinct:
            return {}

        query = build_block_timestamps_query(distinct)
        try:
            body = self._indexer.post_graphql(query, BLOCK_TIMESTAMPS_OPERATION)
        except httpx.HTTPError as e:
            raise TimestampResolutionError(f"block timestamp lookup failed: {e}") from e

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise TimestampResolutionError(f"block timestamp response is not JSON: {e}") from e

        errors = lookup(payload, "errors", expected=list)
        if errors:
            raise TimestampResolutionError(f"block timestamp lookup returned errors: {errors}")
        data = lookup(payload, "data", expected=dict)
        if data is None:
            raise TimestampResolutionError("block timestamp response has no data")

        resolved: dict[int, str] = {}
        for height in distinct:
            block_time = lookup(data, _alias(height), 0, "time", expected=str)
            if block_time is not None:
                resolved[height] = block_time

        logger.debug("Resolved %d of %d block heights", len(resolved), len(distinct))
        return resolved
