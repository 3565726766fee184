"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import duckdb
import pytest


def make_raw_transaction(
    *,
    block_height: Any = 100,
    tx_hash: Any = "tx-hash-1",
    caller: Any = "g1caller",
    events: Any = None,
) -> dict[str, Any]:
    """Build a well-formed indexer transaction record."""
    if events is None:
        events = [make_event("Supply", [("market_id", "market-1"), ("assets", "1500")])]
    return {
        "block_height": block_height,
        "hash": tx_hash,
        "messages": [{"value": {"caller": caller, "pkg_path": "gno.land/r/volos/core", "func": "Supply"}}],
        "response": {"events": events},
    }


def make_event(event_type: str, attrs: list[tuple[str, Any]]) -> dict[str, Any]:
    """Build one emitted event with ordered key/value attributes."""
    return {
        "type": event_type,
        "pkg_path": "gno.land/r/volos/core",
        "attrs": [{"key": key, "value": value} for key, value in attrs],
    }


@pytest.fixture
def sample_market_id() -> str:
    """Sample market ID for testing."""
    return "gno.land/r/demo/wugnot:gno.land/r/gnoswap/v1/gns:3000"


@pytest.fixture
def con() -> Iterator[duckdb.DuckDBPyConnection]:
    """In-memory DuckDB connection."""
    connection = duckdb.connect()
    yield connection
    connection.close()


@pytest.fixture
def raw_transaction() -> Any:
    """Factory for well-formed raw transaction records."""
    return make_raw_transaction


@pytest.fixture
def event() -> Any:
    """Factory for emitted events."""
    return make_event
