"""
Transaction extraction: Convert raw indexer records to typed transactions.

Extraction is total over arbitrary JSON. A record that does not have the
expected shape degrades to DEFAULT_EXTRACTED_TRANSACTION and never affects
its siblings.
"""
from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping, Sequence

import pyarrow as pa

from market_activity.domain.market_activity import (
    DEFAULT_EXTRACTED_TRANSACTION,
    ExtractedTransaction,
)
from market_activity.domain.raw_records import RawEventRecord, lookup
from market_activity.domain.schemas import extracted_transactions_schema

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

AMOUNT_KEYS = frozenset({"amount", "assets", "shares"})
SHARES_KEY = "shares"

# Decimal and hex-float literals; no surrounding whitespace, no digit separators.
DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
HEX_FLOAT = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")


class _MalformedEvents(Exception):
    """Internal signal: the event list does not have the expected shape."""


# ===========================
# Parsing Utilities
# ===========================

def _parse_amount(value: str) -> float | None:
    """Parse an attribute value; None when it is not a finite float."""
    try:
        if DECIMAL_FLOAT.fullmatch(value):
            parsed = float(value)
        elif HEX_FLOAT.fullmatch(value):
            parsed = float.fromhex(value)
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return parsed if math.isfinite(parsed) else None


def _fold_events(events: Sequence[RawEventRecord]) -> tuple[str, float, bool]:
    """
    Fold the event list into (type, amount, is_amount_in_shares).

    Last event's type wins. The last non-zero amount/assets/shares attribute
    across all events wins, and sets the shares flag together with the amount.
    """
    tx_type = ""
    amount = 0.0
    is_amount_in_shares = False

    for event in events:
        event_type = lookup(event, "type", expected=str)
        attrs = lookup(event, "attrs", expected=list)
        if event_type is None or attrs is None:
            raise _MalformedEvents("event without type or attrs")
        tx_type = event_type

        for attr in attrs:
            key = lookup(attr, "key", expected=str)
            if key is None:
                raise _MalformedEvents("attribute without key")
            if key not in AMOUNT_KEYS:
                continue
            value = lookup(attr, "value", expected=str)
            if value is None:
                raise _MalformedEvents(f"attribute {key!r} without string value")
            parsed = _parse_amount(value)
            if parsed is None or parsed == 0:
                continue
            amount = parsed
            is_amount_in_shares = key == SHARES_KEY

    return tx_type, amount, is_amount_in_shares


# ===========================
# Extraction Functions
# ===========================

def extract_transaction(record: RawEventRecord) -> ExtractedTransaction:
    """
    Extract the typed fields of one raw indexer transaction.

    Reads block_height (truncated to int), hash, the caller of the first
    message, and folds the response events into type and amount.

    Args:
        record: One element of the indexer's getTransactions list

    Returns:
        The extracted transaction, or DEFAULT_EXTRACTED_TRANSACTION if any
        part of the record is malformed
    """
    height = lookup(record, "block_height", expected=(int, float))
    tx_hash = lookup(record, "hash", expected=str)
    caller = lookup(record, "messages", 0, "value", "caller", expected=str)
    events = lookup(record, "response", "events", expected=list)
    if height is None or tx_hash is None or caller is None or events is None:
        return DEFAULT_EXTRACTED_TRANSACTION

    try:
        block_height = int(height)
        tx_type, amount, is_amount_in_shares = _fold_events(events)
    except (_MalformedEvents, ValueError, OverflowError):
        return DEFAULT_EXTRACTED_TRANSACTION
    if not INT64_MIN <= block_height <= INT64_MAX:
        return DEFAULT_EXTRACTED_TRANSACTION

    return ExtractedTransaction(
        type=tx_type,
        amount=amount,
        caller=caller,
        hash=tx_hash,
        block_height=block_height,
        is_amount_in_shares=is_amount_in_shares,
    )


def extract_transactions(records: Iterable[RawEventRecord]) -> list[ExtractedTransaction]:
    """
    Extract every record in order, keeping degraded records as defaults.

    Args:
        records: Raw indexer records

    Returns:
        One ExtractedTransaction per input record
    """
    extracted: list[ExtractedTransaction] = []
    for index, record in enumerate(records):
        transaction = extract_transaction(record)
        if transaction is DEFAULT_EXTRACTED_TRANSACTION:
            logger.debug("Record %d is malformed; using defaults", index)
        extracted.append(transaction)
    return extracted


def build_extracted_table(transactions: Sequence[ExtractedTransaction]) -> pa.Table:
    """
    Build the columnar form of extracted transactions.

    Args:
        transactions: Extraction output, in indexer order

    Returns:
        Table matching extracted_transactions_schema, position = input index
    """
    return pa.table(
        {
            "position": pa.array(range(len(transactions)), type=pa.int64()),
            "type": pa.array([tx.type for tx in transactions], type=pa.string()),
            "amount": pa.array([tx.amount for tx in transactions], type=pa.float64()),
            "caller": pa.array([tx.caller for tx in transactions], type=pa.string()),
            "hash": pa.array([tx.hash for tx in transactions], type=pa.string()),
            "block_height": pa.array([tx.block_height for tx in transactions], type=pa.int64()),
            "is_amount_in_shares": pa.array(
                [tx.is_amount_in_shares for tx in transactions], type=pa.bool_()
            ),
        },
        schema=extracted_transactions_schema(),
    )
