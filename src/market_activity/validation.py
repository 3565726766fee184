"""
Validation utilities for data quality and schema enforcement.
"""
from __future__ import annotations

from typing import Sequence

import pyarrow as pa


def validate_no_nulls(table: pa.Table, *, cols: Sequence[str], context: str) -> None:
    """
    Validate that columns are present and have no null values.

    Args:
        table: Table to validate
        cols: Column names to check
        context: Context for error messages

    Raises:
        KeyError: If column is missing
        ValueError: If nulls are found
    """
    for col in cols:
        if col not in table.column_names:
            raise KeyError(f"{context}: missing column {col}")
        null_count = table[col].null_count
        if null_count and null_count > 0:
            raise ValueError(f"{context}: {col} has {null_count} nulls")


def validate_schema(table: pa.Table, *, expected: pa.Schema, context: str) -> None:
    """
    Validate that table matches expected schema.

    Args:
        table: Table to validate
        expected: Expected schema
        context: Context for error messages

    Raises:
        ValueError: If field names or types don't match
    """
    if table.schema.equals(expected, check_metadata=False):
        return

    actual_names = set(table.schema.names)
    expected_names = set(expected.names)
    missing = expected_names - actual_names
    extra = actual_names - expected_names
    if missing or extra:
        raise ValueError(
            f"{context}: Schema mismatch. Missing fields: {missing}. Extra fields: {extra}"
        )

    for field in expected:
        actual_type = table.schema.field(field.name).type
        if not actual_type.equals(field.type):
            raise ValueError(f"{context}: {field.name} must be {field.type}; got {actual_type}")
