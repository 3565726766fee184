"""
Raw indexer records and guarded access into them.

The indexer serves decoded JSON; nothing about its shape is guaranteed, so
every read goes through lookup(), which reports absence instead of raising.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

# Anything json.loads can produce.
RawEventRecord: TypeAlias = Any

PathKey = str | int


def lookup(
    node: RawEventRecord,
    *path: PathKey,
    expected: type | tuple[type, ...] | None = None,
) -> Any | None:
    """
    Walk ``path`` through nested mappings and lists.

    String keys index mappings, integer keys index lists. Returns None when a
    key is missing, an index is out of range, an intermediate node has the
    wrong shape, or the final value is not an instance of ``expected``.
    Booleans never satisfy a numeric ``expected``.

    Args:
        node: Decoded JSON value to read from
        path: Keys and indices to follow
        expected: Optional type(s) the final value must have

    Returns:
        The value found, or None
    """
    current = node
    for key in path:
        if isinstance(key, str):
            if not isinstance(current, Mapping) or key not in current:
                return None
            current = current[key]
        else:
            if isinstance(current, (str, bytes)) or not isinstance(current, Sequence):
                return None
            if not 0 <= key < len(current):
                return None
            current = current[key]

    if current is None or expected is None:
        return current
    if isinstance(current, bool) and not _accepts_bool(expected):
        return None
    if not isinstance(current, expected):
        return None
    return current


def _accepts_bool(expected: type | tuple[type, ...]) -> bool:
    candidates = expected if isinstance(expected, tuple) else (expected,)
    return bool in candidates
