"""Errors raised by the indexer collaborators."""
from __future__ import annotations


class IndexerError(Exception):
    """Base class for indexer failures."""


class IndexerQueryError(IndexerError):
    """The transaction query could not be executed."""


class TimestampResolutionError(IndexerError):
    """Block heights could not be resolved to timestamps."""
