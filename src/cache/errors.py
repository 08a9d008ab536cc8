# src/cache/errors.py — v1
"""Cache exception hierarchy.

Store connectivity faults surface as StoreUnavailableError; every other
store error propagates from the backend unmodified.
"""

from __future__ import annotations


class CacheError(Exception):
    """Base class for all tagcache errors."""


class EncodingError(CacheError):
    """Raised when a value cannot be serialized to a payload."""


class DecodingError(CacheError):
    """Raised when a stored payload is present but not valid JSON."""


class StoreUnavailableError(CacheError):
    """Raised when the backing store cannot be reached."""
