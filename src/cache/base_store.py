# src/cache/base_store.py — v1
"""Abstract key-value/set store interface.

The cache core is a client of this interface only. Backends provide
string values and string sets addressed by opaque keys.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseKeyValueStore(ABC):
    """Unified interface for key-value/set storage backends."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the string value stored at key, or None."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value at key, overwriting any previous value."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Return True if key holds a value or a non-empty set."""

    @abstractmethod
    async def delete(self, *keys: str) -> int:
        """Remove keys of any kind. Returns how many existed."""

    @abstractmethod
    async def sadd(self, key: str, *members: str) -> int:
        """Add members to the set at key. Returns how many were new."""

    @abstractmethod
    async def smembers(self, key: str) -> set[str]:
        """Return the members of the set at key (empty if absent)."""

    async def close(self) -> None:
        """Release backend resources."""
