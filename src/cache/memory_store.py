# src/cache/memory_store.py — v1
"""Process-local store (CACHE_BACKEND=memory).

Plain dicts, no persistence. Useful for tests and single-process use.
"""

from __future__ import annotations

from tagcache.cache.base_store import BaseKeyValueStore


class MemoryKeyValueStore(BaseKeyValueStore):
    """In-memory key-value/set store."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._sets: dict[str, set[str]] = {}

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._sets.pop(key, None)
        self._values[key] = value

    async def exists(self, key: str) -> bool:
        return key in self._values or key in self._sets

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            had_value = self._values.pop(key, None) is not None
            had_set = self._sets.pop(key, None) is not None
            if had_value or had_set:
                removed += 1
        return removed

    async def sadd(self, key: str, *members: str) -> int:
        if not members:
            return 0
        current = self._sets.setdefault(key, set())
        before = len(current)
        current.update(members)
        return len(current) - before

    async def smembers(self, key: str) -> set[str]:
        return set(self._sets.get(key, ()))
