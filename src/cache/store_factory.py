# src/cache/store_factory.py — v1
"""Factory for key-value store instantiation."""

from __future__ import annotations

from tagcache.cache.base_store import BaseKeyValueStore
from tagcache.config.settings import Settings


def create_store(settings: Settings | None = None) -> BaseKeyValueStore:
    """Instantiate the configured store backend.

    Args:
        settings: Application settings. Defaults to the memory backend.

    Returns:
        Configured BaseKeyValueStore implementation.
    """
    backend = "memory" if settings is None else settings.cache_backend

    if backend == "memory":
        from tagcache.cache.memory_store import MemoryKeyValueStore
        return MemoryKeyValueStore()

    if backend == "sqlite":
        from tagcache.cache.sqlite_store import SqliteKeyValueStore
        return SqliteKeyValueStore(db_path=settings.cache_sqlite_path)

    if backend == "redis":
        from tagcache.cache.redis_store import RedisKeyValueStore
        if not settings.cache_redis_url:
            raise ValueError(
                "CACHE_REDIS_URL must be set when CACHE_BACKEND=redis"
            )
        return RedisKeyValueStore(
            redis_url=settings.cache_redis_url,
            socket_timeout=settings.cache_redis_timeout,
        )

    raise ValueError(f"Unsupported cache backend: {backend!r}")
