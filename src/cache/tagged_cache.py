# src/cache/tagged_cache.py — v1
"""TaggedCache facade: entry store, tag index and invalidation behind a CacheKey.

Typical use::

    cache = create_tagged_cache(load_settings())
    key = producer.compute_cache_key(query)
    rows = await cache.get_or_compute(key, lambda: run_query(query))
    ...
    await cache.invalidate("orders")
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from tagcache.cache.base_store import BaseKeyValueStore
from tagcache.cache.entry_store import EntryStore
from tagcache.cache.errors import StoreUnavailableError
from tagcache.cache.invalidation import invalidate_tags
from tagcache.cache.models import CacheKey, InvalidationResult, JsonValue
from tagcache.cache.store_factory import create_store
from tagcache.cache.tag_index import TagIndex
from tagcache.config.settings import Settings

logger = logging.getLogger(__name__)

_MISSING: object = object()


class TaggedCache:
    """Result cache with tag-based bulk invalidation."""

    def __init__(
        self,
        store: BaseKeyValueStore,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings(_env_file=None)  # type: ignore[call-arg]
        self.store = store
        self.tag_index = TagIndex(store, prefix=self.settings.cache_key_prefix)
        self.entries = EntryStore(
            store,
            self.tag_index,
            self.settings,
            prefix=self.settings.cache_key_prefix,
        )

    async def has(self, key: CacheKey) -> bool:
        """Check if a cached result is available. False while deactivated."""
        return await self.entries.exists(key.fingerprint)

    async def get(self, key: CacheKey, default: JsonValue = None) -> JsonValue:
        """Return the cached result, or default when nothing is stored."""
        return await self.entries.read(key.fingerprint, default=default)

    async def set(self, key: CacheKey, value: JsonValue) -> None:
        """Store a result and register it under the key's tags."""
        await self.entries.write(key.fingerprint, key.tags, value)

    async def invalidate(self, *tags: str) -> list[InvalidationResult]:
        """Drop every entry depending on any of tags."""
        return await invalidate_tags(
            self.entries,
            self.tag_index,
            tags,
            batch_size=self.settings.invalidation_batch_size,
        )

    async def get_or_compute(
        self,
        key: CacheKey,
        compute: Callable[[], Awaitable[JsonValue]],
    ) -> JsonValue:
        """Return the cached result, computing and storing it on a miss.

        A store outage is treated as a miss: the result is computed and
        returned without being cached.
        """
        if not self.settings.cache_active:
            return await compute()

        try:
            if await self.has(key):
                cached = await self.entries.read(key.fingerprint, default=_MISSING)  # type: ignore[arg-type]
                if cached is not _MISSING:
                    return cached
        except StoreUnavailableError as e:
            logger.warning("Cache lookup skipped for %s: %s", key.fingerprint, e)
            return await compute()

        value = await compute()
        try:
            await self.set(key, value)
        except StoreUnavailableError as e:
            logger.warning("Cache store skipped for %s: %s", key.fingerprint, e)
        return value

    async def close(self) -> None:
        """Close the underlying store."""
        await self.store.close()


def create_tagged_cache(settings: Settings | None = None) -> TaggedCache:
    """Build a TaggedCache over the configured store backend.

    Args:
        settings: Application settings. Defaults to an active memory cache.
    """
    if settings is None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
    return TaggedCache(create_store(settings), settings)
