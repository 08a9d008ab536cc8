# src/cache/tag_index.py — v1
"""Tag index: per-tag sets of fingerprints.

No operation here checks consistency with the entry store. A set may
list fingerprints whose entry is already gone.
"""

from __future__ import annotations

import logging

from tagcache.cache.base_store import BaseKeyValueStore
from tagcache.cache.keys import DEFAULT_PREFIX, tag_key

logger = logging.getLogger(__name__)


class TagIndex:
    """Maintains tag -> fingerprint membership sets."""

    def __init__(
        self, store: BaseKeyValueStore, prefix: str = DEFAULT_PREFIX
    ) -> None:
        self._store = store
        self._prefix = prefix

    async def add_member(self, tag: str, fingerprint: str) -> None:
        """Register fingerprint under tag. Repeated calls are no-ops."""
        await self._store.sadd(tag_key(tag, self._prefix), fingerprint)

    async def members(self, tag: str) -> set[str]:
        """Return fingerprints currently registered under tag."""
        return await self._store.smembers(tag_key(tag, self._prefix))

    async def clear(self, tag: str) -> None:
        """Drop the membership set of tag."""
        await self._store.delete(tag_key(tag, self._prefix))
        logger.debug("Tag CLEAR: %s", tag)
