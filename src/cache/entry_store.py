# src/cache/entry_store.py — v1
"""Entry store: fingerprint -> encoded JSON payload.

write() registers the fingerprint under every declared tag after the
entry itself is stored. The two steps are not atomic; a failure between
them leaves an entry that some tags do not list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tagcache.cache.base_store import BaseKeyValueStore
from tagcache.cache.codec import decode_value, encode_value
from tagcache.cache.keys import DEFAULT_PREFIX, entry_key
from tagcache.cache.models import JsonValue
from tagcache.cache.tag_index import TagIndex
from tagcache.config.settings import Settings

logger = logging.getLogger(__name__)


class EntryStore:
    """Stores encoded results addressed by fingerprint.

    Args:
        store: Backing key-value/set store.
        tag_index: Index that receives tag registrations on write.
        settings: Provides the activation flag, read on every exists().
        prefix: Store key prefix shared with the tag index.
    """

    def __init__(
        self,
        store: BaseKeyValueStore,
        tag_index: TagIndex,
        settings: Settings,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        self._store = store
        self._tag_index = tag_index
        self._settings = settings
        self._prefix = prefix

    async def exists(self, fingerprint: str) -> bool:
        """Return True if a live entry is stored for fingerprint.

        Always False while the cache is deactivated, without touching the
        store.
        """
        if not self._settings.cache_active:
            return False
        hit = await self._store.exists(entry_key(fingerprint, self._prefix))
        logger.debug("Cache %s: %s", "HIT" if hit else "MISS", fingerprint)
        return hit

    async def write(
        self, fingerprint: str, tags: Iterable[str], value: JsonValue
    ) -> None:
        """Store value under fingerprint and register it under each tag.

        Overwrites any previous entry. Does not consult exists(); callers
        check first to avoid redundant work.

        Raises:
            EncodingError: If value is not JSON-serializable. Nothing is
                written in that case.
        """
        payload = encode_value(value)
        tag_list = list(dict.fromkeys(tags))
        await self._store.set(entry_key(fingerprint, self._prefix), payload)
        for tag in tag_list:
            await self._tag_index.add_member(tag, fingerprint)
        logger.debug(
            "Cache SET: %s (%d bytes, tags=%s)", fingerprint, len(payload), tag_list
        )

    async def read(
        self, fingerprint: str, default: JsonValue = None
    ) -> JsonValue:
        """Return the decoded value stored under fingerprint.

        Returns default when no payload is stored; call exists() first to
        tell an empty result from a stored null.

        Raises:
            DecodingError: If the stored payload is corrupt.
        """
        payload = await self._store.get(entry_key(fingerprint, self._prefix))
        if payload is None:
            logger.debug("Cache EMPTY read: %s", fingerprint)
            return default
        return decode_value(payload)

    async def delete(self, *fingerprints: str) -> int:
        """Remove entries. Returns how many existed; absent ones are skipped."""
        if not fingerprints:
            return 0
        return await self._store.delete(
            *(entry_key(fp, self._prefix) for fp in fingerprints)
        )
