"""Tag-indexed result cache.

Entries are JSON payloads addressed by fingerprint; tags map to sets of
fingerprints so every entry depending on a changed resource can be
dropped without scanning the key space.
"""

from tagcache.cache.entry_store import EntryStore
from tagcache.cache.errors import (
    CacheError,
    DecodingError,
    EncodingError,
    StoreUnavailableError,
)
from tagcache.cache.invalidation import invalidate_tag, invalidate_tags
from tagcache.cache.models import CacheKey, CacheKeyProducer, InvalidationResult
from tagcache.cache.tag_index import TagIndex
from tagcache.cache.tagged_cache import TaggedCache, create_tagged_cache

__all__ = [
    "CacheError",
    "CacheKey",
    "CacheKeyProducer",
    "DecodingError",
    "EncodingError",
    "EntryStore",
    "InvalidationResult",
    "StoreUnavailableError",
    "TagIndex",
    "TaggedCache",
    "create_tagged_cache",
    "invalidate_tag",
    "invalidate_tags",
]
