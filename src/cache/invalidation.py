# src/cache/invalidation.py — v1
"""Tag invalidation: delete every entry listed under a tag, then clear it.

Entries are deleted before the tag set is cleared, so an interruption
leaves stale memberships (harmless) rather than entries no tag can reach.
A write landing between members() and clear() survives the pass; no lock
guards that window.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tagcache.cache.entry_store import EntryStore
from tagcache.cache.models import InvalidationResult
from tagcache.cache.tag_index import TagIndex
from tagcache.logging.context import clear_context, set_operation_context

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 500


async def invalidate_tag(
    entries: EntryStore,
    tag_index: TagIndex,
    tag: str,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> InvalidationResult:
    """Remove every entry registered under tag and reset the tag.

    Fingerprints whose entry is already gone are skipped silently.

    Args:
        entries: Entry store to delete from.
        tag_index: Index holding the tag's membership set.
        tag: Tag declared stale.
        batch_size: Maximum fingerprints per delete call.

    Returns:
        InvalidationResult with listed and actually deleted counts.
    """
    set_operation_context("invalidate", tag)
    try:
        fingerprints = sorted(await tag_index.members(tag))
        deleted = 0
        for start in range(0, len(fingerprints), batch_size):
            deleted += await entries.delete(*fingerprints[start : start + batch_size])
        await tag_index.clear(tag)

        result = InvalidationResult(tag=tag, members=len(fingerprints), deleted=deleted)
        if result.members:
            logger.info(
                "Cache INVALIDATE: %s (%d entries, %d stale)",
                tag,
                result.deleted,
                result.stale,
                extra={"data": result.model_dump()},
            )
        return result
    finally:
        clear_context()


async def invalidate_tags(
    entries: EntryStore,
    tag_index: TagIndex,
    tags: Iterable[str],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> list[InvalidationResult]:
    """Invalidate several tags in order, one result per distinct tag."""
    return [
        await invalidate_tag(entries, tag_index, tag, batch_size=batch_size)
        for tag in dict.fromkeys(tags)
    ]
