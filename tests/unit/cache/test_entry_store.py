# tests/unit/cache/test_entry_store.py — v1
"""Tests for cache/entry_store.py — exists/write/read/delete."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from tagcache.cache.entry_store import EntryStore
from tagcache.cache.errors import DecodingError, EncodingError
from tagcache.cache.keys import entry_key


class TestExists:
    @pytest.mark.asyncio
    async def test_false_before_write(self, entry_store):
        assert await entry_store.exists("q:1") is False

    @pytest.mark.asyncio
    async def test_true_after_write(self, entry_store):
        await entry_store.write("q:1", [], {"id": 1})
        assert await entry_store.exists("q:1") is True

    @pytest.mark.asyncio
    async def test_always_false_when_inactive(
        self, memory_store, tag_index, inactive_settings
    ):
        store = EntryStore(memory_store, tag_index, inactive_settings)
        await store.write("q:1", ["orders"], {"id": 1})
        assert await store.exists("q:1") is False

    @pytest.mark.asyncio
    async def test_inactive_does_not_touch_store(self, tag_index, inactive_settings):
        backend = AsyncMock()
        store = EntryStore(backend, tag_index, inactive_settings)
        assert await store.exists("q:1") is False
        backend.exists.assert_not_called()

    @pytest.mark.asyncio
    async def test_flag_read_per_call(self, memory_store, tag_index, settings):
        store = EntryStore(memory_store, tag_index, settings)
        await store.write("q:1", [], 1)
        assert await store.exists("q:1") is True
        settings.cache_active = False
        assert await store.exists("q:1") is False

    @pytest.mark.asyncio
    async def test_tag_with_same_name_is_not_an_entry(self, entry_store, tag_index):
        await tag_index.add_member("q:1", "other")
        assert await entry_store.exists("q:1") is False


class TestWrite:
    @pytest.mark.asyncio
    async def test_stores_under_namespaced_key(self, entry_store, memory_store):
        await entry_store.write("q:1", [], {"id": 1, "total": 42})
        assert await memory_store.get(entry_key("q:1")) == '{"id":1,"total":42}'

    @pytest.mark.asyncio
    async def test_tag_fan_out(self, entry_store, tag_index):
        await entry_store.write("q:1", ["t1", "t2"], {"id": 1})
        assert "q:1" in await tag_index.members("t1")
        assert "q:1" in await tag_index.members("t2")

    @pytest.mark.asyncio
    async def test_accepts_any_iterable_of_tags(self, entry_store, tag_index):
        await entry_store.write("q:1", (t for t in ["a", "a", "b"]), [])
        assert await tag_index.members("a") == {"q:1"}
        assert await tag_index.members("b") == {"q:1"}

    @pytest.mark.asyncio
    async def test_overwrites(self, entry_store):
        await entry_store.write("q:1", [], {"v": 1})
        await entry_store.write("q:1", [], {"v": 2})
        assert await entry_store.read("q:1") == {"v": 2}

    @pytest.mark.asyncio
    async def test_encoding_failure_writes_nothing(
        self, entry_store, tag_index, memory_store
    ):
        with pytest.raises(EncodingError):
            await entry_store.write("q:1", ["orders"], {"bad": object()})  # type: ignore[dict-item]
        assert await memory_store.get(entry_key("q:1")) is None
        assert await tag_index.members("orders") == set()

    @pytest.mark.asyncio
    async def test_writes_when_inactive(
        self, memory_store, tag_index, inactive_settings
    ):
        store = EntryStore(memory_store, tag_index, inactive_settings)
        await store.write("q:1", [], "x")
        assert await store.read("q:1") == "x"


class TestRead:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "value",
        [
            {"id": 1, "total": 42},
            [{"id": 1}, {"id": 2, "items": [1, 2.5, None, True]}],
            "plain",
            0,
            None,
        ],
    )
    async def test_round_trip(self, entry_store, value):
        await entry_store.write("q:1", ["orders"], value)
        assert await entry_store.read("q:1") == value

    @pytest.mark.asyncio
    async def test_absent_returns_none(self, entry_store):
        assert await entry_store.read("missing") is None

    @pytest.mark.asyncio
    async def test_absent_returns_default(self, entry_store):
        assert await entry_store.read("missing", default=[]) == []

    @pytest.mark.asyncio
    async def test_corrupt_payload_raises(self, entry_store, memory_store):
        await memory_store.set(entry_key("q:1"), "{truncated")
        with pytest.raises(DecodingError):
            await entry_store.read("q:1")


class TestDelete:
    @pytest.mark.asyncio
    async def test_counts_existing(self, entry_store):
        await entry_store.write("q:1", [], 1)
        await entry_store.write("q:2", [], 2)
        assert await entry_store.delete("q:1", "q:2", "gone") == 2
        assert await entry_store.exists("q:1") is False

    @pytest.mark.asyncio
    async def test_no_fingerprints(self, entry_store):
        assert await entry_store.delete() == 0

    @pytest.mark.asyncio
    async def test_missing_is_noop(self, entry_store):
        assert await entry_store.delete("gone") == 0
