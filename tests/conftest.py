# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides settings, an in-memory store and a ready TaggedCache.
No external services — Redis is mocked where it appears.
"""

from __future__ import annotations

import pytest

from tagcache.cache.entry_store import EntryStore
from tagcache.cache.memory_store import MemoryKeyValueStore
from tagcache.cache.tag_index import TagIndex
from tagcache.cache.tagged_cache import TaggedCache
from tagcache.config.settings import Settings
from tagcache.logging.context import clear_context


# === FIXTURES: Settings ===


@pytest.fixture
def settings() -> Settings:
    """Active cache, memory backend, no .env lookup."""
    return Settings(_env_file=None)


@pytest.fixture
def inactive_settings() -> Settings:
    """Deactivated cache."""
    return Settings(_env_file=None, cache_active=False)


# === FIXTURES: Stores ===


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def tag_index(memory_store: MemoryKeyValueStore) -> TagIndex:
    return TagIndex(memory_store)


@pytest.fixture
def entry_store(
    memory_store: MemoryKeyValueStore, tag_index: TagIndex, settings: Settings
) -> EntryStore:
    return EntryStore(memory_store, tag_index, settings)


@pytest.fixture
def tagged_cache(memory_store: MemoryKeyValueStore, settings: Settings) -> TaggedCache:
    return TaggedCache(memory_store, settings)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()
