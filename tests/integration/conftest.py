# tests/integration/conftest.py — v1
"""Shared fixtures for integration tests.

Runs every cache scenario against each store backend that needs no
external service: memory and SQLite.
"""

from __future__ import annotations

import pytest
import pytest_asyncio

from tagcache.cache.tagged_cache import TaggedCache, create_tagged_cache
from tagcache.config.settings import Settings


@pytest.fixture(params=["memory", "sqlite"])
def backend_settings(request, tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        cache_backend=request.param,
        cache_sqlite_path=tmp_path / "cache.db",
        invalidation_batch_size=2,
    )


@pytest_asyncio.fixture
async def cache(backend_settings: Settings):
    tagged = create_tagged_cache(backend_settings)
    yield tagged
    await tagged.close()


@pytest.fixture
def make_cache():
    """Factory for additional caches sharing one backend store."""

    def _make(base: TaggedCache, **overrides: object) -> TaggedCache:
        return TaggedCache(base.store, base.settings.model_copy(update=overrides))

    return _make
