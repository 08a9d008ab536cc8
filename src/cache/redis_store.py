# src/cache/redis_store.py — v1
"""Redis-based store (CACHE_BACKEND=redis).

Requires 'redis' package: pip install redis.
Suitable for distributed/multi-instance deployments. Connection and
timeout failures are raised as StoreUnavailableError; no retries.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tagcache.cache.base_store import BaseKeyValueStore
from tagcache.cache.errors import StoreUnavailableError

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger(__name__)


class RedisKeyValueStore(BaseKeyValueStore):
    """Redis-backed store using the asyncio client."""

    def __init__(
        self,
        redis_url: str = "",
        *,
        client: Redis | None = None,
        socket_timeout: float | None = 5.0,
    ) -> None:
        """Create the store.

        Args:
            redis_url: Connection URL, e.g. redis://localhost:6379/0.
            client: Pre-built asyncio client (testing or DI). Takes
                precedence over redis_url.
            socket_timeout: Per-command socket timeout in seconds.
        """
        try:
            import redis
            import redis.asyncio as redis_asyncio
        except ImportError as e:
            raise ImportError(
                "redis package required: pip install redis"
            ) from e

        self._unavailable_errors: tuple[type[Exception], ...] = (
            redis.ConnectionError,
            redis.TimeoutError,
        )
        if client is not None:
            self._client = client
        elif redis_url:
            self._client = redis_asyncio.Redis.from_url(
                redis_url,
                decode_responses=True,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout,
            )
        else:
            raise ValueError("redis_url or client is required")

    async def _call(self, command: str, *args: Any) -> Any:
        try:
            return await getattr(self._client, command)(*args)
        except self._unavailable_errors as e:
            logger.warning("Redis %s failed: %s", command.upper(), e)
            raise StoreUnavailableError(
                f"Redis {command.upper()} failed: {e}"
            ) from e

    async def get(self, key: str) -> str | None:
        return await self._call("get", key)

    async def set(self, key: str, value: str) -> None:
        await self._call("set", key, value)

    async def exists(self, key: str) -> bool:
        return bool(await self._call("exists", key))

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return int(await self._call("delete", *keys))

    async def sadd(self, key: str, *members: str) -> int:
        if not members:
            return 0
        return int(await self._call("sadd", key, *members))

    async def smembers(self, key: str) -> set[str]:
        return set(await self._call("smembers", key))

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._client.aclose()
