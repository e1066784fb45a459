"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.ad_common.cache import CacheService


class InMemoryRedis:
    """Async stand-in for redis.asyncio.Redis, covering the commands CacheService sends."""

    def __init__(self) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def get(self, key: str) -> str | None:
        return self.store.get(key)

    async def setex(self, key: str, ttl: int, value: str) -> bool:
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    async def delete(self, key: str) -> int:
        self.ttls.pop(key, None)
        return 1 if self.store.pop(key, None) is not None else 0

    async def flushdb(self) -> bool:
        self.store.clear()
        self.ttls.clear()
        return True

    async def ping(self) -> bool:
        return True

    async def aclose(self) -> None:
        return None


def make_down_redis() -> MagicMock:
    """A client whose every command fails as if Redis were unreachable."""
    client = MagicMock()
    err = RedisConnectionError("Error 111 connecting to localhost:6379. Connection refused.")
    for name in ("get", "setex", "delete", "flushdb", "ping"):
        setattr(client, name, AsyncMock(side_effect=err))
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def redis_store() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def cache(redis_store: InMemoryRedis) -> CacheService:
    return CacheService(redis_store)  # type: ignore[arg-type]


@pytest.fixture
def down_cache() -> CacheService:
    return CacheService(make_down_redis())
