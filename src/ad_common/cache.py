"""Cache port — keyed JSON get/set/delete/clear with TTL, failing open.

Every fault (connection refused, timeout, undecodable payload) is logged at
WARNING and turned into "no data": a read becomes a miss, a write becomes a
no-op. A cache outage therefore degrades the service to "always read the
database" instead of taking it down.

get() returns a CacheResult rather than the bare value, so a cached 0 or []
is still distinguishable from a miss.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.ad_common.redis_client import close_redis

logger = logging.getLogger("ad.cache")

DEFAULT_TTL_SECONDS = 3600

# OSError covers refused/reset sockets, TimeoutError is an OSError subclass.
_FAULTS = (RedisError, OSError)


@dataclass(frozen=True)
class CacheResult:
    hit: bool
    value: Any = None


MISS = CacheResult(hit=False)


class CacheService:
    def __init__(
        self, client: aioredis.Redis, default_ttl: int = DEFAULT_TTL_SECONDS
    ) -> None:
        self._client = client
        self._default_ttl = default_ttl

    async def get(self, key: str) -> CacheResult:
        try:
            raw = await self._client.get(key)
        except _FAULTS as exc:
            logger.warning("Cache get failed for key %s: %s", key, exc)
            return MISS
        if raw is None:
            return MISS
        try:
            return CacheResult(hit=True, value=json.loads(raw))
        except ValueError as exc:
            logger.warning("Cache payload undecodable for key %s: %s", key, exc)
            return MISS

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as exc:
            logger.warning("Cache value not serializable for key %s: %s", key, exc)
            return False
        try:
            await self._client.setex(key, self._default_ttl if ttl is None else ttl, payload)
        except _FAULTS as exc:
            logger.warning("Cache set failed for key %s: %s", key, exc)
            return False
        return True

    async def delete(self, key: str) -> bool:
        try:
            await self._client.delete(key)
        except _FAULTS as exc:
            logger.warning("Cache delete failed for key %s: %s", key, exc)
            return False
        return True

    async def clear(self) -> bool:
        """Wipe the whole cache database. Operator tooling only, never read paths."""
        try:
            await self._client.flushdb()
        except _FAULTS as exc:
            logger.warning("Cache clear failed: %s", exc)
            return False
        return True

    async def ping(self) -> bool:
        try:
            await self._client.ping()
        except _FAULTS as exc:
            logger.warning("Cache ping failed: %s", exc)
            return False
        return True

    async def close(self) -> None:
        await close_redis(self._client)
