"""Redis client factory — backs the read-through cache only.

The relational store stays authoritative; dropping every key here costs
latency, never data. Clients are built once at process start by the
container and injected, there is no module-level pool.
"""

import redis.asyncio as aioredis

from config.settings import Settings


def create_redis(settings: Settings) -> aioredis.Redis:
    """Build a pooled asyncio Redis client. No I/O happens until first use."""
    return aioredis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
    )


async def close_redis(client: aioredis.Redis) -> None:
    """Close the client and release its connection pool."""
    await client.aclose()
