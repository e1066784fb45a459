"""Cache-aside read protocol shared by every accessor.

    1. cache.get(key) — hit: return the cached value untouched (it was
       normalized when it was filled).
    2. miss: load from the database, normalize.
    3. non-empty result: cache.set(key, value, ttl).
    4. return the normalized value, empty or not.

Empty results (None, [], {}) are never cached, so a row inserted right after
a miss is visible on the very next read. Scalars, including 0, are cached.

Concurrent misses on one key each hit the database (stampede). All reads are
idempotent so that is only wasted work; pass a SingleFlight to collapse them.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from src.ad_common.cache import CacheService
from src.ad_common.serialization import normalize

Loader = Callable[[], Awaitable[Any]]


def is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (list, dict)) and not value)


class SingleFlight:
    """Per-key in-flight fill coalescing: one load, many waiters.

    The first caller to miss starts the loader as its own task; every caller,
    that one included, awaits it through asyncio.shield. A caller that is
    cancelled stops waiting but the fill runs on and still populates the cache
    for the others. The entry is dropped once the fill completes, so the next
    miss after that starts a fresh load.
    """

    def __init__(self) -> None:
        self._inflight: dict[str, asyncio.Future[Any]] = {}

    @property
    def inflight(self) -> int:
        return len(self._inflight)

    async def do(self, key: str, fn: Loader) -> Any:
        fill = self._inflight.get(key)
        if fill is None:
            fill = asyncio.ensure_future(fn())
            self._inflight[key] = fill
            fill.add_done_callback(lambda _: self._inflight.pop(key, None))
        return await asyncio.shield(fill)


async def read_through(
    cache: CacheService,
    key: str,
    ttl: int,
    load: Loader,
    coalescer: SingleFlight | None = None,
) -> Any:
    cached = await cache.get(key)
    if cached.hit:
        return cached.value

    async def fill() -> Any:
        value = normalize(await load())
        if not is_empty(value):
            await cache.set(key, value, ttl)
        return value

    if coalescer is None:
        return await fill()
    return await coalescer.do(key, fill)
