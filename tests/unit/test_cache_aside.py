"""Unit tests for read_through and SingleFlight."""
import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.ad_common.cache_aside import SingleFlight, is_empty, read_through


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, [], {}])
    def test_empty(self, value):
        assert is_empty(value) is True

    @pytest.mark.parametrize("value", [0, 0.0, "", [0], {"a": None}, False])
    def test_not_empty(self, value):
        assert is_empty(value) is False


class TestReadThrough:
    @pytest.mark.asyncio
    async def test_miss_loads_normalizes_and_fills(self, cache, redis_store):
        load = AsyncMock(return_value=[{"amount": Decimal("2.5")}])

        value = await read_through(cache, "k", 60, load)

        assert value == [{"amount": 2.5}]
        assert redis_store.ttls["k"] == 60
        load.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_hit_skips_loader(self, cache):
        await cache.set("k", {"cached": True}, 60)
        load = AsyncMock()

        value = await read_through(cache, "k", 60, load)

        assert value == {"cached": True}
        load.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_second_read_is_identical_and_skips_db(self, cache):
        load = AsyncMock(return_value={"id": "u1", "balance": Decimal("10.00")})

        first = await read_through(cache, "k", 300, load)
        second = await read_through(cache, "k", 300, load)

        assert first == second
        assert load.await_count == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("empty", [None, []])
    async def test_empty_result_not_cached(self, cache, redis_store, empty):
        load = AsyncMock(return_value=empty)

        assert await read_through(cache, "k", 60, load) == empty
        assert "k" not in redis_store.store

    @pytest.mark.asyncio
    async def test_zero_scalar_is_cached(self, cache, redis_store):
        await read_through(cache, "users_count", 120, AsyncMock(return_value=0))
        assert redis_store.store["users_count"] == "0"

    @pytest.mark.asyncio
    async def test_cache_down_reads_database_every_time(self, down_cache):
        load = AsyncMock(return_value={"id": "u1"})

        assert await read_through(down_cache, "k", 60, load) == {"id": "u1"}
        assert await read_through(down_cache, "k", 60, load) == {"id": "u1"}
        assert load.await_count == 2

    @pytest.mark.asyncio
    async def test_loader_error_propagates_and_nothing_cached(self, cache, redis_store):
        load = AsyncMock(side_effect=RuntimeError("db down"))

        with pytest.raises(RuntimeError):
            await read_through(cache, "k", 60, load)
        assert redis_store.store == {}

    @pytest.mark.asyncio
    async def test_concurrent_misses_without_coalescer_each_load(self, cache):
        gate = asyncio.Event()
        calls = 0

        async def load():
            nonlocal calls
            calls += 1
            await gate.wait()
            return {"v": 1}

        tasks = [asyncio.create_task(read_through(cache, "k", 60, load)) for _ in range(3)]
        await asyncio.sleep(0)
        gate.set()
        results = await asyncio.gather(*tasks)

        assert results == [{"v": 1}] * 3
        assert calls == 3

    @pytest.mark.asyncio
    async def test_concurrent_misses_with_coalescer_load_once(self, cache):
        gate = asyncio.Event()
        calls = 0

        async def load():
            nonlocal calls
            calls += 1
            await gate.wait()
            return {"v": 1}

        flight = SingleFlight()
        tasks = [
            asyncio.create_task(read_through(cache, "k", 60, load, flight)) for _ in range(5)
        ]
        await asyncio.sleep(0)
        gate.set()
        results = await asyncio.gather(*tasks)

        assert results == [{"v": 1}] * 5
        assert calls == 1
        assert flight.inflight == 0


class TestSingleFlight:
    @pytest.mark.asyncio
    async def test_error_reaches_every_waiter(self):
        gate = asyncio.Event()

        async def boom():
            await gate.wait()
            raise ValueError("bad")

        flight = SingleFlight()
        tasks = [asyncio.create_task(flight.do("k", boom)) for _ in range(3)]
        await asyncio.sleep(0)
        gate.set()
        results = await asyncio.gather(*tasks, return_exceptions=True)

        assert all(isinstance(r, ValueError) for r in results)
        assert flight.inflight == 0

    @pytest.mark.asyncio
    async def test_distinct_keys_do_not_share(self):
        flight = SingleFlight()
        a = AsyncMock(return_value="a")
        b = AsyncMock(return_value="b")

        assert await asyncio.gather(flight.do("a", a), flight.do("b", b)) == ["a", "b"]
        a.assert_awaited_once()
        b.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_next_call_after_completion_loads_again(self):
        flight = SingleFlight()
        fn = AsyncMock(return_value=1)

        await flight.do("k", fn)
        await flight.do("k", fn)

        assert fn.await_count == 2

    @pytest.mark.asyncio
    async def test_cancelled_first_caller_does_not_fail_waiters(self, cache):
        gate = asyncio.Event()
        calls = 0

        async def load():
            nonlocal calls
            calls += 1
            await gate.wait()
            return {"v": 1}

        flight = SingleFlight()
        first = asyncio.create_task(read_through(cache, "k", 60, load, flight))
        await asyncio.sleep(0)
        waiter = asyncio.create_task(read_through(cache, "k", 60, load, flight))
        await asyncio.sleep(0)
        first.cancel()
        gate.set()

        assert await waiter == {"v": 1}
        with pytest.raises(asyncio.CancelledError):
            await first
        cached = await cache.get("k")
        assert cached.hit and cached.value == {"v": 1}
        assert calls == 1
        assert flight.inflight == 0

    @pytest.mark.asyncio
    async def test_abandoned_fill_still_populates_cache(self, cache):
        gate = asyncio.Event()

        async def load():
            await gate.wait()
            return {"v": 2}

        flight = SingleFlight()
        caller = asyncio.create_task(read_through(cache, "k", 60, load, flight))
        await asyncio.sleep(0)
        caller.cancel()
        with pytest.raises(asyncio.CancelledError):
            await caller

        assert flight.inflight == 1
        gate.set()
        for _ in range(10):
            if flight.inflight == 0:
                break
            await asyncio.sleep(0)

        cached = await cache.get("k")
        assert cached.hit and cached.value == {"v": 2}
