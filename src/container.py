"""Process-wide wiring: build both ports once, inject them into every accessor.

    container = AppContainer.from_settings(settings)
    await container.start()   # probes database + cache, logs reachability
    ...
    await container.stop()    # disposes the engine pool, closes the Redis pool

Neither start() nor the probes raise: an unreachable cache only costs
latency, and an unreachable database surfaces per request as
StoreUnavailableError.
"""

import logging

from config.settings import Settings
from src.ad_balance.application.service import BalanceAccessor
from src.ad_balance.infrastructure.persistence import BalanceRepository
from src.ad_common.cache import CacheService
from src.ad_common.cache_aside import SingleFlight
from src.ad_common.database import QueryPort, create_engine
from src.ad_common.redis_client import create_redis
from src.ad_dashboard.application.aggregator import DashboardAggregator
from src.ad_dashboard.application.service import DashboardService
from src.ad_dashboard.infrastructure.persistence import DashboardRepository
from src.ad_user.application.service import UserAccessor
from src.ad_user.infrastructure.persistence import UserRepository
from src.ad_withdrawal.application.service import WithdrawalAccessor
from src.ad_withdrawal.infrastructure.persistence import WithdrawalRepository

logger = logging.getLogger("ad.app")


class AppContainer:
    def __init__(
        self,
        queries: QueryPort,
        cache: CacheService,
        coalescer: SingleFlight | None = None,
    ) -> None:
        self.queries = queries
        self.cache = cache
        self.users = UserAccessor(cache, UserRepository(queries), coalescer)
        self.withdrawals = WithdrawalAccessor(cache, WithdrawalRepository(queries), coalescer)
        self.balances = BalanceAccessor(cache, BalanceRepository(queries), coalescer)
        self.aggregator = DashboardAggregator(cache, DashboardRepository(queries), coalescer)
        self.dashboard = DashboardService(
            self.users, self.withdrawals, self.balances, self.aggregator
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContainer":
        queries = QueryPort(create_engine(settings))
        cache = CacheService(create_redis(settings), default_ttl=settings.CACHE_DEFAULT_TTL)
        coalescer = SingleFlight() if settings.CACHE_COALESCE_FILLS else None
        return cls(queries, cache, coalescer)

    async def health(self) -> dict[str, bool]:
        return {
            "database": await self.queries.ping(),
            "cache": await self.cache.ping(),
        }

    async def start(self) -> dict[str, bool]:
        status = await self.health()
        if not status["database"]:
            logger.error("Database connection failed!")
        if not status["cache"]:
            logger.error("Redis connection failed! Serving from the database only")
        return status

    async def stop(self) -> None:
        await self.queries.dispose()
        await self.cache.close()
        logger.info("Data access layer stopped")
