"""BalanceAccessor — per-user balance (uncached) and platform total (cached)."""

from typing import cast

from src.ad_balance.domain.cache import (
    TOTAL_PLATFORM_BALANCE_KEY,
    TOTAL_PLATFORM_BALANCE_TTL,
)
from src.ad_balance.domain.models import UserBalance
from src.ad_balance.domain.repository import BalanceRepositoryProtocol
from src.ad_common.cache import CacheService
from src.ad_common.cache_aside import SingleFlight, read_through
from src.ad_common.serialization import normalize


class BalanceAccessor:
    def __init__(
        self,
        cache: CacheService,
        repo: BalanceRepositoryProtocol,
        coalescer: SingleFlight | None = None,
    ) -> None:
        self._cache = cache
        self._repo = repo
        self._coalescer = coalescer

    async def find_by_user_id(self, user_id: str) -> UserBalance | None:
        row = await self._repo.get_by_user_id(user_id)
        return cast(UserBalance | None, normalize(row))

    async def get_total_platform_balance(self) -> float:
        total = await read_through(
            self._cache,
            TOTAL_PLATFORM_BALANCE_KEY,
            TOTAL_PLATFORM_BALANCE_TTL,
            self._repo.total_balance,
            self._coalescer,
        )
        return float(total)
