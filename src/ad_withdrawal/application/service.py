"""WithdrawalAccessor — cache-aside reads over the withdrawals table."""

from typing import cast

from src.ad_common.cache import CacheService
from src.ad_common.cache_aside import SingleFlight, read_through
from src.ad_common.serialization import normalize
from src.ad_withdrawal.domain.cache import (
    RECENT_WITHDRAWALS_TTL,
    WITHDRAWALS_BY_STATUS_KEY,
    WITHDRAWALS_BY_STATUS_TTL,
    recent_withdrawals_key,
)
from src.ad_withdrawal.domain.models import StatusCount, Withdrawal
from src.ad_withdrawal.domain.repository import WithdrawalRepositoryProtocol


class WithdrawalAccessor:
    def __init__(
        self,
        cache: CacheService,
        repo: WithdrawalRepositoryProtocol,
        coalescer: SingleFlight | None = None,
    ) -> None:
        self._cache = cache
        self._repo = repo
        self._coalescer = coalescer

    async def find_by_user_id(self, user_id: str) -> list[Withdrawal]:
        rows = await self._repo.list_by_user_id(user_id)
        return cast(list[Withdrawal], normalize(rows))

    async def find_recent(self, limit: int = 100) -> list[Withdrawal]:
        rows = await read_through(
            self._cache,
            recent_withdrawals_key(limit),
            RECENT_WITHDRAWALS_TTL,
            lambda: self._repo.list_recent(limit),
            self._coalescer,
        )
        return cast(list[Withdrawal], rows)

    async def count_by_status(self) -> list[StatusCount]:
        counts = await read_through(
            self._cache,
            WITHDRAWALS_BY_STATUS_KEY,
            WITHDRAWALS_BY_STATUS_TTL,
            self._repo.count_by_status,
            self._coalescer,
        )
        return cast(list[StatusCount], counts)
