"""DashboardAggregator — cached multi-metric summary.

The timestamp is stamped inside the fill, before the value is cached, so a
hit reports when the snapshot was taken rather than the current instant.
"""

from typing import Any, cast

from src.ad_common.cache import CacheService
from src.ad_common.cache_aside import SingleFlight, read_through
from src.ad_common.datetime_utils import utc_now_iso
from src.ad_dashboard.domain.cache import DASHBOARD_STATS_KEY, DASHBOARD_STATS_TTL
from src.ad_dashboard.domain.models import EMPTY_STATS_ROW, DashboardStats
from src.ad_dashboard.domain.repository import DashboardRepositoryProtocol


class DashboardAggregator:
    def __init__(
        self,
        cache: CacheService,
        repo: DashboardRepositoryProtocol,
        coalescer: SingleFlight | None = None,
    ) -> None:
        self._cache = cache
        self._repo = repo
        self._coalescer = coalescer

    async def _snapshot(self) -> dict[str, Any]:
        row = await self._repo.get_stats()
        stats = {**EMPTY_STATS_ROW, **(row or {})}
        if stats["total_withdrawn"] is None:
            stats["total_withdrawn"] = 0
        stats["timestamp"] = utc_now_iso()
        return stats

    async def get_stats(self) -> DashboardStats:
        stats = await read_through(
            self._cache,
            DASHBOARD_STATS_KEY,
            DASHBOARD_STATS_TTL,
            self._snapshot,
            self._coalescer,
        )
        return cast(DashboardStats, stats)
