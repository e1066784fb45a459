"""DashboardRepository — every dashboard metric in one round trip."""

from typing import Any

from sqlalchemy import text

from src.ad_common.database import QueryPort
from src.ad_common.enums import WithdrawalStatus

_DASHBOARD_STATS_SQL = text("""
    SELECT
        (SELECT COUNT(*) FROM users) AS total_users,
        (SELECT COUNT(*) FROM withdrawals) AS total_withdrawals,
        (SELECT COUNT(*) FROM withdrawals WHERE status = :pending) AS pending_withdrawals,
        (SELECT COUNT(*) FROM withdrawals WHERE status = :completed) AS completed_withdrawals,
        (SELECT COUNT(*) FROM withdrawals WHERE status = :failed) AS failed_withdrawals,
        (SELECT COALESCE(SUM(amount), 0) FROM withdrawals WHERE status = :completed)
            AS total_withdrawn
""")


class DashboardRepository:
    def __init__(self, queries: QueryPort) -> None:
        self._queries = queries

    async def get_stats(self) -> dict[str, Any] | None:
        return await self._queries.fetch_one(
            _DASHBOARD_STATS_SQL,
            {
                "pending": WithdrawalStatus.PENDING.value,
                "completed": WithdrawalStatus.COMPLETED.value,
                "failed": WithdrawalStatus.FAILED.value,
            },
        )
