"""DashboardService — thin composition layer for the dashboard endpoints.

All methods are read-only. Independent accessor calls run concurrently with
asyncio.gather; each one checks its own connection out of the pool.
"""

import asyncio
import time
from datetime import datetime

from src.ad_balance.application.service import BalanceAccessor
from src.ad_common.datetime_utils import utc_now, utc_now_iso
from src.ad_common.enums import WithdrawalStatus
from src.ad_common.errors import InvalidWithdrawalStatusError, UserNotFoundError
from src.ad_dashboard.application.aggregator import DashboardAggregator
from src.ad_dashboard.application.schemas import (
    MAX_RECENT_WITHDRAWALS,
    MAX_USERS_PAGE_LIMIT,
    STATUS_RESULT_LIMIT,
    STATUS_SCAN_WINDOW,
    BalanceOut,
    BalanceSummaryResponse,
    DashboardStatsResponse,
    Pagination,
    Performance,
    RecentWithdrawalsResponse,
    UserDetailResponse,
    UsersPageResponse,
    UsersSummary,
    WithdrawalsByStatusResponse,
    clamp_page,
)
from src.ad_user.application.service import UserAccessor
from src.ad_withdrawal.application.service import WithdrawalAccessor


class DashboardService:
    def __init__(
        self,
        users: UserAccessor,
        withdrawals: WithdrawalAccessor,
        balances: BalanceAccessor,
        aggregator: DashboardAggregator,
    ) -> None:
        self._users = users
        self._withdrawals = withdrawals
        self._balances = balances
        self._aggregator = aggregator

    async def get_stats(self) -> DashboardStatsResponse:
        # A snapshot stamped before this call started was served from cache.
        requested_at = utc_now()
        start = time.perf_counter()
        stats = await self._aggregator.get_stats()
        elapsed_ms = (time.perf_counter() - start) * 1000
        taken_at = datetime.fromisoformat(stats["timestamp"])
        return DashboardStatsResponse(
            **stats,
            performance=Performance(
                response_time_ms=round(elapsed_ms, 2),
                source="database" if taken_at >= requested_at else "cache",
            ),
        )

    async def list_users(self, page: int, limit: int) -> UsersPageResponse:
        page, limit, offset = clamp_page(page, limit, MAX_USERS_PAGE_LIMIT)
        users, total, by_status = await asyncio.gather(
            self._users.find_paginated(limit, offset),
            self._users.count(),
            self._users.count_by_status(),
        )
        return UsersPageResponse(
            users=users,
            summary=UsersSummary(total=total, by_status=by_status),
            pagination=Pagination.build(page, limit, total),
        )

    async def get_user_detail(self, user_id: str) -> UserDetailResponse:
        user, balance, withdrawals = await asyncio.gather(
            self._users.find_by_id(user_id),
            self._balances.find_by_user_id(user_id),
            self._withdrawals.find_by_user_id(user_id),
        )
        if user is None:
            raise UserNotFoundError(user_id)
        return UserDetailResponse(
            user=user,
            balance=balance if balance is not None else BalanceOut().model_dump(),
            withdrawals=withdrawals,
            withdrawal_count=len(withdrawals),
        )

    async def recent_withdrawals(self, limit: int) -> RecentWithdrawalsResponse:
        limit = min(max(limit, 1), MAX_RECENT_WITHDRAWALS)
        withdrawals = await self._withdrawals.find_recent(limit)
        return RecentWithdrawalsResponse(withdrawals=withdrawals, total=len(withdrawals))

    async def withdrawals_by_status(self, status: str) -> WithdrawalsByStatusResponse:
        allowed = WithdrawalStatus.values()
        if status not in allowed:
            raise InvalidWithdrawalStatusError(status, allowed)
        # Filters the shared recent window so it reuses that cache entry.
        recent = await self._withdrawals.find_recent(STATUS_SCAN_WINDOW)
        filtered = [w for w in recent if w["status"] == status]
        return WithdrawalsByStatusResponse(
            status=status,
            withdrawals=filtered[:STATUS_RESULT_LIMIT],
            total=len(filtered),
        )

    async def balance_summary(self) -> BalanceSummaryResponse:
        total, user_stats, withdrawal_stats = await asyncio.gather(
            self._balances.get_total_platform_balance(),
            self._users.count_by_status(),
            self._withdrawals.count_by_status(),
        )
        return BalanceSummaryResponse(
            total_platform_balance=total,
            user_summary=user_stats,
            withdrawal_summary=withdrawal_stats,
            timestamp=utc_now_iso(),
        )
