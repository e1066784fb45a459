"""Pydantic schemas for dashboard API responses.

Row payloads stay plain dicts: they are already JSON-normalized by the
accessors and are passed through as-is.
"""

import math
from typing import Any

from pydantic import BaseModel

MAX_USERS_PAGE_LIMIT = 100
MAX_RECENT_WITHDRAWALS = 500
STATUS_SCAN_WINDOW = 1000
STATUS_RESULT_LIMIT = 100


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit))


def clamp_page(page: int, limit: int, max_limit: int) -> tuple[int, int, int]:
    """Clamp (page, limit) into range and return (page, limit, offset)."""
    page = max(page, 1)
    limit = min(max(limit, 1), max_limit)
    return page, limit, (page - 1) * limit


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class UsersSummary(BaseModel):
    total: int
    by_status: list[dict[str, Any]]


class UsersPageResponse(BaseModel):
    users: list[dict[str, Any]]
    summary: UsersSummary
    pagination: Pagination


class BalanceOut(BaseModel):
    balance: float = 0
    total_earned: float = 0
    total_withdrawn: float = 0


class UserDetailResponse(BaseModel):
    user: dict[str, Any]
    balance: dict[str, Any]
    withdrawals: list[dict[str, Any]]
    withdrawal_count: int


# ---------------------------------------------------------------------------
# Withdrawals / balances
# ---------------------------------------------------------------------------


class RecentWithdrawalsResponse(BaseModel):
    withdrawals: list[dict[str, Any]]
    total: int


class WithdrawalsByStatusResponse(BaseModel):
    status: str
    withdrawals: list[dict[str, Any]]
    total: int


class BalanceSummaryResponse(BaseModel):
    total_platform_balance: float
    user_summary: list[dict[str, Any]]
    withdrawal_summary: list[dict[str, Any]]
    timestamp: str


class Performance(BaseModel):
    response_time_ms: float
    source: str  # "cache" or "database"


class DashboardStatsResponse(BaseModel):
    total_users: int
    total_withdrawals: int
    pending_withdrawals: int
    completed_withdrawals: int
    failed_withdrawals: int
    total_withdrawn: float
    timestamp: str
    performance: Performance
