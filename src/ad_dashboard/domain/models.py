"""Dashboard aggregate snapshot."""

from typing import TypedDict


class DashboardStats(TypedDict):
    total_users: int
    total_withdrawals: int
    pending_withdrawals: int
    completed_withdrawals: int
    failed_withdrawals: int
    total_withdrawn: float  # sum over completed withdrawals, 0 when none
    timestamp: str          # when the snapshot was taken, survives cache hits


EMPTY_STATS_ROW = {
    "total_users": 0,
    "total_withdrawals": 0,
    "pending_withdrawals": 0,
    "completed_withdrawals": 0,
    "failed_withdrawals": 0,
    "total_withdrawn": 0,
}
