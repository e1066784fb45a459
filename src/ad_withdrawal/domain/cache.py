"""Withdrawal cache policy.

Recent withdrawals change fastest, so they get the shortest TTL. The key
carries N because each listing size is a different result set.
Per-user withdrawal lists are not cached: a stale list right after a
withdrawal would contradict the user's balance.
"""

RECENT_WITHDRAWALS_TTL = 60
WITHDRAWALS_BY_STATUS_TTL = 120

WITHDRAWALS_BY_STATUS_KEY = "withdrawals_by_status"


def recent_withdrawals_key(limit: int) -> str:
    return f"recent_withdrawals:{limit}"
