"""Balance cache policy.

Only the platform-wide total is cached. A single user's balance is read
straight through so it is never stale right after a withdrawal.
"""

TOTAL_PLATFORM_BALANCE_TTL = 300
TOTAL_PLATFORM_BALANCE_KEY = "total_platform_balance"
