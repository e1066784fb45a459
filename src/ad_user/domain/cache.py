"""User cache policy.

  user:{id}        300s  point lookup, keyed on the immutable id only
  users_count      120s
  users_by_status  120s

Lookups by email and paginated listings are not cached: their key space is
unbounded.
"""

USER_TTL = 300
USERS_COUNT_TTL = 120
USERS_BY_STATUS_TTL = 120

USERS_COUNT_KEY = "users_count"
USERS_BY_STATUS_KEY = "users_by_status"


def user_key(user_id: str) -> str:
    return f"user:{user_id}"
