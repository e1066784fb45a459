"""User row shapes, as they cross the cache boundary (JSON-normalized).

Timestamps are ISO-8601 strings and ids are strings once normalized.
"""

from typing import TypedDict


class UserSummary(TypedDict):
    """Listing projection — no updated_at."""

    id: str
    email: str
    username: str
    full_name: str | None
    wallet_address: str | None
    status: str  # open vocabulary, validated only where it is filtered on
    created_at: str


class User(UserSummary):
    updated_at: str


class StatusCount(TypedDict):
    status: str
    count: int
