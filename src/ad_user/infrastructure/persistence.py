"""UserRepository — concrete implementation of UserRepositoryProtocol.

All queries use raw text() SQL (no ORM) with named bind parameters.
Read-only: users are written by the upstream airdrop system.
"""

from typing import Any

from sqlalchemy import text

from src.ad_common.database import QueryPort

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_GET_USER_SQL = text("""
    SELECT id, email, username, full_name, wallet_address, status,
           created_at, updated_at
    FROM users
    WHERE id = :user_id
""")

_GET_USER_BY_EMAIL_SQL = text("""
    SELECT id, email, username, full_name, wallet_address, status,
           created_at, updated_at
    FROM users
    WHERE email = :email
""")

_LIST_USERS_SQL = text("""
    SELECT id, email, username, full_name, wallet_address, status, created_at
    FROM users
    ORDER BY created_at DESC, id DESC
    LIMIT :limit OFFSET :offset
""")

_COUNT_USERS_SQL = text("SELECT COUNT(*) AS count FROM users")

_COUNT_USERS_BY_STATUS_SQL = text("""
    SELECT status, COUNT(*) AS count
    FROM users
    GROUP BY status
    ORDER BY status
""")


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class UserRepository:
    def __init__(self, queries: QueryPort) -> None:
        self._queries = queries

    async def get_by_id(self, user_id: str) -> dict[str, Any] | None:
        return await self._queries.fetch_one(_GET_USER_SQL, {"user_id": user_id})

    async def get_by_email(self, email: str) -> dict[str, Any] | None:
        return await self._queries.fetch_one(_GET_USER_BY_EMAIL_SQL, {"email": email})

    async def list_page(self, limit: int, offset: int) -> list[dict[str, Any]]:
        return await self._queries.execute(
            _LIST_USERS_SQL, {"limit": limit, "offset": offset}
        )

    async def count(self) -> int:
        return int(await self._queries.fetch_value(_COUNT_USERS_SQL, default=0))

    async def count_by_status(self) -> list[dict[str, Any]]:
        return await self._queries.execute(_COUNT_USERS_BY_STATUS_SQL)
