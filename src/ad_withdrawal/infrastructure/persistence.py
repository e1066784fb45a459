"""WithdrawalRepository — read-only raw SQL over the withdrawals table.

amount is NUMERIC and comes back as Decimal; normalization happens in the
accessor, not here.
"""

from typing import Any

from sqlalchemy import text

from src.ad_common.database import QueryPort

_LIST_BY_USER_SQL = text("""
    SELECT id, user_id, amount, wallet_address, transaction_hash, status,
           created_at, updated_at
    FROM withdrawals
    WHERE user_id = :user_id
    ORDER BY created_at DESC, id DESC
""")

_LIST_RECENT_SQL = text("""
    SELECT id, user_id, amount, wallet_address, transaction_hash, status,
           created_at, updated_at
    FROM withdrawals
    ORDER BY created_at DESC, id DESC
    LIMIT :limit
""")

_COUNT_BY_STATUS_SQL = text("""
    SELECT status, COUNT(*) AS count
    FROM withdrawals
    GROUP BY status
    ORDER BY status
""")


class WithdrawalRepository:
    def __init__(self, queries: QueryPort) -> None:
        self._queries = queries

    async def list_by_user_id(self, user_id: str) -> list[dict[str, Any]]:
        return await self._queries.execute(_LIST_BY_USER_SQL, {"user_id": user_id})

    async def list_recent(self, limit: int) -> list[dict[str, Any]]:
        return await self._queries.execute(_LIST_RECENT_SQL, {"limit": limit})

    async def count_by_status(self) -> list[dict[str, Any]]:
        return await self._queries.execute(_COUNT_BY_STATUS_SQL)
