"""BalanceRepository — read-only raw SQL over user_balances."""

from decimal import Decimal
from typing import Any

from sqlalchemy import text

from src.ad_common.database import QueryPort

_GET_BY_USER_SQL = text("""
    SELECT id, user_id, balance, total_earned, total_withdrawn, updated_at
    FROM user_balances
    WHERE user_id = :user_id
""")

_TOTAL_BALANCE_SQL = text(
    "SELECT COALESCE(SUM(balance), 0) AS total FROM user_balances"
)


class BalanceRepository:
    def __init__(self, queries: QueryPort) -> None:
        self._queries = queries

    async def get_by_user_id(self, user_id: str) -> dict[str, Any] | None:
        return await self._queries.fetch_one(_GET_BY_USER_SQL, {"user_id": user_id})

    async def total_balance(self) -> Decimal | int:
        return await self._queries.fetch_value(_TOTAL_BALANCE_SQL, default=0)
