"""Repository Protocol — dependency inversion for testability."""

from decimal import Decimal
from typing import Any, Protocol


class BalanceRepositoryProtocol(Protocol):
    async def get_by_user_id(self, user_id: str) -> dict[str, Any] | None: ...

    async def total_balance(self) -> Decimal | int: ...
