"""Repository Protocol — dependency inversion for testability."""

from typing import Any, Protocol


class WithdrawalRepositoryProtocol(Protocol):
    async def list_by_user_id(self, user_id: str) -> list[dict[str, Any]]: ...

    async def list_recent(self, limit: int) -> list[dict[str, Any]]: ...

    async def count_by_status(self) -> list[dict[str, Any]]: ...
