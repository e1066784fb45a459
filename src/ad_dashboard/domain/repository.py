"""Repository Protocol — dependency inversion for testability."""

from typing import Any, Protocol


class DashboardRepositoryProtocol(Protocol):
    async def get_stats(self) -> dict[str, Any] | None: ...
