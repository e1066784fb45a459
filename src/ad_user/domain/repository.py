"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation. Rows come back with
driver-native values; the accessor normalizes them.
"""

from typing import Any, Protocol


class UserRepositoryProtocol(Protocol):
    async def get_by_id(self, user_id: str) -> dict[str, Any] | None: ...

    async def get_by_email(self, email: str) -> dict[str, Any] | None: ...

    async def list_page(self, limit: int, offset: int) -> list[dict[str, Any]]: ...

    async def count(self) -> int: ...

    async def count_by_status(self) -> list[dict[str, Any]]: ...
