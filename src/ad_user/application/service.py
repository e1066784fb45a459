"""UserAccessor — cache-aside reads over the users table.

Cached: find_by_id, count, count_by_status (see domain/cache.py for keys
and TTLs). find_by_email and find_paginated read straight through.
Every returned value is JSON-normalized.
"""

from typing import cast

from src.ad_common.cache import CacheService
from src.ad_common.cache_aside import SingleFlight, read_through
from src.ad_common.serialization import normalize
from src.ad_user.domain.cache import (
    USER_TTL,
    USERS_BY_STATUS_KEY,
    USERS_BY_STATUS_TTL,
    USERS_COUNT_KEY,
    USERS_COUNT_TTL,
    user_key,
)
from src.ad_user.domain.models import StatusCount, User, UserSummary
from src.ad_user.domain.repository import UserRepositoryProtocol


class UserAccessor:
    def __init__(
        self,
        cache: CacheService,
        repo: UserRepositoryProtocol,
        coalescer: SingleFlight | None = None,
    ) -> None:
        self._cache = cache
        self._repo = repo
        self._coalescer = coalescer

    async def find_by_id(self, user_id: str) -> User | None:
        user = await read_through(
            self._cache,
            user_key(user_id),
            USER_TTL,
            lambda: self._repo.get_by_id(user_id),
            self._coalescer,
        )
        return cast(User | None, user)

    async def find_by_email(self, email: str) -> User | None:
        return cast(User | None, normalize(await self._repo.get_by_email(email)))

    async def find_paginated(self, limit: int = 50, offset: int = 0) -> list[UserSummary]:
        rows = await self._repo.list_page(limit, offset)
        return cast(list[UserSummary], normalize(rows))

    async def count(self) -> int:
        total = await read_through(
            self._cache, USERS_COUNT_KEY, USERS_COUNT_TTL, self._repo.count, self._coalescer
        )
        return int(total)

    async def count_by_status(self) -> list[StatusCount]:
        counts = await read_through(
            self._cache,
            USERS_BY_STATUS_KEY,
            USERS_BY_STATUS_TTL,
            self._repo.count_by_status,
            self._coalescer,
        )
        return cast(list[StatusCount], counts)
