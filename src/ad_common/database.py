"""Relational query port over a pooled SQLAlchemy async engine (asyncpg).

All queries are text() clauses with named bind parameters; values are never
formatted into the SQL string. Each call checks a connection out of the pool
and returns it on completion or fault.

Driver exceptions are translated into two structured faults:
  StoreUnavailableError — connectivity (refused, timeout, pool exhausted,
                          connection invalidated). Retry may help.
  StoreQueryError       — malformed SQL or bad parameters. Never retry.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import exc as sa_exc
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.sql.elements import TextClause

from config.settings import Settings
from src.ad_common.errors import StoreQueryError, StoreUnavailableError

logger = logging.getLogger("ad.db")

_VERSION_SQL = text("SELECT version()")


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the pooled async engine. Connections open lazily on first use."""
    return create_async_engine(
        settings.database_url,
        echo=settings.DEBUG,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=settings.DB_CONNECT_TIMEOUT,
        pool_recycle=settings.DB_IDLE_TIMEOUT,
        pool_pre_ping=True,
        connect_args={"timeout": settings.DB_CONNECT_TIMEOUT},
    )


def _translate(exc: Exception) -> Exception:
    if isinstance(exc, (OSError, sa_exc.TimeoutError)):
        return StoreUnavailableError(f"Database unavailable: {exc}")
    if isinstance(exc, sa_exc.DBAPIError):
        if exc.connection_invalidated or isinstance(
            exc, (sa_exc.OperationalError, sa_exc.InterfaceError)
        ):
            return StoreUnavailableError(f"Database unavailable: {exc.orig}")
        return StoreQueryError(f"Database query failed: {exc.orig}")
    return StoreQueryError(f"Database query failed: {exc}")


class QueryPort:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def execute(
        self, template: TextClause, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Run one statement and return its rows as column→value dicts, in order."""
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(template, dict(params or {}))
                return [dict(row) for row in result.mappings().all()]
        except (sa_exc.SQLAlchemyError, OSError) as exc:
            raise _translate(exc) from exc

    async def fetch_one(
        self, template: TextClause, params: Mapping[str, Any] | None = None
    ) -> dict[str, Any] | None:
        rows = await self.execute(template, params)
        return rows[0] if rows else None

    async def fetch_value(
        self,
        template: TextClause,
        params: Mapping[str, Any] | None = None,
        default: Any = None,
    ) -> Any:
        """First column of the first row, or `default` when there is none."""
        row = await self.fetch_one(template, params)
        if not row:
            return default
        value = next(iter(row.values()))
        return default if value is None else value

    async def ping(self) -> bool:
        """Connectivity probe for health checks. Never raises."""
        try:
            version = await self.fetch_value(_VERSION_SQL)
        except (StoreUnavailableError, StoreQueryError) as exc:
            logger.error("Database connection failed: %s", exc.message)
            return False
        logger.info("Database connected: %s", version)
        return True

    async def dispose(self) -> None:
        await self._engine.dispose()
