"""Integration-test fixtures.

Run against the PostgreSQL and Redis configured through DB_* / REDIS_* env
vars. Every test is skipped when either store is unreachable. Rows are
seeded through a separate writer engine (the query port is read-only) and
removed afterwards; only the cache keys a test touches are deleted.
"""

import uuid

import pytest
import pytest_asyncio
from sqlalchemy import text

from config.settings import settings
from src.ad_common.database import create_engine
from src.container import AppContainer

_SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id              VARCHAR(64)     PRIMARY KEY,
        email           VARCHAR(255)    NOT NULL UNIQUE,
        username        VARCHAR(64)     NOT NULL,
        full_name       VARCHAR(255),
        wallet_address  VARCHAR(128),
        status          VARCHAR(32)     NOT NULL DEFAULT 'pending',
        created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
        updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS withdrawals (
        id                  VARCHAR(64)     PRIMARY KEY,
        user_id             VARCHAR(64)     NOT NULL REFERENCES users (id),
        amount              NUMERIC(36, 8)  NOT NULL,
        wallet_address      VARCHAR(128)    NOT NULL,
        transaction_hash    VARCHAR(128),
        status              VARCHAR(16)     NOT NULL DEFAULT 'pending',
        created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
        updated_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS user_balances (
        id                  VARCHAR(64)     PRIMARY KEY,
        user_id             VARCHAR(64)     NOT NULL UNIQUE REFERENCES users (id),
        balance             NUMERIC(36, 8)  NOT NULL DEFAULT 0,
        total_earned        NUMERIC(36, 8)  NOT NULL DEFAULT 0,
        total_withdrawn     NUMERIC(36, 8)  NOT NULL DEFAULT 0,
        updated_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW()
    )
    """,
]


class Seeder:
    def __init__(self, engine) -> None:  # type: ignore[no-untyped-def]
        self._engine = engine
        self.user_ids: list[str] = []

    async def user(self, **kwargs) -> str:  # type: ignore[no-untyped-def]
        user_id = kwargs.pop("id", None) or f"it-{uuid.uuid4().hex[:12]}"
        params = {
            "id": user_id,
            "email": f"{user_id}@example.com",
            "username": user_id,
            "full_name": "Integration User",
            "wallet_address": "0x0",
            "status": "active",
        }
        params.update(kwargs)
        async with self._engine.begin() as conn:
            await conn.execute(
                text("""
                    INSERT INTO users (id, email, username, full_name, wallet_address, status)
                    VALUES (:id, :email, :username, :full_name, :wallet_address, :status)
                """),
                params,
            )
        self.user_ids.append(user_id)
        return user_id

    async def withdrawal(self, user_id: str, amount: str, status: str) -> None:
        async with self._engine.begin() as conn:
            await conn.execute(
                text("""
                    INSERT INTO withdrawals (id, user_id, amount, wallet_address, status)
                    VALUES (:id, :user_id, CAST(:amount AS NUMERIC), '0x0', :status)
                """),
                {
                    "id": f"it-{uuid.uuid4().hex[:12]}",
                    "user_id": user_id,
                    "amount": amount,
                    "status": status,
                },
            )

    async def cleanup(self) -> None:
        if not self.user_ids:
            return
        async with self._engine.begin() as conn:
            for table in ("withdrawals", "user_balances"):
                await conn.execute(
                    text(f"DELETE FROM {table} WHERE user_id = ANY(:ids)"),
                    {"ids": self.user_ids},
                )
            await conn.execute(
                text("DELETE FROM users WHERE id = ANY(:ids)"), {"ids": self.user_ids}
            )


@pytest_asyncio.fixture
async def container():
    c = AppContainer.from_settings(settings)
    status = await c.health()
    if not all(status.values()):
        await c.stop()
        pytest.skip(f"integration stores unreachable: {status}")
    yield c
    await c.stop()


@pytest_asyncio.fixture
async def seeder(container):
    engine = create_engine(settings)
    async with engine.begin() as conn:
        for ddl in _SCHEMA:
            await conn.execute(text(ddl))
    s = Seeder(engine)
    yield s
    await s.cleanup()
    await engine.dispose()
