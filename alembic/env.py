"""Alembic environment for the dashboard schema (users, withdrawals, user_balances).

The target database defaults to the DB_* settings; pass
``alembic -x db_url=postgresql+asyncpg://...`` to migrate another one.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from config.settings import settings

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = None  # Raw SQL migrations, no autogenerate

database_url = context.get_x_argument(as_dictionary=True).get("db_url", settings.database_url)


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a live connection."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):  # type: ignore[no-untyped-def]
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Apply all revisions in one transaction over a single unpooled connection."""
    connectable = create_async_engine(
        database_url,
        poolclass=pool.NullPool,
        connect_args={"timeout": settings.DB_CONNECT_TIMEOUT},
    )
    async with connectable.begin() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
