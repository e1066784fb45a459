"""001: create timestamp trigger function and users table

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE OR REPLACE FUNCTION fn_update_timestamp()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)
    # status is an open vocabulary owned upstream: no CHECK constraint.
    op.execute("""
        CREATE TABLE users (
            id              VARCHAR(64)     PRIMARY KEY DEFAULT gen_random_uuid()::text,
            email           VARCHAR(255)    NOT NULL,
            username        VARCHAR(64)     NOT NULL,
            full_name       VARCHAR(255),
            wallet_address  VARCHAR(128),
            status          VARCHAR(32)     NOT NULL DEFAULT 'pending',
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_users_email UNIQUE (email)
        );
    """)
    op.execute("CREATE INDEX idx_users_created_at ON users (created_at DESC);")
    op.execute("CREATE INDEX idx_users_status ON users (status);")
    op.execute("""
        CREATE TRIGGER trg_users_updated_at
            BEFORE UPDATE ON users
            FOR EACH ROW EXECUTE FUNCTION fn_update_timestamp();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS users CASCADE;")
    op.execute("DROP FUNCTION IF EXISTS fn_update_timestamp();")
