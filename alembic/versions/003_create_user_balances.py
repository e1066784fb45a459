"""003: create user_balances table

Revision ID: 003
Revises: 002
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # balance may go negative if upstream allows it; not constrained here.
    op.execute("""
        CREATE TABLE user_balances (
            id                  VARCHAR(64)     PRIMARY KEY DEFAULT gen_random_uuid()::text,
            user_id             VARCHAR(64)     NOT NULL REFERENCES users (id),
            balance             NUMERIC(36, 8)  NOT NULL DEFAULT 0,
            total_earned        NUMERIC(36, 8)  NOT NULL DEFAULT 0,
            total_withdrawn     NUMERIC(36, 8)  NOT NULL DEFAULT 0,
            updated_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT uq_user_balances_user_id UNIQUE (user_id)
        );
    """)
    op.execute("""
        CREATE TRIGGER trg_user_balances_updated_at
            BEFORE UPDATE ON user_balances
            FOR EACH ROW EXECUTE FUNCTION fn_update_timestamp();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS user_balances CASCADE;")
