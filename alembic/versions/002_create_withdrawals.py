"""002: create withdrawals table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE withdrawals (
            id                  VARCHAR(64)     PRIMARY KEY DEFAULT gen_random_uuid()::text,
            user_id             VARCHAR(64)     NOT NULL REFERENCES users (id),
            amount              NUMERIC(36, 8)  NOT NULL,
            wallet_address      VARCHAR(128)    NOT NULL,
            transaction_hash    VARCHAR(128),
            status              VARCHAR(16)     NOT NULL DEFAULT 'pending',
            created_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at          TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_withdrawals_amount_gte_0 CHECK (amount >= 0),
            CONSTRAINT ck_withdrawals_status
                CHECK (status IN ('pending', 'completed', 'failed'))
        );
    """)
    op.execute("CREATE INDEX idx_withdrawals_user_id ON withdrawals (user_id, created_at DESC);")
    op.execute("CREATE INDEX idx_withdrawals_created_at ON withdrawals (created_at DESC);")
    op.execute("CREATE INDEX idx_withdrawals_status ON withdrawals (status);")
    op.execute("""
        CREATE TRIGGER trg_withdrawals_updated_at
            BEFORE UPDATE ON withdrawals
            FOR EACH ROW EXECUTE FUNCTION fn_update_timestamp();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS withdrawals CASCADE;")
