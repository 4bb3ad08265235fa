"""create_accounts_table

Revision ID: 3f1c9a7d2b04
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b04'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('accounts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False, comment='Account ID'),
        sa.Column('name', sa.String(length=255), nullable=False, comment='Display name'),
        sa.Column('email', sa.String(length=255), nullable=False, comment='Account email address'),
        sa.Column('password_hash', sa.String(length=255), nullable=False, comment='Hashed password (argon2)'),
        sa.Column('role', sa.String(length=16), server_default='user', nullable=False, comment='Account role: user or admin'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_accounts_email')
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('accounts')
