"""create users and sign_history

Revision ID: 3c1e5a7d9b20
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1e5a7d9b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("username", sa.String(length=128), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("username"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=False)
    op.create_table(
        "sign_history",
        sa.Column("username", sa.String(length=128), nullable=False),
        sa.Column("timestamp", sa.String(length=19), nullable=False),
        sa.Column("action", sa.String(length=3), nullable=False),
        sa.PrimaryKeyConstraint("username", "timestamp"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("sign_history")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
