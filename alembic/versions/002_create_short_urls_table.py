"""Create short_urls table.

Revision ID: 002
Revises: 001
Create Date: 2026-10-01 09:10:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create short_urls table; the code constraint decides collisions."""
    op.create_table(
        "short_urls",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("code", sa.String(16), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column(
            "owner_id",
            sa.String(36),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.UniqueConstraint("code", name="uq_short_urls_code"),
    )
    op.create_index("ix_short_urls_owner_id", "short_urls", ["owner_id"])


def downgrade() -> None:
    """Drop short_urls table."""
    op.drop_index("ix_short_urls_owner_id", table_name="short_urls")
    op.drop_table("short_urls")
