"""Create ideas and likes tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

ideas: id, created_at (UTC, no time zone), message, image
likes: id, created_at (UTC, no time zone), idea_id → ideas.id ON DELETE CASCADE
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "ideas",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            server_default=sa.text("(now() at time zone 'utc')"),
            nullable=False,
        ),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_ideas_created_at",
        "ideas",
        [sa.text("created_at DESC")],
    )

    op.create_table(
        "likes",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=False),
            server_default=sa.text("(now() at time zone 'utc')"),
            nullable=False,
        ),
        sa.Column("idea_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.ForeignKeyConstraint(["idea_id"], ["ideas.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_likes_idea_id_created_at",
        "likes",
        ["idea_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_likes_idea_id_created_at", table_name="likes")
    op.drop_table("likes")
    op.drop_index("idx_ideas_created_at", table_name="ideas")
    op.drop_table("ideas")
