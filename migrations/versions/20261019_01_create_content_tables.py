"""create blog post and profile tables

Revision ID: 3f8a1c2d9b70
Revises: 
Create Date: 2026-10-19 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f8a1c2d9b70"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "allblogposts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("excerpt", sa.Text()),
        sa.Column("image", sa.String(length=1024)),
        sa.Column("author", sa.String(length=100)),
        sa.Column("author_avatar", sa.String(length=1024)),
        sa.Column("author_bio", sa.Text()),
        sa.Column("publish_date", sa.String(length=50)),
        sa.Column("category", sa.String(length=100)),
        sa.Column("content", sa.Text()),
        sa.Column("read_time", sa.String(length=50)),
        sa.Column("views", sa.Integer(), server_default="0"),
        sa.Column("likes", sa.Integer(), server_default="0"),
        sa.Column("comments", sa.Integer(), server_default="0"),
        sa.Column("shares", sa.Integer(), server_default="0"),
        sa.Column("featured", sa.Boolean(), server_default=sa.false()),
        sa.Column("tags", sa.JSON()),
        sa.Column("seo", sa.JSON()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_allblogposts_slug", "allblogposts", ["slug"], unique=True)

    op.create_table(
        "profiles",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("full_name", sa.String(length=255)),
        sa.Column("avatar_url", sa.String(length=1024)),
        sa.Column("role", sa.String(length=20), server_default="user"),
        sa.Column("phone", sa.String(length=30)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("profiles")
    op.drop_index("ix_allblogposts_slug", table_name="allblogposts")
    op.drop_table("allblogposts")
