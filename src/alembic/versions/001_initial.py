"""Create projects and stories tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_name", "projects", ["name"], unique=False)

    op.create_table(
        "stories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column("requester", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column("points", sa.Integer(), nullable=True),
        sa.Column("state", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("rejected_date", sa.Date(), nullable=True),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "points IS NULL OR points >= 0", name="ck_stories_points_non_negative"
        ),
        sa.CheckConstraint(
            "(state = 'rejected') = (rejected_date IS NOT NULL)",
            name="ck_stories_rejected_date_matches_state",
        ),
    )
    op.create_index("ix_stories_project_id", "stories", ["project_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_stories_project_id", table_name="stories")
    op.drop_table("stories")
    op.drop_index("ix_projects_name", table_name="projects")
    op.drop_table("projects")
