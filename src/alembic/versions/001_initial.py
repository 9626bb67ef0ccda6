"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

Assignment titles and slugs are unique per organization among rows that are
not soft-deleted; the partial indexes are the final word when two saves race.
"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

LIVE_ROWS = sa.text("deleted_at IS NULL")


def upgrade() -> None:
    # 1. Organizations
    op.create_table(
        "organizations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("github_id", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_organizations_github_id", "organizations", ["github_id"], unique=False)

    # 2. Users
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("github_uid", sa.BigInteger(), nullable=False),
        sa.Column("github_login", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("github_token", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_github_uid", "users", ["github_uid"], unique=True)

    # 3. Assignments
    op.create_table(
        "assignments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        sa.Column("creator_id", sa.Uuid(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=60), nullable=False),
        sa.Column("slug", sqlmodel.sql.sqltypes.AutoString(length=60), nullable=False),
        sa.Column("public_repo", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("starter_code_repo_id", sa.BigInteger(), nullable=True),
        sa.Column(
            "template_repos_enabled", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column(
            "students_are_repo_admins",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column(
            "invitations_enabled", sa.Boolean(), nullable=False, server_default=sa.text("true")
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["organization_id"], ["organizations.id"]),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_assignments_organization_id", "assignments", ["organization_id"], unique=False
    )
    op.create_index("ix_assignments_creator_id", "assignments", ["creator_id"], unique=False)
    op.create_index(
        "uq_assignments_organization_slug",
        "assignments",
        ["organization_id", "slug"],
        unique=True,
        postgresql_where=LIVE_ROWS,
    )
    op.create_index(
        "uq_assignments_organization_title",
        "assignments",
        ["organization_id", "title"],
        unique=True,
        postgresql_where=LIVE_ROWS,
    )

    # 4. Assignment invitations (exactly one per assignment)
    op.create_table(
        "assignment_invitations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("assignment_id", sa.Uuid(), nullable=False),
        sa.Column("key", sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["assignment_id"], ["assignments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_assignment_invitations_assignment_id",
        "assignment_invitations",
        ["assignment_id"],
        unique=True,
    )
    op.create_index(
        "ix_assignment_invitations_key", "assignment_invitations", ["key"], unique=True
    )

    # 5. Deadlines (zero or one per assignment)
    op.create_table(
        "deadlines",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("assignment_id", sa.Uuid(), nullable=False),
        sa.Column("deadline_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["assignment_id"], ["assignments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_deadlines_assignment_id", "deadlines", ["assignment_id"], unique=True)

    # 6. Assignment repos
    op.create_table(
        "assignment_repos",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("assignment_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("github_repo_id", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["assignment_id"], ["assignments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("github_repo_id"),
    )
    op.create_index(
        "ix_assignment_repos_assignment_id", "assignment_repos", ["assignment_id"], unique=False
    )
    op.create_index("ix_assignment_repos_user_id", "assignment_repos", ["user_id"], unique=False)

    # 7. Group assignments (share the slug namespace with assignments)
    op.create_table(
        "group_assignments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        sa.Column("creator_id", sa.Uuid(), nullable=False),
        sa.Column("title", sqlmodel.sql.sqltypes.AutoString(length=60), nullable=False),
        sa.Column("slug", sqlmodel.sql.sqltypes.AutoString(length=60), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["organization_id"], ["organizations.id"]),
        sa.ForeignKeyConstraint(["creator_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_group_assignments_organization_id",
        "group_assignments",
        ["organization_id"],
        unique=False,
    )
    op.create_index(
        "uq_group_assignments_organization_slug",
        "group_assignments",
        ["organization_id", "slug"],
        unique=True,
        postgresql_where=LIVE_ROWS,
    )


def downgrade() -> None:
    op.drop_table("group_assignments")
    op.drop_table("assignment_repos")
    op.drop_table("deadlines")
    op.drop_table("assignment_invitations")
    op.drop_table("assignments")
    op.drop_table("users")
    op.drop_table("organizations")
