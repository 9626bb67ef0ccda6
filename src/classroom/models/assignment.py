"""Assignment model and the entities it owns."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import BigInteger, Index, text
from sqlmodel import Field, SQLModel

from src.classroom.core.policy import (
    ProvisioningStrategy,
    resolve_strategy,
    use_importer,
    use_template_repos,
)
from src.classroom.models.base import utc_now


class Assignment(SQLModel, table=True):
    """Individual assignment within an organization.

    Title and slug are unique per organization among live rows; the partial
    indexes below back up the uniqueness checks run before every save.
    """

    __tablename__ = "assignments"
    __table_args__ = (
        Index(
            "uq_assignments_organization_slug",
            "organization_id",
            "slug",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
        Index(
            "uq_assignments_organization_title",
            "organization_id",
            "title",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    # Nullable in Python so the pipeline can report a missing owner; NOT NULL in the table
    organization_id: UUID | None = Field(
        default=None, foreign_key="organizations.id", index=True, nullable=False
    )
    creator_id: UUID | None = Field(
        default=None, foreign_key="users.id", index=True, nullable=False
    )
    title: str = Field(max_length=60)
    slug: str = Field(max_length=60)
    public_repo: bool = Field(default=True)
    starter_code_repo_id: int | None = Field(default=None, sa_type=BigInteger)
    template_repos_enabled: bool = Field(default=False)
    students_are_repo_admins: bool = Field(default=False)
    invitations_enabled: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: datetime | None = Field(default=None)

    @property
    def is_private(self) -> bool:
        return not self.public_repo

    @property
    def is_public(self) -> bool:
        return self.public_repo

    @property
    def has_starter_code(self) -> bool:
        return self.starter_code_repo_id is not None

    @property
    def template_repos_disabled(self) -> bool:
        return not self.template_repos_enabled

    @property
    def use_template_repos(self) -> bool:
        return use_template_repos(self.has_starter_code, self.template_repos_enabled)

    @property
    def use_importer(self) -> bool:
        return use_importer(self.has_starter_code, self.template_repos_enabled)

    @property
    def strategy(self) -> ProvisioningStrategy:
        """Provisioning strategy derived from the current flags (never stored)."""
        return resolve_strategy(self.has_starter_code, self.template_repos_enabled)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def to_param(self) -> str:
        """External-facing identifier used in URLs."""
        return self.slug


class AssignmentInvitation(SQLModel, table=True):
    """Invitation link for an assignment. Exactly one per assignment."""

    __tablename__ = "assignment_invitations"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    assignment_id: UUID = Field(
        foreign_key="assignments.id", unique=True, index=True, ondelete="CASCADE"
    )
    key: str = Field(max_length=64, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)


class Deadline(SQLModel, table=True):
    """Optional due date owned by an assignment."""

    __tablename__ = "deadlines"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    assignment_id: UUID = Field(
        foreign_key="assignments.id", unique=True, index=True, ondelete="CASCADE"
    )
    deadline_at: datetime
    created_at: datetime = Field(default_factory=utc_now)


class AssignmentRepo(SQLModel, table=True):
    """A student's provisioned repository for an assignment."""

    __tablename__ = "assignment_repos"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    assignment_id: UUID = Field(foreign_key="assignments.id", index=True, ondelete="CASCADE")
    user_id: UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    github_repo_id: int = Field(sa_type=BigInteger, unique=True)
    created_at: datetime = Field(default_factory=utc_now)
