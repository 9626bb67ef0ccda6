"""Group assignment model - shares the slug namespace with Assignment."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import Index, text
from sqlmodel import Field, SQLModel

from src.classroom.models.base import utc_now


class GroupAssignment(SQLModel, table=True):
    """Team-based assignment within an organization.

    Only its slug matters here: an Assignment may not reuse the slug of a
    live GroupAssignment in the same organization.
    """

    __tablename__ = "group_assignments"
    __table_args__ = (
        Index(
            "uq_group_assignments_organization_slug",
            "organization_id",
            "slug",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    organization_id: UUID = Field(foreign_key="organizations.id", index=True)
    creator_id: UUID = Field(foreign_key="users.id")
    title: str = Field(max_length=60)
    slug: str = Field(max_length=60)
    created_at: datetime = Field(default_factory=utc_now)
    deleted_at: datetime | None = Field(default=None)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
