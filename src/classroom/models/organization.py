"""Organization model - the namespace assignments live in."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel

from src.classroom.models.base import utc_now


class Organization(SQLModel, table=True):
    """A classroom backed by a GitHub organization."""

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    title: str = Field(max_length=255)
    github_id: int = Field(sa_type=BigInteger, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    deleted_at: datetime | None = Field(default=None)
