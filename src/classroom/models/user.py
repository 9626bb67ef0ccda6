"""User model."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel

from src.classroom.models.base import utc_now


class User(SQLModel, table=True):
    """A GitHub-authenticated user.

    The stored token authorizes the GitHub calls made on the user's behalf,
    e.g. starter-code checks for assignments they create.
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    github_uid: int = Field(sa_type=BigInteger, unique=True, index=True)
    github_login: str = Field(max_length=255)
    github_token: str | None = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
