"""Repositories for Organization and User entities."""

from uuid import UUID

from sqlmodel import select

from src.classroom.models import Organization, User
from src.classroom.repositories.base import BaseRepository, SoftDeleteRepository


class OrganizationRepository(SoftDeleteRepository[Organization]):
    """Repository for Organization entity."""

    model = Organization


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_active_by_id(self, id: UUID) -> User | None:
        """Get user by id, ignoring deactivated accounts."""
        result = await self.session.execute(
            select(User).where(User.id == id, User.is_active == True)  # noqa: E712
        )
        return result.scalar_one_or_none()
