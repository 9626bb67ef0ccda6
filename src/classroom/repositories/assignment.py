"""Repositories for Assignment and the entities it owns."""

from uuid import UUID

from sqlmodel import select

from src.classroom.models import Assignment, AssignmentInvitation, Deadline
from src.classroom.repositories.base import BaseRepository, SoftDeleteRepository


class AssignmentRepository(SoftDeleteRepository[Assignment]):
    """Repository for Assignment entity. Soft-deleted rows are never returned."""

    model = Assignment

    async def get_by_slug(self, organization_id: UUID, slug: str) -> Assignment | None:
        """Get assignment by its external identifier within an organization."""
        result = await self.session.execute(
            self.live().where(
                Assignment.organization_id == organization_id,
                Assignment.slug == slug,
            )
        )
        return result.scalar_one_or_none()

    async def find_by_title(
        self,
        organization_id: UUID,
        title: str,
        excluding_id: UUID | None = None,
    ) -> Assignment | None:
        """Find another live assignment in the organization with this title."""
        query = self.live().where(
            Assignment.organization_id == organization_id,
            Assignment.title == title,
        )
        if excluding_id is not None:
            query = query.where(Assignment.id != excluding_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def find_by_slug(
        self,
        organization_id: UUID,
        slug: str,
        excluding_id: UUID | None = None,
    ) -> Assignment | None:
        """Find another live assignment in the organization with this slug."""
        query = self.live().where(
            Assignment.organization_id == organization_id,
            Assignment.slug == slug,
        )
        if excluding_id is not None:
            query = query.where(Assignment.id != excluding_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def list_by_organization(self, organization_id: UUID) -> list[Assignment]:
        """List live assignments of an organization, newest first."""
        result = await self.session.execute(
            self.live()
            .where(Assignment.organization_id == organization_id)
            .order_by(Assignment.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())


class AssignmentInvitationRepository(BaseRepository[AssignmentInvitation]):
    """Repository for AssignmentInvitation entity."""

    model = AssignmentInvitation

    async def get_by_assignment_id(self, assignment_id: UUID) -> AssignmentInvitation | None:
        result = await self.session.execute(
            select(AssignmentInvitation).where(AssignmentInvitation.assignment_id == assignment_id)
        )
        return result.scalar_one_or_none()


class DeadlineRepository(BaseRepository[Deadline]):
    """Repository for Deadline entity."""

    model = Deadline

    async def get_by_assignment_id(self, assignment_id: UUID) -> Deadline | None:
        result = await self.session.execute(
            select(Deadline).where(Deadline.assignment_id == assignment_id)
        )
        return result.scalar_one_or_none()
