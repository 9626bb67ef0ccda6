"""Repository for GroupAssignment entity."""

from uuid import UUID

from src.classroom.models import GroupAssignment
from src.classroom.repositories.base import SoftDeleteRepository


class GroupAssignmentRepository(SoftDeleteRepository[GroupAssignment]):
    """Repository for GroupAssignment entity. Soft-deleted rows are never returned."""

    model = GroupAssignment

    async def exists_by_slug(self, organization_id: UUID, slug: str) -> bool:
        """Check if a live group assignment in the organization uses this slug."""
        result = await self.session.execute(
            self.live()
            .where(
                GroupAssignment.organization_id == organization_id,
                GroupAssignment.slug == slug,
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None
