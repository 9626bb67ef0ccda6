"""Test helper functions for common data creation patterns."""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from src.classroom.models import Assignment, AssignmentInvitation, Organization, User
from src.classroom.services import RemoteError
from tests.factories import (
    AssignmentFactory,
    AssignmentInvitationFactory,
    OrganizationFactory,
    UserFactory,
)


class FakeRepositoryClient:
    """In-memory RepositoryClient with per-method call counters."""

    def __init__(
        self,
        empty: bool = False,
        template: bool = True,
        error: RemoteError | None = None,
        delay: float = 0.0,
    ):
        self.empty = empty
        self.template = template
        self.error = error
        self.delay = delay
        self.emptiness_calls = 0
        self.template_calls = 0

    @property
    def total_calls(self) -> int:
        return self.emptiness_calls + self.template_calls

    async def _answer(self, value: bool) -> bool:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return value

    async def fetch_repository_emptiness(self, repo_id: int) -> bool:
        self.emptiness_calls += 1
        return await self._answer(self.empty)

    async def fetch_repository_is_template(self, repo_id: int) -> bool:
        self.template_calls += 1
        return await self._answer(self.template)


async def create_organization_with_creator(
    session: AsyncSession,
    **user_kwargs,
) -> tuple[Organization, User]:
    """Create an organization and a user who can create assignments in it.

    Args:
        session: Database session
        **user_kwargs: Additional args passed to UserFactory

    Returns:
        Tuple of (organization, user)
    """
    organization = OrganizationFactory.build()
    user = UserFactory.build(**user_kwargs)
    session.add(organization)
    session.add(user)
    await session.commit()
    return organization, user


async def create_assignment(
    session: AsyncSession,
    organization: Organization,
    creator: User,
    **assignment_kwargs,
) -> tuple[Assignment, AssignmentInvitation]:
    """Persist an assignment with its invitation, bypassing validation.

    Args:
        session: Database session
        organization: Owning organization
        creator: Creating user
        **assignment_kwargs: Additional args passed to AssignmentFactory

    Returns:
        Tuple of (assignment, invitation)
    """
    assignment = AssignmentFactory.build(
        organization_id=organization.id,
        creator_id=creator.id,
        **assignment_kwargs,
    )
    session.add(assignment)
    await session.flush()

    invitation = AssignmentInvitationFactory.build(assignment_id=assignment.id)
    session.add(invitation)
    await session.commit()
    return assignment, invitation
