"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.classroom.api.dependencies.db import DBSession
from src.classroom.repositories import (
    AssignmentInvitationRepository,
    AssignmentRepository,
    DeadlineRepository,
    GroupAssignmentRepository,
    OrganizationRepository,
    UserRepository,
)


def get_assignment_repository(session: DBSession) -> AssignmentRepository:
    return AssignmentRepository(session)


def get_invitation_repository(session: DBSession) -> AssignmentInvitationRepository:
    return AssignmentInvitationRepository(session)


def get_deadline_repository(session: DBSession) -> DeadlineRepository:
    return DeadlineRepository(session)


def get_group_assignment_repository(session: DBSession) -> GroupAssignmentRepository:
    return GroupAssignmentRepository(session)


def get_organization_repository(session: DBSession) -> OrganizationRepository:
    return OrganizationRepository(session)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


AssignmentRepo = Annotated[AssignmentRepository, Depends(get_assignment_repository)]
InvitationRepo = Annotated[AssignmentInvitationRepository, Depends(get_invitation_repository)]
DeadlineRepo = Annotated[DeadlineRepository, Depends(get_deadline_repository)]
GroupAssignmentRepo = Annotated[
    GroupAssignmentRepository, Depends(get_group_assignment_repository)
]
OrganizationRepo = Annotated[OrganizationRepository, Depends(get_organization_repository)]
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
