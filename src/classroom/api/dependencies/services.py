"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.classroom.api.dependencies.db import DBSession
from src.classroom.api.dependencies.repositories import (
    AssignmentRepo,
    DeadlineRepo,
    GroupAssignmentRepo,
    InvitationRepo,
    UserRepo,
)
from src.classroom.services import (
    AssignmentService,
    AssignmentValidationPipeline,
    UniquenessChecker,
    github_client_for,
)
from src.classroom.services.validation_pipeline import ClientFactory


def get_repository_client_factory() -> ClientFactory:
    """How the pipeline obtains a GitHub client for an assignment's creator."""
    return github_client_for


def get_validation_pipeline(
    assignment_repo: AssignmentRepo,
    group_assignment_repo: GroupAssignmentRepo,
    client_factory: Annotated[ClientFactory, Depends(get_repository_client_factory)],
) -> AssignmentValidationPipeline:
    checker = UniquenessChecker(assignment_repo, group_assignment_repo)
    return AssignmentValidationPipeline(checker, client_factory)


def get_assignment_service(
    assignment_repo: AssignmentRepo,
    invitation_repo: InvitationRepo,
    deadline_repo: DeadlineRepo,
    user_repo: UserRepo,
    pipeline: Annotated[AssignmentValidationPipeline, Depends(get_validation_pipeline)],
    session: DBSession,
) -> AssignmentService:
    return AssignmentService(
        assignment_repo, invitation_repo, deadline_repo, user_repo, pipeline, session
    )


AssignmentServiceDep = Annotated[AssignmentService, Depends(get_assignment_service)]
