"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

from src.classroom.api.dependencies.auth import (
    CurrentOrganization,
    CurrentUser,
    get_current_user,
    get_organization,
)
from src.classroom.api.dependencies.db import DBSession, get_db_session
from src.classroom.api.dependencies.repositories import (
    AssignmentRepo,
    DeadlineRepo,
    GroupAssignmentRepo,
    InvitationRepo,
    OrganizationRepo,
    UserRepo,
)
from src.classroom.api.dependencies.services import (
    AssignmentServiceDep,
    get_assignment_service,
    get_repository_client_factory,
    get_validation_pipeline,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentOrganization",
    "CurrentUser",
    "get_current_user",
    "get_organization",
    # Repositories
    "AssignmentRepo",
    "DeadlineRepo",
    "GroupAssignmentRepo",
    "InvitationRepo",
    "OrganizationRepo",
    "UserRepo",
    # Services
    "AssignmentServiceDep",
    "get_assignment_service",
    "get_repository_client_factory",
    "get_validation_pipeline",
]
