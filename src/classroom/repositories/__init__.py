"""Repository layer - data access abstraction."""

from src.classroom.repositories.assignment import (
    AssignmentInvitationRepository,
    AssignmentRepository,
    DeadlineRepository,
)
from src.classroom.repositories.base import BaseRepository, SoftDeleteRepository
from src.classroom.repositories.group_assignment import GroupAssignmentRepository
from src.classroom.repositories.organization import OrganizationRepository, UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "SoftDeleteRepository",
    # Assignment graph
    "AssignmentInvitationRepository",
    "AssignmentRepository",
    "DeadlineRepository",
    "GroupAssignmentRepository",
    # Owners
    "OrganizationRepository",
    "UserRepository",
]
