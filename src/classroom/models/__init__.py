"""Model exports.

Import from here: `from src.classroom.models import Assignment, Organization`
"""

from src.classroom.models.assignment import (
    Assignment,
    AssignmentInvitation,
    AssignmentRepo,
    Deadline,
)
from src.classroom.models.group_assignment import GroupAssignment
from src.classroom.models.organization import Organization
from src.classroom.models.user import User

__all__ = [
    # Assignment graph
    "Assignment",
    "AssignmentInvitation",
    "AssignmentRepo",
    "Deadline",
    # Shared slug namespace
    "GroupAssignment",
    # Owners
    "Organization",
    "User",
]
