"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import AssignmentFactory, OrganizationFactory, ...
"""

from tests.factories.assignment import (
    AssignmentFactory,
    AssignmentInvitationFactory,
    DeadlineFactory,
    GroupAssignmentFactory,
)
from tests.factories.base import BaseFactory, generate_uuid7, utc_now
from tests.factories.organization import OrganizationFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid7",
    "utc_now",
    # Owners
    "OrganizationFactory",
    "UserFactory",
    # Assignment graph
    "AssignmentFactory",
    "AssignmentInvitationFactory",
    "DeadlineFactory",
    "GroupAssignmentFactory",
]
