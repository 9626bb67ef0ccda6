"""Naming collision checks within an organization."""

from uuid import UUID

from src.classroom.core.violations import Violation, ViolationKind
from src.classroom.models import Assignment
from src.classroom.repositories import AssignmentRepository, GroupAssignmentRepository


class UniquenessChecker:
    """Checks assignment titles and slugs against the live rows of an organization.

    Reads happen at call time with no caching. Two concurrent saves can both
    pass; the partial unique indexes on the tables settle that race.
    """

    def __init__(
        self,
        assignment_repo: AssignmentRepository,
        group_assignment_repo: GroupAssignmentRepository,
    ):
        self.assignment_repo = assignment_repo
        self.group_assignment_repo = group_assignment_repo

    async def check_title_unique(
        self, title: str, organization_id: UUID, excluding_id: UUID | None = None
    ) -> bool:
        existing = await self.assignment_repo.find_by_title(organization_id, title, excluding_id)
        return existing is None

    async def check_slug_unique(
        self, slug: str, organization_id: UUID, excluding_id: UUID | None = None
    ) -> bool:
        existing = await self.assignment_repo.find_by_slug(organization_id, slug, excluding_id)
        return existing is None

    async def check_slug_unique_across_sibling_kind(self, slug: str, organization_id: UUID) -> bool:
        """True when no live group assignment of the organization uses the slug."""
        return not await self.group_assignment_repo.exists_by_slug(organization_id, slug)

    async def check(self, assignment: Assignment) -> list[Violation]:
        """Run all three checks for an assignment with an organization set.

        At most one DUPLICATE_SLUG is reported even if both kinds collide.
        """
        if assignment.organization_id is None:
            raise ValueError("Organization required for uniqueness checks")
        organization_id = assignment.organization_id
        violations: list[Violation] = []

        if assignment.title and not await self.check_title_unique(
            assignment.title, organization_id, assignment.id
        ):
            violations.append(
                Violation("title", ViolationKind.DUPLICATE_TITLE, "has already been taken")
            )

        if assignment.slug:
            slug_taken = not await self.check_slug_unique(
                assignment.slug, organization_id, assignment.id
            ) or not await self.check_slug_unique_across_sibling_kind(
                assignment.slug, organization_id
            )
            if slug_taken:
                violations.append(
                    Violation("slug", ViolationKind.DUPLICATE_SLUG, "has already been taken")
                )

        return violations
