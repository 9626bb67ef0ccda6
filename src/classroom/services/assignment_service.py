"""Assignment service - every write goes through the validation pipeline."""

from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.classroom.core.config import get_settings
from src.classroom.core.exceptions import AssignmentValidationError
from src.classroom.core.logging import get_logger
from src.classroom.core.security import generate_invitation_key
from src.classroom.core.validators import slugify
from src.classroom.core.violations import ValidationResult, Violation, ViolationKind
from src.classroom.models import Assignment, AssignmentInvitation, Deadline, User
from src.classroom.models.base import utc_now
from src.classroom.repositories import (
    AssignmentInvitationRepository,
    AssignmentRepository,
    DeadlineRepository,
    UserRepository,
)
from src.classroom.schemas import AssignmentCreate, AssignmentUpdate
from src.classroom.services.validation_pipeline import AssignmentValidationPipeline

logger = get_logger(__name__)

# Fields an update may set to null; for every other field null means "leave as is"
NULLABLE_FIELDS = frozenset({"starter_code_repo_id"})

# Unique index name and SQLite column wording, mapped to the violation each stands for
UNIQUE_INDEX_VIOLATIONS: tuple[tuple[tuple[str, ...], Violation], ...] = (
    (
        ("uq_assignments_organization_title", "assignments.organization_id, assignments.title"),
        Violation("title", ViolationKind.DUPLICATE_TITLE, "has already been taken"),
    ),
    (
        ("uq_assignments_organization_slug", "assignments.organization_id, assignments.slug"),
        Violation("slug", ViolationKind.DUPLICATE_SLUG, "has already been taken"),
    ),
)


class AssignmentService:
    """Create, update and soft-delete assignments."""

    def __init__(
        self,
        assignment_repo: AssignmentRepository,
        invitation_repo: AssignmentInvitationRepository,
        deadline_repo: DeadlineRepository,
        user_repo: UserRepository,
        pipeline: AssignmentValidationPipeline,
        session: AsyncSession,
    ):
        self.assignment_repo = assignment_repo
        self.invitation_repo = invitation_repo
        self.deadline_repo = deadline_repo
        self.user_repo = user_repo
        self.pipeline = pipeline
        self.session = session

    async def get_by_slug(self, organization_id: UUID, slug: str) -> Assignment | None:
        """Get a live assignment by slug."""
        return await self.assignment_repo.get_by_slug(organization_id, slug)

    async def get_invitation(self, assignment: Assignment) -> AssignmentInvitation | None:
        return await self.invitation_repo.get_by_assignment_id(assignment.id)

    async def get_deadline(self, assignment: Assignment) -> Deadline | None:
        return await self.deadline_repo.get_by_assignment_id(assignment.id)

    async def create_assignment(
        self,
        organization_id: UUID,
        creator: User,
        data: AssignmentCreate,
    ) -> Assignment:
        """Build an assignment with its invitation, validate it, then persist it.

        Raises:
            AssignmentValidationError: If any invariant fails. Nothing is written.
        """
        settings = get_settings()
        template_repos_enabled = (
            data.template_repos_enabled
            if data.template_repos_enabled is not None
            else settings.template_repos_enabled_default
        )

        assignment = Assignment(
            organization_id=organization_id,
            creator_id=creator.id,
            title=data.title,
            slug=data.slug if data.slug is not None else slugify(data.title),
            public_repo=data.public_repo,
            starter_code_repo_id=data.starter_code_repo_id,
            template_repos_enabled=template_repos_enabled,
            students_are_repo_admins=data.students_are_repo_admins,
            invitations_enabled=data.invitations_enabled,
        )
        # The invitation is part of the graph being validated
        invitation = AssignmentInvitation(
            assignment_id=assignment.id, key=generate_invitation_key()
        )

        result = await self.pipeline.validate(assignment, invitation=invitation, creator=creator)
        if not result.is_valid:
            raise AssignmentValidationError(result)

        try:
            self.assignment_repo.add(assignment)
            await self.session.flush()
            self.invitation_repo.add(invitation)
            if data.deadline_at is not None:
                self.deadline_repo.add(
                    Deadline(assignment_id=assignment.id, deadline_at=data.deadline_at)
                )
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            duplicate = self._duplicate_error(e)
            if duplicate is None:
                raise
            raise duplicate from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Assignment created",
            assignment_id=str(assignment.id),
            organization_id=str(organization_id),
            slug=assignment.slug,
            strategy=assignment.strategy.value,
        )
        return assignment

    async def update_assignment(self, assignment: Assignment, data: AssignmentUpdate) -> Assignment:
        """Apply the sent fields and re-run the full pipeline before committing.

        On failure the in-memory entity is restored to its previous values.

        Raises:
            AssignmentValidationError: If any invariant fails. Nothing is written.
        """
        changes = self._changes(data)
        deadline_sent = "deadline_at" in data.model_fields_set

        previous = {name: getattr(assignment, name) for name in changes}
        for name, value in changes.items():
            setattr(assignment, name, value)

        invitation = await self.invitation_repo.get_by_assignment_id(assignment.id)
        creator = (
            await self.user_repo.get_by_id(assignment.creator_id)
            if assignment.creator_id is not None
            else None
        )

        result = await self.pipeline.validate(assignment, invitation=invitation, creator=creator)
        if not result.is_valid:
            for name, value in previous.items():
                setattr(assignment, name, value)
            raise AssignmentValidationError(result)

        assignment.updated_at = utc_now()
        try:
            if deadline_sent:
                await self._replace_deadline(assignment, data.deadline_at)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            duplicate = self._duplicate_error(e)
            if duplicate is None:
                raise
            raise duplicate from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Assignment updated",
            assignment_id=str(assignment.id),
            changed=sorted(changes),
        )
        return assignment

    async def soft_delete_assignment(self, assignment: Assignment) -> Assignment:
        """Hide the assignment from every default query.

        Owned rows (invitation, deadline, repos) stay; they are only removed
        by the storage layer's cascade on a hard delete.
        """
        assignment.deleted_at = utc_now()
        assignment.updated_at = assignment.deleted_at
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Assignment deleted", assignment_id=str(assignment.id))
        return assignment

    @staticmethod
    def _changes(data: AssignmentUpdate) -> dict[str, Any]:
        sent = data.model_dump(exclude_unset=True, exclude={"deadline_at"})
        return {
            name: value
            for name, value in sent.items()
            if value is not None or name in NULLABLE_FIELDS
        }

    async def _replace_deadline(self, assignment: Assignment, deadline_at: Any) -> None:
        deadline = await self.deadline_repo.get_by_assignment_id(assignment.id)
        if deadline_at is None:
            if deadline is not None:
                await self.session.delete(deadline)
        elif deadline is None:
            self.deadline_repo.add(Deadline(assignment_id=assignment.id, deadline_at=deadline_at))
        else:
            deadline.deadline_at = deadline_at

    @staticmethod
    def _duplicate_error(error: IntegrityError) -> AssignmentValidationError | None:
        """Translate a unique-index violation that raced past the pipeline.

        Returns None for any other integrity failure, which the caller re-raises.
        """
        violation = _violation_for_constraint(error)
        if violation is None:
            return None
        logger.warning("Unique index rejected assignment", field=violation.field)
        return AssignmentValidationError(ValidationResult([violation]).finish())


def _violation_for_constraint(error: IntegrityError) -> Violation | None:
    # asyncpg names the constraint; SQLite only lists the columns
    marker = getattr(error.orig.__cause__, "constraint_name", None)
    if marker is None:
        # First line only: a DETAIL line echoes the offending values
        marker = next(iter(str(error.orig).splitlines()), "")

    for names, violation in UNIQUE_INDEX_VIOLATIONS:
        if any(name in marker for name in names):
            return violation
    return None
