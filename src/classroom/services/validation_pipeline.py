"""Ordered validation of an assignment before it is persisted."""

from collections.abc import Callable

from src.classroom.core.logging import get_logger
from src.classroom.core.validators import validate_slug, validate_title
from src.classroom.core.violations import (
    PipelineState,
    ValidationResult,
    Violation,
    ViolationKind,
)
from src.classroom.models import Assignment, AssignmentInvitation, User
from src.classroom.services.github_client import GitHubClient, RepositoryClient
from src.classroom.services.starter_code_validator import StarterCodeValidator
from src.classroom.services.uniqueness_checker import UniquenessChecker

logger = get_logger(__name__)

ClientFactory = Callable[[User], RepositoryClient]


def github_client_for(user: User) -> RepositoryClient:
    """Build a GitHub client authorized with the user's token."""
    return GitHubClient(user.github_token)


class AssignmentValidationPipeline:
    """Runs every assignment invariant in a fixed order and collects all violations.

    Order:
    1. Title and slug format (no I/O)
    2. Invitation presence
    3. Title/slug uniqueness (only when an organization is set)
    4. Organization and creator presence; a missing one ends the run here
    5. Starter-code checks against GitHub

    Nothing is persisted here. The caller saves only when the returned result
    is valid.
    """

    def __init__(
        self,
        uniqueness_checker: UniquenessChecker,
        client_factory: ClientFactory = github_client_for,
    ):
        self.uniqueness_checker = uniqueness_checker
        self.client_factory = client_factory

    async def validate(
        self,
        assignment: Assignment,
        *,
        invitation: AssignmentInvitation | None,
        creator: User | None,
        client: RepositoryClient | None = None,
    ) -> ValidationResult:
        """Validate the assignment as loaded with its invitation and creator.

        Args:
            assignment: The entity to check, with pending changes applied.
            invitation: The attached invitation, or None if missing.
            creator: The assignment's creator; supplies the GitHub client.
            client: Optional client override, used instead of client_factory.

        Returns:
            ValidationResult in VALID or INVALID state.
        """
        result = ValidationResult(state=PipelineState.VALIDATING)

        result.extend(validate_title(assignment.title))
        result.extend(validate_slug(assignment.slug))

        if invitation is None:
            result.add(
                Violation("invitation", ViolationKind.MISSING_REQUIRED_ASSOCIATION, "must exist")
            )

        if assignment.organization_id is not None:
            result.extend(await self.uniqueness_checker.check(assignment))

        missing = self._missing_prerequisites(assignment, creator)
        if missing:
            result.extend(missing)
            return self._finish(assignment, result)

        if assignment.has_starter_code:
            # Resolved once per run; never cached across runs
            remote = client if client is not None else self.client_factory(creator)
            result.extend(await StarterCodeValidator(remote).check(assignment))

        return self._finish(assignment, result)

    @staticmethod
    def _missing_prerequisites(assignment: Assignment, creator: User | None) -> list[Violation]:
        violations: list[Violation] = []
        if assignment.organization_id is None:
            violations.append(
                Violation("organization", ViolationKind.MISSING_REQUIRED_ASSOCIATION, "must exist")
            )
        if assignment.creator_id is None or creator is None:
            violations.append(
                Violation("creator", ViolationKind.MISSING_REQUIRED_ASSOCIATION, "must exist")
            )
        return violations

    @staticmethod
    def _finish(assignment: Assignment, result: ValidationResult) -> ValidationResult:
        result.finish()
        logger.info(
            "Assignment validated",
            assignment_id=str(assignment.id),
            organization_id=str(assignment.organization_id),
            state=result.state.value,
            violations=[v.kind.value for v in result.violations],
        )
        return result
