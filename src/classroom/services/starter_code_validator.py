"""Remote checks on an assignment's starter-code repository."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from src.classroom.core.config import get_settings
from src.classroom.core.logging import get_logger
from src.classroom.core.violations import Violation, ViolationKind
from src.classroom.models import Assignment
from src.classroom.services.github_client import RemoteError, RepositoryClient

logger = get_logger(__name__)

T = TypeVar("T")

STARTER_CODE_FIELD = "starter_code_repository"

EMPTY_MESSAGE = (
    "cannot be empty. Select a repository that is not empty or create the"
    " assignment without starter code."
)
NOT_TEMPLATE_MESSAGE = (
    "is not a template repository. Make it a template repository to use"
    " template repository cloning."
)


class StarterCodeValidator:
    """Checks that the starter repository is non-empty, and a template when cloning.

    These are the only validations that touch the network. Both lookups run
    concurrently; each is bounded by a timeout, and any RemoteError becomes a
    REMOTE_CHECK_FAILED violation rather than a verdict on the repository.
    """

    def __init__(self, client: RepositoryClient, timeout: float | None = None):
        self.client = client
        self.timeout = (
            timeout if timeout is not None else get_settings().github_request_timeout_seconds
        )

    async def _call(self, lookup: Awaitable[T], repo_id: int) -> T:
        try:
            async with asyncio.timeout(self.timeout):
                return await lookup
        except TimeoutError as e:
            raise RemoteError(f"Timed out checking repository {repo_id}") from e

    def _remote_failure(self, repo_id: int, check: str, error: RemoteError) -> Violation:
        logger.warning(
            "Starter code check failed remotely",
            repo_id=repo_id,
            check=check,
            error=str(error),
            status_code=error.status_code,
        )
        return Violation(
            STARTER_CODE_FIELD,
            ViolationKind.REMOTE_CHECK_FAILED,
            f"could not be verified on GitHub ({error}). Try again later.",
        )

    async def check_not_empty(self, assignment: Assignment) -> list[Violation]:
        if not assignment.has_starter_code:
            return []
        repo_id = assignment.starter_code_repo_id
        try:
            is_empty = await self._call(self.client.fetch_repository_emptiness(repo_id), repo_id)
        except RemoteError as e:
            return [self._remote_failure(repo_id, "emptiness", e)]
        if is_empty:
            return [
                Violation(STARTER_CODE_FIELD, ViolationKind.STARTER_REPOSITORY_EMPTY, EMPTY_MESSAGE)
            ]
        return []

    async def check_is_template(self, assignment: Assignment) -> list[Violation]:
        if not assignment.use_template_repos:
            return []
        repo_id = assignment.starter_code_repo_id
        try:
            is_template = await self._call(
                self.client.fetch_repository_is_template(repo_id), repo_id
            )
        except RemoteError as e:
            return [self._remote_failure(repo_id, "template", e)]
        if not is_template:
            return [
                Violation(
                    STARTER_CODE_FIELD,
                    ViolationKind.STARTER_REPOSITORY_NOT_TEMPLATE,
                    NOT_TEMPLATE_MESSAGE,
                )
            ]
        return []

    async def check(self, assignment: Assignment) -> list[Violation]:
        """Run both checks; violations come back as non-empty first, then template."""
        if not assignment.has_starter_code:
            return []
        not_empty, is_template = await asyncio.gather(
            self.check_not_empty(assignment),
            self.check_is_template(assignment),
        )
        return not_empty + is_template
