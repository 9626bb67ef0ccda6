"""Tests for mapping unique-index failures onto duplicate violations."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from src.classroom.core.exceptions import AssignmentValidationError
from src.classroom.core.violations import ValidationResult, ViolationKind
from src.classroom.schemas import AssignmentCreate
from src.classroom.services import AssignmentService

pytestmark = pytest.mark.unit


class UniqueViolation(Exception):
    """Stand-in for asyncpg's UniqueViolationError."""

    def __init__(self, constraint_name: str):
        super().__init__(f'duplicate key value violates unique constraint "{constraint_name}"')
        self.constraint_name = constraint_name


def integrity_error(message: str, cause: Exception | None = None) -> IntegrityError:
    orig = Exception(message)
    orig.__cause__ = cause
    return IntegrityError("INSERT INTO assignments ...", {}, orig)


def kinds(error: AssignmentValidationError | None) -> list[ViolationKind] | None:
    return None if error is None else [v.kind for v in error.violations]


class TestDuplicateError:
    """Only the assignment title and slug indexes become violations."""

    def test_asyncpg_slug_index_with_title_in_detail(self):
        error = integrity_error(
            'duplicate key value violates unique constraint "uq_assignments_organization_slug"\n'
            "DETAIL:  Key (organization_id, slug)=(0190a8e0, title-page) already exists.",
            UniqueViolation("uq_assignments_organization_slug"),
        )
        assert kinds(AssignmentService._duplicate_error(error)) == [ViolationKind.DUPLICATE_SLUG]

    def test_asyncpg_title_index(self):
        error = integrity_error(
            "<class 'asyncpg.exceptions.UniqueViolationError'>",
            UniqueViolation("uq_assignments_organization_title"),
        )
        assert kinds(AssignmentService._duplicate_error(error)) == [ViolationKind.DUPLICATE_TITLE]

    def test_message_without_cause_uses_first_line_only(self):
        error = integrity_error(
            'duplicate key value violates unique constraint "uq_assignments_organization_slug"\n'
            "DETAIL:  Key (organization_id, slug)=(0190a8e0, assignments.title) already exists."
        )
        assert kinds(AssignmentService._duplicate_error(error)) == [ViolationKind.DUPLICATE_SLUG]

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            (
                "UNIQUE constraint failed: assignments.organization_id, assignments.title",
                ViolationKind.DUPLICATE_TITLE,
            ),
            (
                "UNIQUE constraint failed: assignments.organization_id, assignments.slug",
                ViolationKind.DUPLICATE_SLUG,
            ),
        ],
    )
    def test_sqlite_column_wording(self, message, expected):
        assert kinds(AssignmentService._duplicate_error(integrity_error(message))) == [expected]

    @pytest.mark.parametrize(
        "error",
        [
            integrity_error(
                "duplicate key value violates unique constraint "
                '"assignment_invitations_key_key"',
                UniqueViolation("assignment_invitations_key_key"),
            ),
            integrity_error("UNIQUE constraint failed: assignment_invitations.key"),
            integrity_error("FOREIGN KEY constraint failed"),
            integrity_error(""),
        ],
    )
    def test_other_integrity_errors_are_not_duplicates(self, error):
        assert AssignmentService._duplicate_error(error) is None


async def test_unrelated_integrity_error_propagates():
    session = MagicMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock(side_effect=integrity_error("FOREIGN KEY constraint failed"))
    session.rollback = AsyncMock()
    pipeline = MagicMock()
    pipeline.validate = AsyncMock(return_value=ValidationResult().finish())
    service = AssignmentService(
        MagicMock(), MagicMock(), MagicMock(), MagicMock(), pipeline, session
    )

    with pytest.raises(IntegrityError, match="FOREIGN KEY"):
        await service.create_assignment(
            uuid4(), MagicMock(id=uuid4()), AssignmentCreate(title="Lab 1")
        )

    session.rollback.assert_awaited_once()
