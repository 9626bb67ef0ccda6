"""Assignment schemas for API request/response.

Length, charset and reserved-word rules are deliberately absent here: the
validation pipeline owns them and reports them as field violations.
"""

from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.classroom.core.policy import ProvisioningStrategy
from src.classroom.core.violations import Violation, ViolationKind
from src.classroom.models import Assignment, AssignmentInvitation, Deadline


def to_naive_utc(value: datetime | None) -> datetime | None:
    """Deadlines are stored as naive UTC; offset-aware input is converted first."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class AssignmentCreate(BaseModel):
    """Schema for creating an assignment."""

    title: str
    slug: str | None = Field(
        default=None,
        json_schema_extra={
            "examples": ["lab-1", "final_project"],
            "description": "Derived from the title when omitted.",
        },
    )
    public_repo: bool = True
    starter_code_repo_id: int | None = Field(default=None, gt=0)
    template_repos_enabled: bool | None = None
    students_are_repo_admins: bool = False
    invitations_enabled: bool = True
    deadline_at: datetime | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return v.strip()

    @field_validator("slug")
    @classmethod
    def blank_slug_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("deadline_at")
    @classmethod
    def deadline_to_naive_utc(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class AssignmentUpdate(BaseModel):
    """Schema for updating an assignment. Only fields that are sent are applied."""

    title: str | None = None
    slug: str | None = None
    public_repo: bool | None = None
    starter_code_repo_id: int | None = Field(default=None, gt=0)
    template_repos_enabled: bool | None = None
    students_are_repo_admins: bool | None = None
    invitations_enabled: bool | None = None
    deadline_at: datetime | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None

    @field_validator("deadline_at")
    @classmethod
    def deadline_to_naive_utc(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class AssignmentRead(BaseModel):
    """Schema for reading an assignment, including its derived predicates."""

    id: UUID
    organization_id: UUID
    creator_id: UUID
    title: str
    slug: str
    external_id: str
    public_repo: bool
    is_private: bool
    starter_code_repo_id: int | None
    has_starter_code: bool
    template_repos_enabled: bool
    use_template_repos: bool
    use_importer: bool
    strategy: ProvisioningStrategy
    students_are_repo_admins: bool
    invitations_enabled: bool
    invitation_key: str | None = None
    deadline_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls,
        assignment: Assignment,
        invitation: AssignmentInvitation | None = None,
        deadline: Deadline | None = None,
    ) -> "AssignmentRead":
        return cls(
            id=assignment.id,
            organization_id=assignment.organization_id,
            creator_id=assignment.creator_id,
            title=assignment.title,
            slug=assignment.slug,
            external_id=assignment.to_param(),
            public_repo=assignment.public_repo,
            is_private=assignment.is_private,
            starter_code_repo_id=assignment.starter_code_repo_id,
            has_starter_code=assignment.has_starter_code,
            template_repos_enabled=assignment.template_repos_enabled,
            use_template_repos=assignment.use_template_repos,
            use_importer=assignment.use_importer,
            strategy=assignment.strategy,
            students_are_repo_admins=assignment.students_are_repo_admins,
            invitations_enabled=assignment.invitations_enabled,
            invitation_key=invitation.key if invitation else None,
            deadline_at=deadline.deadline_at if deadline else None,
            created_at=assignment.created_at,
            updated_at=assignment.updated_at,
        )


class ViolationRead(BaseModel):
    """One field-scoped validation failure."""

    field: str
    kind: ViolationKind
    message: str

    @classmethod
    def from_violation(cls, violation: Violation) -> "ViolationRead":
        return cls(field=violation.field, kind=violation.kind, message=violation.message)


class ValidationErrorResponse(BaseModel):
    """Body of a 422 returned when an assignment fails validation."""

    detail: str = "Validation failed"
    errors: list[ViolationRead]
    request_id: str | None = None
