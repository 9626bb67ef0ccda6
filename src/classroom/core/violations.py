"""Validation violations and the aggregated result of a validation run."""

from dataclasses import dataclass, field
from enum import Enum


class ViolationKind(str, Enum):
    """Why a field failed validation. Every kind is correctable by the caller."""

    BLANK_FIELD = "blank_field"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"
    RESERVED_WORD = "reserved_word"
    DUPLICATE_TITLE = "duplicate_title"
    DUPLICATE_SLUG = "duplicate_slug"
    MISSING_REQUIRED_ASSOCIATION = "missing_required_association"
    STARTER_REPOSITORY_EMPTY = "starter_repository_empty"
    STARTER_REPOSITORY_NOT_TEMPLATE = "starter_repository_not_template"
    REMOTE_CHECK_FAILED = "remote_check_failed"


@dataclass(frozen=True, slots=True)
class Violation:
    """A single field-scoped validation failure."""

    field: str
    kind: ViolationKind
    message: str

    @property
    def full_message(self) -> str:
        """Message prefixed with a humanized field name, e.g. 'Slug is too long'."""
        return f"{self.field.replace('_', ' ').capitalize()} {self.message}"


class PipelineState(str, Enum):
    """Lifecycle of one validation run: PENDING -> VALIDATING -> VALID | INVALID."""

    PENDING = "pending"
    VALIDATING = "validating"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(slots=True)
class ValidationResult:
    """Ordered violations collected by one pipeline run."""

    violations: list[Violation] = field(default_factory=list)
    state: PipelineState = PipelineState.PENDING

    def finish(self) -> "ValidationResult":
        """Settle the run into VALID or INVALID."""
        self.state = PipelineState.VALID if self.is_valid else PipelineState.INVALID
        return self

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def add(self, violation: Violation) -> None:
        self.violations.append(violation)

    def extend(self, violations: list[Violation]) -> None:
        self.violations.extend(violations)

    def for_field(self, field_name: str) -> list[Violation]:
        """Violations attributed to one field, in pipeline order."""
        return [v for v in self.violations if v.field == field_name]

    def kinds(self) -> list[ViolationKind]:
        return [v.kind for v in self.violations]
