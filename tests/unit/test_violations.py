"""Tests for violations and validation results."""

import pytest

from src.classroom.core.violations import (
    PipelineState,
    ValidationResult,
    Violation,
    ViolationKind,
)

pytestmark = pytest.mark.unit


def test_full_message_humanizes_field():
    violation = Violation("starter_code_repository", ViolationKind.STARTER_REPOSITORY_EMPTY, "x")
    assert violation.full_message == "Starter code repository x"


def test_violation_is_immutable():
    violation = Violation("slug", ViolationKind.BLANK_FIELD, "can't be blank")
    with pytest.raises(AttributeError):
        violation.field = "title"  # type: ignore[misc]


class TestValidationResult:
    """Tests for ValidationResult state and lookups."""

    def test_new_result_is_pending(self):
        assert ValidationResult().state is PipelineState.PENDING

    def test_finish_without_violations_is_valid(self):
        result = ValidationResult(state=PipelineState.VALIDATING).finish()

        assert result.is_valid
        assert result.state is PipelineState.VALID

    def test_finish_with_violations_is_invalid(self):
        result = ValidationResult(state=PipelineState.VALIDATING)
        result.add(Violation("title", ViolationKind.TOO_LONG, "is too long"))
        result.finish()

        assert not result.is_valid
        assert result.state is PipelineState.INVALID

    def test_order_is_preserved(self):
        result = ValidationResult()
        result.extend(
            [
                Violation("title", ViolationKind.TOO_LONG, "a"),
                Violation("slug", ViolationKind.INVALID_FORMAT, "b"),
            ]
        )
        result.add(Violation("title", ViolationKind.DUPLICATE_TITLE, "c"))

        assert result.kinds() == [
            ViolationKind.TOO_LONG,
            ViolationKind.INVALID_FORMAT,
            ViolationKind.DUPLICATE_TITLE,
        ]
        assert [v.message for v in result.for_field("title")] == ["a", "c"]
        assert result.for_field("creator") == []
