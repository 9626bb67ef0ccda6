from src.classroom.schemas.assignment import (
    AssignmentCreate,
    AssignmentRead,
    AssignmentUpdate,
    ValidationErrorResponse,
    ViolationRead,
)

__all__ = [
    "AssignmentCreate",
    "AssignmentRead",
    "AssignmentUpdate",
    "ValidationErrorResponse",
    "ViolationRead",
]
