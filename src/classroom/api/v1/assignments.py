"""Assignment endpoints scoped to an organization.

Validation failures surface as 422 with one entry per violation; see
core.exceptions for the response body.
"""

from fastapi import APIRouter, HTTPException, status

from src.classroom.api.dependencies import (
    AssignmentServiceDep,
    CurrentOrganization,
    CurrentUser,
)
from src.classroom.core.logging import bind_assignment_context
from src.classroom.models import Assignment, Organization
from src.classroom.schemas import (
    AssignmentCreate,
    AssignmentRead,
    AssignmentUpdate,
    ValidationErrorResponse,
)
from src.classroom.services import AssignmentService

router = APIRouter(prefix="/organizations/{organization_id}/assignments", tags=["assignments"])


async def _get_or_404(
    service: AssignmentService, organization: Organization, slug: str
) -> Assignment:
    assignment = await service.get_by_slug(organization.id, slug)
    if assignment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Assignment '{slug}' not found",
        )
    bind_assignment_context(assignment.id, assignment.slug)
    return assignment


async def _read(service: AssignmentService, assignment: Assignment) -> AssignmentRead:
    return AssignmentRead.from_entity(
        assignment,
        invitation=await service.get_invitation(assignment),
        deadline=await service.get_deadline(assignment),
    )


@router.post(
    "",
    response_model=AssignmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create assignment",
    responses={
        201: {"description": "Assignment created"},
        422: {"model": ValidationErrorResponse, "description": "Assignment is invalid"},
    },
)
async def create_assignment(
    request: AssignmentCreate,
    organization: CurrentOrganization,
    user: CurrentUser,
    service: AssignmentServiceDep,
) -> AssignmentRead:
    """Create an assignment; the current user becomes its creator."""
    assignment = await service.create_assignment(organization.id, user, request)
    return await _read(service, assignment)


@router.get(
    "/{slug}",
    response_model=AssignmentRead,
    summary="Get assignment",
    responses={
        200: {"description": "Assignment details"},
        404: {"description": "Assignment not found"},
    },
)
async def get_assignment(
    slug: str,
    organization: CurrentOrganization,
    service: AssignmentServiceDep,
) -> AssignmentRead:
    assignment = await _get_or_404(service, organization, slug)
    return await _read(service, assignment)


@router.patch(
    "/{slug}",
    response_model=AssignmentRead,
    summary="Update assignment",
    responses={
        200: {"description": "Assignment updated"},
        404: {"description": "Assignment not found"},
        422: {"model": ValidationErrorResponse, "description": "Assignment is invalid"},
    },
)
async def update_assignment(
    slug: str,
    request: AssignmentUpdate,
    organization: CurrentOrganization,
    service: AssignmentServiceDep,
) -> AssignmentRead:
    """Update an assignment. The full validation pipeline runs again."""
    assignment = await _get_or_404(service, organization, slug)
    assignment = await service.update_assignment(assignment, request)
    return await _read(service, assignment)


@router.delete(
    "/{slug}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete assignment",
    responses={
        204: {"description": "Assignment deleted"},
        404: {"description": "Assignment not found"},
    },
)
async def delete_assignment(
    slug: str,
    organization: CurrentOrganization,
    service: AssignmentServiceDep,
) -> None:
    """Soft-delete an assignment."""
    assignment = await _get_or_404(service, organization, slug)
    await service.soft_delete_assignment(assignment)
