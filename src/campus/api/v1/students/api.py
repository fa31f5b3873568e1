"""
Student API endpoints.

Create, read, update, delete and list students. Domain errors raised by
StudentService (not found, validation failed) are turned into RFC 7807
responses by the application's exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from campus.api.v1.students.request import StudentRequest
from campus.api.v1.students.response import StudentResponse
from campus.config import settings
from campus.core.logging import logger
from campus.di import StudentServiceDep
from campus.models.pagination import PageRequest, PageResponse, SortDirection

router = APIRouter()


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a student",
)
async def create_student(
    request: StudentRequest,
    service: StudentServiceDep,
) -> StudentResponse:
    """
    Create a student.

    Args:
        request: Student fields
        service: Student service (injected)

    Returns:
        The stored student with its generated id and timestamps
    """
    logger.info(f"Creating student: {request.name}")
    return await service.create(request)


@router.get(
    "",
    response_model=list[StudentResponse],
    summary="List all students",
)
async def list_students(service: StudentServiceDep) -> list[StudentResponse]:
    """List every student, unpaginated."""
    return await service.get_all()


@router.get(
    "/paginated",
    response_model=PageResponse[StudentResponse],
    summary="List students page by page",
    description="""
    List one page of students sorted by any student field.

    Requesting a page past the end returns an empty page with the usual
    metadata, not an error.
    """,
)
async def list_students_paginated(
    service: StudentServiceDep,
    page: Annotated[int, Query(ge=0, description="Zero-based page index")] = 0,
    size: Annotated[
        int, Query(ge=1, description="Page size")
    ] = settings.default_page_size,
    sort_by: Annotated[
        str, Query(alias="sortBy", description="Field to sort by")
    ] = settings.default_sort_by,
    sort_direction: Annotated[
        SortDirection, Query(alias="sortDirection", description="ASC or DESC")
    ] = SortDirection.DESC,
) -> PageResponse[StudentResponse]:
    """
    List one page of students.

    Returns:
        Page envelope with students and pagination metadata
    """
    page_request = PageRequest(
        page=page, size=size, sort_by=sort_by, sort_direction=sort_direction
    )
    return await service.get_all_with_pagination(page_request)


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Get a student",
)
async def get_student(student_id: str, service: StudentServiceDep) -> StudentResponse:
    """
    Get a student by id.

    Raises:
        NotFoundError: If the student does not exist (404)
    """
    return await service.get_by_id(student_id)


@router.put(
    "/{student_id}",
    response_model=StudentResponse,
    summary="Replace a student",
)
async def update_student(
    student_id: str,
    request: StudentRequest,
    service: StudentServiceDep,
) -> StudentResponse:
    """
    Replace every field of a student; id and createdAt are kept.

    Raises:
        NotFoundError: If the student does not exist (404)
    """
    return await service.update(student_id, request)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a student",
)
async def delete_student(student_id: str, service: StudentServiceDep) -> Response:
    """
    Delete a student.

    Raises:
        NotFoundError: If the student does not exist (404)
    """
    await service.delete(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
