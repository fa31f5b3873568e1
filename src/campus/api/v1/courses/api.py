"""
Course API endpoints.

Create, read, update, delete and list courses, plus lookups by lecturer
and by name.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from campus.api.v1.courses.request import CourseRequest
from campus.api.v1.courses.response import CourseResponse
from campus.config import settings
from campus.di import CourseServiceDep
from campus.models.pagination import PageRequest, PageResponse, SortDirection

router = APIRouter()


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a course",
)
async def create_course(
    request: CourseRequest,
    service: CourseServiceDep,
) -> CourseResponse:
    """
    Create a course.

    Raises:
        ValidationFailedError: If a field is blank or the fee is not a
            non-negative decimal (400)
    """
    return await service.create(request)


@router.get(
    "",
    response_model=list[CourseResponse],
    summary="List all courses",
)
async def list_courses(service: CourseServiceDep) -> list[CourseResponse]:
    """List every course, unpaginated."""
    return await service.get_all()


@router.get(
    "/paginated",
    response_model=PageResponse[CourseResponse],
    summary="List courses page by page",
)
async def list_courses_paginated(
    service: CourseServiceDep,
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
) -> PageResponse[CourseResponse]:
    """List one page of courses."""
    page_request = PageRequest(
        page=page, size=size, sort_by=sort_by, sort_direction=sort_direction
    )
    return await service.get_all_with_pagination(page_request)


@router.get(
    "/lecturer/{lecturer_id}",
    response_model=list[CourseResponse],
    summary="List courses by lecturer",
)
async def list_courses_by_lecturer(
    lecturer_id: str, service: CourseServiceDep
) -> list[CourseResponse]:
    """List courses taught by a lecturer; empty if there are none."""
    return await service.get_by_lecturer(lecturer_id)


@router.get(
    "/search",
    response_model=list[CourseResponse],
    summary="Find courses by name",
)
async def search_courses(
    service: CourseServiceDep,
    name: Annotated[str, Query(min_length=1, description="Exact course name")],
) -> list[CourseResponse]:
    """List courses whose name matches exactly."""
    return await service.get_by_name(name)


@router.get(
    "/{course_id}",
    response_model=CourseResponse,
    summary="Get a course",
)
async def get_course(course_id: str, service: CourseServiceDep) -> CourseResponse:
    """Get a course by id (404 if absent)."""
    return await service.get_by_id(course_id)


@router.put(
    "/{course_id}",
    response_model=CourseResponse,
    summary="Replace a course",
)
async def update_course(
    course_id: str,
    request: CourseRequest,
    service: CourseServiceDep,
) -> CourseResponse:
    """Replace every field of a course; id and createdAt are kept."""
    return await service.update(course_id, request)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a course",
)
async def delete_course(course_id: str, service: CourseServiceDep) -> Response:
    """Delete a course (404 if absent)."""
    await service.delete(course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
