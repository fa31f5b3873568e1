"""
Unit tests for StudentService.

Runs the service against a local repository in a temporary directory,
and against a mocked repository where failures need to be injected.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from campus.api.v1.students.request import StudentRequest
from campus.api.v1.students.services import StudentService
from campus.domain.exceptions import NotFoundError, ValidationFailedError
from campus.infrastructure.implementations.local import LocalStudentRepository
from campus.infrastructure.repositories import Student, StudentRepository
from campus.models.pagination import PageRequest, SortDirection


@pytest.fixture
def service(temp_dir):
    """Create a student service backed by a local repository."""
    return StudentService(LocalStudentRepository(base_dir=str(temp_dir)))


def make_request(**overrides) -> StudentRequest:
    data = {
        "title": "Mr",
        "name": "Ann",
        "address": "1 Rd",
        "city": "X",
        "course": "CS101",
    }
    data.update(overrides)
    return StudentRequest(**data)


# ===========================
# Create
# ===========================


@pytest.mark.asyncio
async def test_create_returns_stored_student(service):
    """Test creating a student."""
    response = await service.create(make_request())

    assert response.id
    assert response.name == "Ann"
    assert response.course == "CS101"
    assert response.created_at == response.updated_at


@pytest.mark.asyncio
async def test_create_then_get_returns_same_fields(service):
    """Test a created student can be read back unchanged."""
    created = await service.create(make_request())

    fetched = await service.get_by_id(created.id)

    assert fetched == created


@pytest.mark.asyncio
async def test_create_blank_fields_reports_each(service):
    """Test every blank field is reported and nothing is stored."""
    with pytest.raises(ValidationFailedError) as exc_info:
        await service.create(make_request(name="   ", city=""))

    assert [error.field for error in exc_info.value.errors] == ["name", "city"]
    assert await service.get_all() == []


@pytest.mark.asyncio
async def test_two_creates_get_distinct_ids(service):
    """Test ids are unique per record."""
    first = await service.create(make_request())
    second = await service.create(make_request())

    assert first.id != second.id


# ===========================
# Read
# ===========================


@pytest.mark.asyncio
async def test_get_by_id_missing_raises_not_found(service):
    """Test reading an unknown id."""
    with pytest.raises(NotFoundError) as exc_info:
        await service.get_by_id("missing")

    assert str(exc_info.value) == "Student not found with id: missing"


@pytest.mark.asyncio
async def test_get_all(service):
    """Test listing every student."""
    await service.create(make_request(name="Ann"))
    await service.create(make_request(name="Bob"))

    students = await service.get_all()

    assert sorted(s.name for s in students) == ["Ann", "Bob"]


# ===========================
# Update
# ===========================


@pytest.mark.asyncio
async def test_update_replaces_fields_and_keeps_created_at(service):
    """Test a full replace keeps id and createdAt."""
    created = await service.create(make_request())

    updated = await service.update(created.id, make_request(city="Y", title="Dr"))

    assert updated.id == created.id
    assert updated.city == "Y"
    assert updated.title == "Dr"
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    assert len(await service.get_all()) == 1


@pytest.mark.asyncio
async def test_update_missing_raises_not_found(service):
    """Test updating an unknown id does not create it."""
    with pytest.raises(NotFoundError):
        await service.update("missing", make_request())

    assert await service.get_all() == []


@pytest.mark.asyncio
async def test_update_blank_field_leaves_record_unchanged(service):
    """Test a rejected update writes nothing."""
    created = await service.create(make_request())

    with pytest.raises(ValidationFailedError):
        await service.update(created.id, make_request(address=" "))

    assert await service.get_by_id(created.id) == created


# ===========================
# Delete
# ===========================


@pytest.mark.asyncio
async def test_delete(service):
    """Test deleting a student."""
    created = await service.create(make_request())

    await service.delete(created.id)

    with pytest.raises(NotFoundError):
        await service.get_by_id(created.id)


@pytest.mark.asyncio
async def test_delete_missing_raises_not_found(service):
    """Test deleting an unknown id."""
    with pytest.raises(NotFoundError):
        await service.delete("missing")


# ===========================
# Pagination
# ===========================


@pytest.mark.asyncio
async def test_pagination_envelope(service):
    """Test 25 students at page size 10."""
    for index in range(25):
        await service.create(make_request(name=f"S{index:02d}"))

    first = await service.get_all_with_pagination(
        PageRequest(page=0, size=10, sort_by="name", sort_direction=SortDirection.ASC)
    )
    last = await service.get_all_with_pagination(
        PageRequest(page=2, size=10, sort_by="name", sort_direction=SortDirection.ASC)
    )

    assert [s.name for s in first.content] == [f"S{i:02d}" for i in range(10)]
    assert first.total_elements == 25
    assert first.total_pages == 3
    assert first.has_next is True
    assert len(last.content) == 5
    assert last.last is True
    assert last.has_previous is True


@pytest.mark.asyncio
async def test_pagination_empty_collection(service):
    """Test paginating an empty collection."""
    page = await service.get_all_with_pagination(PageRequest())

    assert page.content == []
    assert page.total_pages == 0
    assert page.first is True
    assert page.last is True


@pytest.mark.asyncio
async def test_pagination_unknown_sort_field_raises(service):
    """Test sortBy must name a student field."""
    with pytest.raises(ValidationFailedError) as exc_info:
        await service.get_all_with_pagination(PageRequest(sort_by="salary"))

    assert exc_info.value.errors[0].field == "sortBy"
    assert exc_info.value.errors[0].location == "query"


@pytest.mark.asyncio
async def test_pagination_count_failure_propagates():
    """Test a failing count fails the whole listing."""
    repository = MagicMock(spec=StudentRepository)
    repository.record_type = Student
    repository.find_all_with_pagination = AsyncMock(return_value=[])
    repository.count = AsyncMock(side_effect=RuntimeError("store unavailable"))

    service = StudentService(repository)

    with pytest.raises(RuntimeError, match="store unavailable"):
        await service.get_all_with_pagination(PageRequest())


@pytest.mark.asyncio
async def test_pagination_slice_failure_propagates():
    """Test a failing page read fails the whole listing."""
    repository = MagicMock(spec=StudentRepository)
    repository.record_type = Student
    repository.find_all_with_pagination = AsyncMock(
        side_effect=RuntimeError("store unavailable")
    )
    repository.count = AsyncMock(return_value=3)

    service = StudentService(repository)

    with pytest.raises(RuntimeError, match="store unavailable"):
        await service.get_all_with_pagination(PageRequest())


@pytest.mark.asyncio
async def test_pagination_reads_overlap():
    """Test the page read and the count read run at the same time."""
    events = []

    async def timed_read(name, result):
        events.append(f"{name}-start")
        await asyncio.sleep(0.01)
        events.append(f"{name}-end")
        return result

    async def read_slice(page_request):
        return await timed_read("slice", [])

    async def read_count():
        return await timed_read("count", 0)

    repository = MagicMock(spec=StudentRepository)
    repository.record_type = Student
    repository.find_all_with_pagination = AsyncMock(side_effect=read_slice)
    repository.count = AsyncMock(side_effect=read_count)

    page = await StudentService(repository).get_all_with_pagination(PageRequest())

    assert page.total_elements == 0
    assert events.index("count-start") < events.index("slice-end")
    assert events.index("slice-start") < events.index("count-end")


@pytest.mark.asyncio
async def test_pagination_failure_cancels_other_read():
    """Test a failing page read cancels the pending count before raising."""
    events = []

    async def slow_count():
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            events.append("count-cancelled")
            raise
        return 0

    async def failing_slice(page_request):
        await asyncio.sleep(0)
        raise RuntimeError("store unavailable")

    repository = MagicMock(spec=StudentRepository)
    repository.record_type = Student
    repository.find_all_with_pagination = AsyncMock(side_effect=failing_slice)
    repository.count = AsyncMock(side_effect=slow_count)

    with pytest.raises(RuntimeError, match="store unavailable"):
        await StudentService(repository).get_all_with_pagination(PageRequest())

    assert events == ["count-cancelled"]


@pytest.mark.asyncio
async def test_pagination_both_reads_failing_raises_one_error():
    """Test two failing reads surface a single store error."""
    repository = MagicMock(spec=StudentRepository)
    repository.record_type = Student
    repository.find_all_with_pagination = AsyncMock(
        side_effect=ConnectionError("scan failed")
    )
    repository.count = AsyncMock(side_effect=ConnectionError("count failed"))

    with pytest.raises(ConnectionError, match="scan failed|count failed"):
        await StudentService(repository).get_all_with_pagination(PageRequest())


@pytest.mark.asyncio
async def test_store_failure_on_create_propagates():
    """Test store errors surface unchanged from create."""
    repository = MagicMock(spec=StudentRepository)
    repository.save = AsyncMock(side_effect=OSError("disk full"))

    service = StudentService(repository)

    with pytest.raises(OSError, match="disk full"):
        await service.create(make_request())
