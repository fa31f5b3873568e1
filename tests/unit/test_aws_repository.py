"""
Unit tests for AWS DynamoDB repository implementations.

PynamoDB model methods are patched, so no AWS credentials or DynamoDB
Local instance are needed.
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import patch

import pytest
from pynamodb.exceptions import DoesNotExist, PutError, ScanError

from campus.infrastructure.implementations.aws import (
    AWSCourseRepository,
    AWSStudentRepository,
)
from campus.infrastructure.implementations.aws.course_repository import CourseModel
from campus.infrastructure.implementations.aws.student_repository import StudentModel
from campus.infrastructure.repositories import Course, Student
from campus.models.pagination import PageRequest, SortDirection

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def student_repo():
    """Create an AWS student repository pointed at a test table."""
    return AWSStudentRepository(table_name="test-students", region_name="us-east-1")


@pytest.fixture
def course_repo():
    """Create an AWS course repository pointed at a test table."""
    return AWSCourseRepository(table_name="test-courses", region_name="us-east-1")


def student_model(record_id: str, name: str) -> StudentModel:
    return StudentModel(
        record_id,
        title="Mr",
        name=name,
        address="1 Rd",
        city="X",
        course="CS101",
        created_at=NOW,
        updated_at=NOW,
    )


# ===========================
# Construction
# ===========================


class TestConstruction:
    """Tests for repository configuration."""

    def test_configures_model_meta(self):
        """Test table name, region and host are applied to the model."""
        AWSStudentRepository(
            table_name="students-x",
            region_name="eu-central-1",
            host="http://localhost:8000",
        )

        assert StudentModel.Meta.table_name == "students-x"
        assert StudentModel.Meta.region == "eu-central-1"
        assert StudentModel.Meta.host == "http://localhost:8000"

    def test_empty_table_name_raises(self):
        """Test empty table name is rejected."""
        with pytest.raises(ValueError, match="table_name"):
            AWSStudentRepository(table_name="")

    def test_empty_region_raises(self):
        """Test empty region is rejected."""
        with pytest.raises(ValueError, match="region_name"):
            AWSStudentRepository(table_name="t", region_name="")

    def test_auto_create_creates_missing_table(self):
        """Test the table is created when auto_create_table is set."""
        with (
            patch.object(StudentModel, "exists", return_value=False),
            patch.object(StudentModel, "create_table") as mock_create,
        ):
            AWSStudentRepository(table_name="t", auto_create_table=True)

        mock_create.assert_called_once_with(
            read_capacity_units=5, write_capacity_units=5, wait=True
        )

    def test_auto_create_skips_existing_table(self):
        """Test an existing table is left alone."""
        with (
            patch.object(StudentModel, "exists", return_value=True),
            patch.object(StudentModel, "create_table") as mock_create,
        ):
            AWSStudentRepository(table_name="t", auto_create_table=True)

        mock_create.assert_not_called()


# ===========================
# Student Repository
# ===========================


class TestAWSStudentRepository:
    """Tests for the DynamoDB student repository."""

    @pytest.mark.asyncio
    async def test_save_stamps_and_writes(self, student_repo):
        """Test saving a new record assigns id and timestamps."""
        student = Student(title="Mr", name="Ann", address="1 Rd", city="X", course="CS101")

        with patch.object(StudentModel, "save") as mock_save:
            record_id = await student_repo.save(student)

        mock_save.assert_called_once()
        assert record_id == student.id
        assert student.created_at == student.updated_at

    @pytest.mark.asyncio
    async def test_save_error_propagates(self, student_repo):
        """Test store failures on save are re-raised."""
        student = Student(title="Mr", name="Ann", address="1 Rd", city="X", course="CS101")

        with patch.object(StudentModel, "save", side_effect=PutError("boom")):
            with pytest.raises(PutError):
                await student_repo.save(student)

    @pytest.mark.asyncio
    async def test_find_by_id(self, student_repo):
        """Test retrieving a record by id."""
        with patch.object(StudentModel, "get", return_value=student_model("s1", "Ann")):
            record = await student_repo.find_by_id("s1")

        assert record.id == "s1"
        assert record.name == "Ann"
        assert record.created_at == NOW

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, student_repo):
        """Test DoesNotExist maps to None."""
        with patch.object(StudentModel, "get", side_effect=DoesNotExist()):
            assert await student_repo.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_find_all(self, student_repo):
        """Test scanning every record."""
        models = [student_model("s1", "Ann"), student_model("s2", "Bob")]

        with patch.object(StudentModel, "scan", return_value=iter(models)):
            records = await student_repo.find_all()

        assert [r.id for r in records] == ["s1", "s2"]

    @pytest.mark.asyncio
    async def test_find_all_error_propagates(self, student_repo):
        """Test scan failures are re-raised."""
        with patch.object(StudentModel, "scan", side_effect=ScanError("boom")):
            with pytest.raises(ScanError):
                await student_repo.find_all()

    @pytest.mark.asyncio
    async def test_find_all_with_pagination_sorts_in_memory(self, student_repo):
        """Test the scan result is sorted and sliced."""
        models = [
            student_model("s1", "Cid"),
            student_model("s2", "Ann"),
            student_model("s3", "Bob"),
        ]
        request = PageRequest(page=0, size=2, sort_by="name", sort_direction=SortDirection.ASC)

        with patch.object(StudentModel, "scan", return_value=iter(models)):
            page = await student_repo.find_all_with_pagination(request)

        assert [r.name for r in page] == ["Ann", "Bob"]

    @pytest.mark.asyncio
    async def test_count_scans_keys_only(self, student_repo):
        """Test counting projects only the key attribute."""
        models = [student_model("s1", "Ann"), student_model("s2", "Bob")]

        with patch.object(StudentModel, "scan", return_value=iter(models)) as mock_scan:
            total = await student_repo.count()

        assert total == 2
        mock_scan.assert_called_once_with(attributes_to_get=["id"])

    @pytest.mark.asyncio
    async def test_delete_by_id(self, student_repo):
        """Test deleting a record by key."""
        with patch.object(StudentModel, "delete") as mock_delete:
            await student_repo.delete_by_id("s1")

        mock_delete.assert_called_once()

    @pytest.mark.asyncio
    async def test_exists_by_id(self, student_repo):
        """Test existence check uses get."""
        with patch.object(StudentModel, "get", return_value=student_model("s1", "Ann")):
            assert await student_repo.exists_by_id("s1") is True

        with patch.object(StudentModel, "get", side_effect=DoesNotExist()):
            assert await student_repo.exists_by_id("s1") is False

    @pytest.mark.asyncio
    async def test_find_by_field_passes_condition(self, student_repo):
        """Test field lookups scan with a filter condition."""
        with patch.object(
            StudentModel, "scan", return_value=iter([student_model("s1", "Ann")])
        ) as mock_scan:
            records = await student_repo.find_by_field("city", "X")

        assert [r.id for r in records] == ["s1"]
        assert len(mock_scan.call_args.args) == 1

    @pytest.mark.asyncio
    async def test_find_by_field_unknown_field_raises(self, student_repo):
        """Test filtering by a field the record does not have."""
        with pytest.raises(ValueError, match="Unknown field"):
            await student_repo.find_by_field("salary", 1)


# ===========================
# Course Repository
# ===========================


class TestAWSCourseRepository:
    """Tests for the DynamoDB course repository."""

    def test_fee_round_trips_as_string(self, course_repo):
        """Test the fee is stored as text and read back with its scale."""
        course = Course(
            name="Algebra",
            fee=Decimal("150.00"),
            lecturer_id="L1",
            lecturer_name="Dr. Noether",
        )
        course.id = "c1"
        course.created_at = course.updated_at = NOW

        model = course_repo._record_to_model(course)
        restored = course_repo._model_to_record(model)

        assert model.fee == "150.00"
        assert str(restored.fee) == "150.00"

    @pytest.mark.asyncio
    async def test_find_by_lecturer_id(self, course_repo):
        """Test lecturer lookup goes through a filtered scan."""
        model = CourseModel(
            "c1",
            name="Algebra",
            fee="10",
            lecturer_id="L1",
            lecturer_name="Dr. Noether",
            created_at=NOW,
            updated_at=NOW,
        )

        with patch.object(CourseModel, "scan", return_value=iter([model])):
            courses = await course_repo.find_by_lecturer_id("L1")

        assert [c.id for c in courses] == ["c1"]
        assert courses[0].fee == Decimal("10")
