"""
Infrastructure factory for provider selection.

Selects appropriate repository implementations based on configuration:
- local: JSON files for development
- aws: DynamoDB (PynamoDB)

Usage:
    from campus.infrastructure import InfrastructureFactory
    from campus.config import get_settings

    # Option 1: From settings
    factory = InfrastructureFactory.from_settings(get_settings())

    # Option 2: Manual configuration
    factory = InfrastructureFactory(provider="local", base_dir="/tmp/campus")

    # Get repositories
    student_repo = factory.get_student_repository()
    course_repo = factory.get_course_repository()
"""

from typing import TYPE_CHECKING, Literal

from loguru import logger

from campus.infrastructure.repositories import CourseRepository, StudentRepository

if TYPE_CHECKING:
    from campus.config import Settings

InfrastructureProvider = Literal["local", "aws"]

DEFAULT_LOCAL_BASE_DIR = "./.local_infrastructure"


class InfrastructureFactory:
    """
    Factory for creating repository instances.

    Provides dependency injection for cloud-agnostic operations.
    """

    def __init__(self, provider: InfrastructureProvider | None = None, **config):
        """
        Initialize infrastructure factory.

        Args:
            provider: Infrastructure provider ("local", "aws").
                     If None, uses "local" as default.
            **config: Provider-specific configuration options
                     (base_dir, aws_region, students_table, courses_table,
                     dynamodb_host, auto_create_resources)

        Example:
            factory = InfrastructureFactory(
                provider="aws",
                aws_region="us-west-2",
                students_table="students",
                courses_table="courses",
            )
        """
        if provider is None:
            provider = "local"

        self.provider = provider
        self.config = config

        logger.debug(f"Initialized InfrastructureFactory with provider: {provider}")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "InfrastructureFactory":
        """
        Create factory from Settings object.

        Args:
            settings: Application settings from config.py

        Returns:
            InfrastructureFactory configured from settings
        """
        config = {
            "base_dir": settings.infrastructure_base_dir,
            "aws_region": settings.aws_region,
            "students_table": settings.aws_dynamodb_students_table,
            "courses_table": settings.aws_dynamodb_courses_table,
            "dynamodb_host": settings.aws_dynamodb_host,
            "auto_create_resources": settings.auto_create_resources,
        }

        return cls(provider=settings.infrastructure_provider, **config)

    def get_student_repository(self) -> StudentRepository:
        """
        Get student repository for configured provider.

        Returns:
            StudentRepository implementation

        Raises:
            ValueError: If provider is not supported
        """
        if self.provider == "local":
            from campus.infrastructure.implementations.local import (
                LocalStudentRepository,
            )

            base_dir = self.config.get("base_dir", DEFAULT_LOCAL_BASE_DIR)
            return LocalStudentRepository(base_dir=base_dir)

        elif self.provider == "aws":
            from campus.infrastructure.implementations.aws import (
                AWSStudentRepository,
            )

            return AWSStudentRepository(
                table_name=self.config.get("students_table", "campus-students"),
                region_name=self.config.get("aws_region", "eu-west-1"),
                host=self.config.get("dynamodb_host"),
                auto_create_table=self.config.get("auto_create_resources", False),
            )

        else:
            raise ValueError(f"Unsupported provider: {self.provider}")

    def get_course_repository(self) -> CourseRepository:
        """
        Get course repository for configured provider.

        Returns:
            CourseRepository implementation

        Raises:
            ValueError: If provider is not supported
        """
        if self.provider == "local":
            from campus.infrastructure.implementations.local import (
                LocalCourseRepository,
            )

            base_dir = self.config.get("base_dir", DEFAULT_LOCAL_BASE_DIR)
            return LocalCourseRepository(base_dir=base_dir)

        elif self.provider == "aws":
            from campus.infrastructure.implementations.aws import AWSCourseRepository

            return AWSCourseRepository(
                table_name=self.config.get("courses_table", "campus-courses"),
                region_name=self.config.get("aws_region", "eu-west-1"),
                host=self.config.get("dynamodb_host"),
                auto_create_table=self.config.get("auto_create_resources", False),
            )

        else:
            raise ValueError(f"Unsupported provider: {self.provider}")
