"""
Application configuration and environment variables.

This module unifies configuration using pydantic-settings.
Variables can come from:
1. .env file
2. System environment variables (have priority)
3. Default values

Naming convention:
- In Python code: snake_case (aws_dynamodb_students_table)
- In .env or ENV vars: UPPER_CASE (AWS_DYNAMODB_STUDENTS_TABLE)
- Pydantic automatically converts between both
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified application configuration.

    All variables can be defined in:
    - .env file: VARIABLE_NAME=value
    - Environment variables: export VARIABLE_NAME=value

    Example:
        # In .env or as environment variable:
        PROJECT_NAME=Campus Backend
        INFRASTRUCTURE_PROVIDER=aws
        LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================================================
    # PROJECT SETTINGS
    # ============================================================================
    project_name: str = Field(default="Campus Backend", description="Project name")
    project_description: str = Field(
        default="Student and course management API",
        description="Project description",
    )
    project_version: str = Field(default="1.0.0", description="Project version")

    # ============================================================================
    # SERVER SETTINGS
    # ============================================================================
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")
    enable_docs: bool = Field(
        default=False, description="Enable API documentation (Swagger/ReDoc)"
    )

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | trace_id={extra[trace_id]} | {name}:{function}:{line} - {message}",  # noqa: E501
        description="Log format",
    )
    logger_enqueue: bool = Field(
        default=False, description="Enqueue logs using multiprocessing"
    )

    # ============================================================================
    # CORS SETTINGS
    # ============================================================================
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Allowed origins for CORS (comma-separated)",
    )
    cors_allowed_methods: str = Field(
        default="GET,POST,PUT,DELETE,OPTIONS",
        description="Allowed HTTP methods for CORS",
    )
    cors_allowed_headers: str = Field(
        default="Content-Type,Authorization",
        description="Allowed headers for CORS",
    )

    # ============================================================================
    # INFRASTRUCTURE SETTINGS (document store)
    # ============================================================================
    infrastructure_provider: str = Field(
        default="local",
        description="Infrastructure provider (local, aws)",
    )
    infrastructure_base_dir: str = Field(
        default="./.local_infrastructure",
        description="Base directory for the local JSON document store",
    )

    # AWS Infrastructure Configuration
    aws_region: str = Field(default="eu-west-1", description="AWS region")
    aws_dynamodb_students_table: str = Field(
        default="campus-students",
        description="DynamoDB table name for student records",
    )
    aws_dynamodb_courses_table: str = Field(
        default="campus-courses",
        description="DynamoDB table name for course records",
    )
    aws_dynamodb_host: str | None = Field(
        default=None,
        description="Custom DynamoDB endpoint (e.g. http://localhost:8000 for DynamoDB Local)",
    )
    auto_create_resources: bool = Field(
        default=False,
        description="Auto-create AWS resources (DynamoDB tables) if missing",
    )

    # ============================================================================
    # PAGINATION SETTINGS
    # ============================================================================
    default_page_size: int = Field(
        default=10, ge=1, description="Page size used when none is requested"
    )
    default_sort_by: str = Field(
        default="createdAt", description="Sort field used when none is requested"
    )

    # ============================================================================
    # HELPER METHODS
    # ============================================================================

    def get_allowed_origins(self) -> list[str]:
        """
        Get list of allowed origins for CORS.

        Returns:
            list[str]: List of allowed origin URLs.
        """
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    def get_cors_allowed_methods(self) -> list[str]:
        """
        Get list of allowed HTTP methods for CORS.

        Returns:
            list[str]: List of allowed HTTP methods. Returns ["*"] if all methods are allowed.
        """
        if self.cors_allowed_methods == "*":
            return ["*"]
        return [method.strip() for method in self.cors_allowed_methods.split(",")]

    def get_cors_allowed_headers(self) -> list[str]:
        """
        Get list of allowed headers for CORS.

        Returns:
            list[str]: List of allowed headers. Returns ["*"] if all headers are allowed.
        """
        if self.cors_allowed_headers == "*":
            return ["*"]
        return [header.strip() for header in self.cors_allowed_headers.split(",")]


# ============================================================================
# SINGLETON PATTERN - Global settings instance
# ============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings (LRU cached).

    This function is cached, so the .env file is only read once.
    To refresh the configuration, clear the cache:
        get_settings.cache_clear()

    Usage:
        # In FastAPI endpoints (dependency injection):
        def my_endpoint(settings: Settings = Depends(get_settings)):
            print(settings.project_name)

        # In normal code (outside FastAPI):
        from campus.config import get_settings
        settings = get_settings()

    Returns:
        Settings: Application configuration instance.
    """
    return Settings()


# Global instance for use outside FastAPI
settings = get_settings()
