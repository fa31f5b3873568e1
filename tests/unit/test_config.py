"""Unit tests for Settings helper methods and defaults."""

from campus.config import Settings, get_settings


def test_default_pagination_settings(monkeypatch):
    """Test default page size and sort field."""
    monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
    monkeypatch.delenv("DEFAULT_SORT_BY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.default_page_size == 10
    assert settings.default_sort_by == "createdAt"


def test_environment_overrides(monkeypatch):
    """Test environment variables take priority over defaults."""
    monkeypatch.setenv("INFRASTRUCTURE_PROVIDER", "aws")
    monkeypatch.setenv("AWS_DYNAMODB_COURSES_TABLE", "courses-prod")

    settings = Settings(_env_file=None)

    assert settings.infrastructure_provider == "aws"
    assert settings.aws_dynamodb_courses_table == "courses-prod"


def test_get_allowed_origins():
    """Test origin list splitting and trimming."""
    settings = Settings(allowed_origins="http://a.test, http://b.test")

    assert settings.get_allowed_origins() == ["http://a.test", "http://b.test"]


def test_get_cors_allowed_methods():
    """Test method list and wildcard."""
    assert Settings(cors_allowed_methods="GET, PUT").get_cors_allowed_methods() == [
        "GET",
        "PUT",
    ]
    assert Settings(cors_allowed_methods="*").get_cors_allowed_methods() == ["*"]


def test_default_cors_methods_include_put_and_delete():
    """Test the default CORS methods cover every API verb."""
    methods = Settings(_env_file=None).get_cors_allowed_methods()

    assert {"GET", "POST", "PUT", "DELETE"} <= set(methods)


def test_get_cors_allowed_headers():
    """Test header list and wildcard."""
    assert Settings(cors_allowed_headers="*").get_cors_allowed_headers() == ["*"]
    assert Settings(
        cors_allowed_headers="Content-Type,X-Trace-ID"
    ).get_cors_allowed_headers() == ["Content-Type", "X-Trace-ID"]


def test_get_settings_is_cached():
    """Test settings are built once."""
    assert get_settings() is get_settings()


def test_test_environment_uses_local_store():
    """Test the test session runs against the local provider."""
    assert get_settings().infrastructure_provider == "local"
