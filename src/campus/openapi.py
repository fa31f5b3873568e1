"""OpenAPI schema customization for the Campus Backend API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from campus.models.errors import ProblemDetail

REF_TEMPLATE = "#/components/schemas/{model}"
PROBLEM_DETAIL_REF = {"$ref": "#/components/schemas/ProblemDetail"}


def _problem_response(description: str) -> dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"schema": PROBLEM_DETAIL_REF}},
    }


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate customized OpenAPI schema for the API.

    Args:
        app: The FastAPI application instance.

    Returns:
        Customized OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description="""
# Campus Backend API

CRUD API for students and courses backed by a document store.

## Pagination

`GET /api/v1/students/paginated` and `GET /api/v1/courses/paginated` accept
`page` (zero-based), `size`, `sortBy` and `sortDirection` (`ASC`/`DESC`) and
return a page envelope:

```json
{
  "content": [],
  "currentPage": 0,
  "pageSize": 10,
  "totalElements": 25,
  "totalPages": 3,
  "first": true,
  "last": false,
  "hasNext": true,
  "hasPrevious": false
}
```

## Error Handling

All errors follow [RFC 7807 Problem Details](https://datatracker.ietf.org/doc/html/rfc7807):

```json
{
  "type": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.1",
  "title": "Validation Error",
  "status": 400,
  "detail": "Validation failed (1 errors).",
  "instance": "/api/v1/courses",
  "errors": [
    {
      "type": "value_error",
      "loc": ["body", "fee"],
      "msg": "fee must be a non-negative decimal number",
      "input": "-5"
    }
  ]
}
```
        """,
        routes=app.routes,
    )

    openapi_schema["tags"] = [
        {"name": "Health", "description": "Health check endpoints for monitoring"},
        {"name": "Students", "description": "Student records"},
        {"name": "Courses", "description": "Course records"},
    ]

    # ProblemDetail is only referenced by exception handlers, so add it here
    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    problem_schema = ProblemDetail.model_json_schema(ref_template=REF_TEMPLATE)
    schemas.update(problem_schema.pop("$defs", {}))
    schemas["ProblemDetail"] = problem_schema

    for path in openapi_schema["paths"].values():
        for operation in path.values():
            if isinstance(operation, dict) and "responses" in operation:
                operation["responses"].pop("422", None)
                operation["responses"]["400"] = _problem_response("Validation Error")
                operation["responses"]["500"] = _problem_response(
                    "Internal Server Error"
                )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Configure the FastAPI app to use custom OpenAPI schema.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
