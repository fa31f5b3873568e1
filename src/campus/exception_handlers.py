"""Global exception handlers for standardized error responses.

Implements RFC 7807 Problem Details for HTTP APIs.
Provides consistent error formatting across all endpoints:
- NotFoundError → 404
- ValidationFailedError and request validation errors → 400
- HTTPException (routing 404/405 included) → its own status
- Anything else → 500 with a generic message
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from campus.core.logging import logger
from campus.domain.exceptions import NotFoundError, ValidationFailedError
from campus.models.errors import ProblemDetail, ValidationErrorDetail


def _problem_response(problem_detail: ProblemDetail) -> JSONResponse:
    return JSONResponse(
        status_code=problem_detail.status,
        content=problem_detail.model_dump(mode="json", exclude_none=True),
    )


async def not_found_exception_handler(
    request: Request, exc: NotFoundError
) -> JSONResponse:  # noqa: ASYNC100
    """Handle NotFoundError with a 404 ProblemDetail response.

    Args:
        request: The FastAPI request object.
        exc: The NotFoundError that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.warning(f"{exc.kind} not found: {exc.record_id}")

    return _problem_response(
        ProblemDetail(
            title="Not Found",
            status=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
            instance=str(request.url.path),
        )
    )


async def validation_failed_exception_handler(
    request: Request, exc: ValidationFailedError
) -> JSONResponse:  # noqa: ASYNC100
    """Handle domain validation failures with per-field errors.

    Args:
        request: The FastAPI request object.
        exc: The ValidationFailedError raised by a service.

    Returns:
        JSONResponse with ProblemDetail body including validation errors.
    """
    logger.warning(f"Validation failed: {[error.field for error in exc.errors]}")

    errors = [
        ValidationErrorDetail(
            type="value_error",
            loc=(error.location, error.field),
            msg=error.reason,
            input=error.value,
        )
        for error in exc.errors
    ]

    return _problem_response(
        ProblemDetail(
            title="Validation Error",
            status=status.HTTP_400_BAD_REQUEST,
            detail=f"Validation failed ({len(errors)} errors).",
            instance=str(request.url.path),
            errors=errors,
        )
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:  # noqa: ASYNC100
    """Handle HTTPException with RFC 7807 ProblemDetail response.

    Args:
        request: The FastAPI request object.
        exc: The HTTPException that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.error(f"HTTPException: {exc.status_code} - {exc.detail}")

    return _problem_response(
        ProblemDetail(
            title="An error occurred",
            status=exc.status_code,
            detail=str(exc.detail),
            instance=str(request.url.path),
        )
    )


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:  # noqa: ASYNC100
    """Handle unexpected exceptions (store failures included) with 500.

    The exception text is logged but never returned to the caller.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.opt(exception=exc).error(
        f"Unexpected error: {type(exc).__name__} on {request.method} {request.url.path}"
    )

    return _problem_response(
        ProblemDetail(
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
            instance=str(request.url.path),
        )
    )


async def validation_exception_handler(  # noqa: ASYNC100
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors with detailed field-level information.

    Malformed requests (missing fields, wrong types, out-of-range query
    parameters) are reported as 400, like domain validation failures.

    Args:
        request: The FastAPI request object.
        exc: The RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with ProblemDetail body including validation errors.
    """
    logger.warning(f"Request validation error: {len(exc.errors())} errors")

    errors = [
        ValidationErrorDetail(
            type=error["type"],
            loc=tuple(str(loc) for loc in error["loc"]),
            msg=error["msg"],
            input=error.get("input"),
            ctx=(
                {k: str(v) for k, v in error.get("ctx", {}).items()}
                if error.get("ctx")
                else None
            ),
        )
        for error in exc.errors()
    ]

    return _problem_response(
        ProblemDetail(
            title="Validation Error",
            status=status.HTTP_400_BAD_REQUEST,
            detail=f"One or more validation errors occurred ({len(errors)} errors).",
            instance=str(request.url.path),
            errors=errors,
        )
    )
