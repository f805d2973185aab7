"""
Custom exception classes and error handling for API Log Relay.

Provides consistent error responses across all API endpoints.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError


logger = logging.getLogger(__name__)


class FieldError(BaseModel):
    """A single rejected input field."""
    field: str
    message: str
    location: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response format."""
    detail: str
    error_code: str | None = None
    errors: list[FieldError] | None = None


class APIException(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str | None = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(detail)


class ResourceNotFoundError(APIException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            detail=f"{resource_type} with id {resource_id} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code="RESOURCE_NOT_FOUND"
        )


def format_validation_errors(errors: list[dict]) -> list[FieldError]:
    """
    Flatten pydantic error records into field/message pairs.

    The field is the innermost named location (e.g. "statusCode"),
    the location is the request part it came from (body, query, path).
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        location = loc[0] if loc and loc[0] in ("body", "query", "path", "header") else None
        names = [part for part in loc[1 if location else 0:] if not part.isdigit()]
        field = names[0] if names else (location or "request")
        formatted.append(FieldError(field=field, message=error["msg"], location=location))
    return formatted


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Handler for custom API exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error_code": exc.error_code}
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handler for request validation errors; rejected input is never persisted."""
    field_errors = format_validation_errors(exc.errors())
    detail = "; ".join(f"{e.field}: {e.message}" for e in field_errors) or "Validation error"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": detail,
            "error_code": "VALIDATION_ERROR",
            "errors": [e.model_dump() for e in field_errors],
        }
    )


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handler for SQLAlchemy database errors."""
    logger.error("Database error while handling %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error occurred", "error_code": "DATABASE_ERROR"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
