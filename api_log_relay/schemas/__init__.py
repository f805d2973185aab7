"""
Pydantic schemas package.

Exports all schemas for API request/response validation.
"""

from .base import (
    HttpMethod,
    JsonDocument,
    AbsoluteUrl,
    CamelModel,
)

from .log import (
    LogEntryResponse,
    LogSaveRequest,
    LogSaveResponse,
    LogDetailResponse,
    LogListResponse,
    LogClearResponse,
)

from .relay import (
    RelayRequest,
    RelayOutcome,
    RelayResponse,
    RelayErrorResponse,
)

__all__ = [
    # Shared types
    "HttpMethod",
    "JsonDocument",
    "AbsoluteUrl",
    "CamelModel",
    # Log schemas
    "LogEntryResponse",
    "LogSaveRequest",
    "LogSaveResponse",
    "LogDetailResponse",
    "LogListResponse",
    "LogClearResponse",
    # Relay schemas
    "RelayRequest",
    "RelayOutcome",
    "RelayResponse",
    "RelayErrorResponse",
]
