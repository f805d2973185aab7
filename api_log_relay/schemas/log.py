"""
Pydantic schemas for request log entries.

Defines the payload for saving a log directly and the shapes returned
by the log browsing endpoints.
"""

from datetime import datetime

from pydantic import Field, JsonValue

from .base import AbsoluteUrl, CamelModel, HttpMethod, JsonDocument


class LogEntryResponse(CamelModel):
    """Schema for a stored log entry with all fields."""
    id: int
    method: str
    url: str
    headers: dict[str, str]
    request_body: JsonValue = None
    response_body: JsonValue = None
    status_code: int
    timestamp: datetime
    response_time: int
    error: str | None = None


class LogSaveRequest(CamelModel):
    """
    Schema for saving a log entry without relaying.

    When client_id names an existing entry, that entry is overwritten;
    otherwise a new entry is created.
    """
    # Any JSON value; only a positive integer (or its digits) resolves
    client_id: JsonValue = None
    method: HttpMethod
    url: AbsoluteUrl
    headers: dict[str, str] = {}
    request_body: JsonDocument | None = None
    response_body: JsonValue = None
    status_code: int = Field(ge=100, le=599)
    response_time: int = Field(default=0, ge=0)
    error: str | None = None


class LogSaveResponse(CamelModel):
    """Schema returned after a direct log save."""
    message: str
    log: LogEntryResponse
    client_id: int


class LogDetailResponse(CamelModel):
    """Schema for a single log lookup."""
    log: LogEntryResponse


class LogListResponse(CamelModel):
    """Schema for a page of log history, most recent first."""
    logs: list[LogEntryResponse]
    total: int
    page: int
    total_pages: int


class LogClearResponse(CamelModel):
    """Schema returned after clearing every log entry."""
    message: str
    deleted_count: int
