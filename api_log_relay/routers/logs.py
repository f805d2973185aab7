"""
Request log API routes.

Provides endpoints for saving log entries directly, browsing the log
history page by page, looking up a single entry, and clearing all logs.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from ..exceptions import ErrorResponse, ResourceNotFoundError
from ..schemas.log import (
    LogClearResponse,
    LogDetailResponse,
    LogEntryResponse,
    LogListResponse,
    LogSaveRequest,
    LogSaveResponse,
)
from ..services.log_query import get_log_page
from ..services.log_store import LogStore, MAX_PAGE_SIZE
from ..services.log_upsert import upsert_log
from .dependencies import get_log_store


router = APIRouter(prefix="/api/log", tags=["logs"])


@router.post(
    "",
    response_model=LogSaveResponse,
    responses={
        200: {"model": LogSaveResponse, "description": "Existing log updated"},
        201: {"model": LogSaveResponse, "description": "New log created"},
        400: {"model": ErrorResponse, "description": "Invalid log fields"},
    }
)
def save_log(
    log_data: LogSaveRequest,
    response: Response,
    store: LogStore = Depends(get_log_store)
):
    """
    Save a log entry without relaying anything.

    If clientId names an existing entry, that entry is fully overwritten
    (200); otherwise a new entry is created (201). The returned clientId
    is the id to send with later saves of the same request.
    """
    fields = log_data.model_dump(exclude={"client_id"})
    result = upsert_log(store, log_data.client_id, fields)

    response.status_code = status.HTTP_201_CREATED if result.created else status.HTTP_200_OK
    return LogSaveResponse(
        message="Log saved" if result.created else "Log updated",
        log=LogEntryResponse.model_validate(result.entry),
        client_id=result.client_id
    )


@router.get("", response_model=LogListResponse)
def list_logs(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    store: LogStore = Depends(get_log_store)
):
    """
    Get a page of log entries ordered by timestamp (most recent first).

    Args:
        page: 1-indexed page number
        limit: Entries per page, between 1 and 100
        store: Log store

    Returns:
        LogListResponse with the entries, total count and page count
    """
    return get_log_page(store, page, limit)


@router.delete("/all", response_model=LogClearResponse)
def clear_all_logs(store: LogStore = Depends(get_log_store)):
    """Delete every log entry and report how many were removed."""
    deleted_count = store.delete_all()
    return LogClearResponse(message="All logs deleted", deleted_count=deleted_count)


@router.get(
    "/{log_id}",
    response_model=LogDetailResponse,
    responses={404: {"model": ErrorResponse, "description": "Log not found"}}
)
def get_log(log_id: int, store: LogStore = Depends(get_log_store)):
    """
    Get a single log entry by ID.

    Raises:
        ResourceNotFoundError: 404 if the entry does not exist
    """
    entry = store.find_by_id(log_id)
    if entry is None:
        raise ResourceNotFoundError("Log", log_id)
    return LogDetailResponse(log=LogEntryResponse.model_validate(entry))
