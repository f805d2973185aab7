"""
Paginated views of the log store for the history browser.
"""

import math

from ..schemas.log import LogEntryResponse, LogListResponse
from .log_store import LogStore, clamp_limit


def get_log_page(store: LogStore, page: int = 1, limit: int = 10) -> LogListResponse:
    """
    Build one page of log history, most recent first.

    totalPages is ceil(total / limit); a page past the end comes back
    empty with the totals intact.
    """
    page = max(1, page)
    limit = clamp_limit(limit)
    entries, total = store.list_page(page, limit)
    return LogListResponse(
        logs=[LogEntryResponse.model_validate(entry) for entry in entries],
        total=total,
        page=page,
        total_pages=math.ceil(total / limit),
    )
