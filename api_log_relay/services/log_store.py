"""
Log store service: the only component that reads or writes log entries.

Every operation works on the SQLAlchemy session handed to the store's
constructor; callers own the session's lifetime.
"""

import logging
from datetime import timedelta
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import ResourceNotFoundError
from ..models.log_entry import LogEntry, utcnow


logger = logging.getLogger(__name__)

# Largest id a 64-bit INTEGER primary key can hold
MAX_LOG_ID = 2**63 - 1

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

# Fields a save overwrites in full; id and timestamp are store-managed
MUTABLE_FIELDS = (
    "method",
    "url",
    "headers",
    "request_body",
    "response_body",
    "status_code",
    "response_time",
    "error",
)


def clamp_limit(limit: int) -> int:
    """Clamp a page size into [MIN_PAGE_SIZE, MAX_PAGE_SIZE]."""
    return max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, limit))


def _field_values(fields: dict[str, Any]) -> dict[str, Any]:
    values = {name: fields.get(name) for name in MUTABLE_FIELDS}
    if values["headers"] is None:
        values["headers"] = {}
    if values["response_time"] is None:
        values["response_time"] = 0
    return values


class LogStore:
    """
    Durable record of every tested request/response pair.

    Args:
        db: Database session used for every operation
    """

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def create(self, fields: dict[str, Any]) -> LogEntry:
        """
        Persist a new log entry with a fresh id and the current timestamp.

        Args:
            fields: Values for the mutable fields; missing ones become empty

        Returns:
            The stored entry
        """
        entry = LogEntry(**_field_values(fields), timestamp=utcnow())
        self.db.add(entry)
        self._commit()
        self.db.refresh(entry)
        logger.info("Created log %s: %s %s -> %s", entry.id, entry.method, entry.url, entry.status_code)
        return entry

    def find_by_id(self, log_id: int) -> LogEntry | None:
        """Return the entry with the given id, or None (also for ids no row can have)."""
        if not 0 < log_id <= MAX_LOG_ID:
            return None
        return self.db.query(LogEntry).filter(LogEntry.id == log_id).first()

    def update_by_id(self, log_id: int, fields: dict[str, Any]) -> LogEntry:
        """
        Overwrite every mutable field of an existing entry and refresh its timestamp.

        Fields absent from `fields` are cleared rather than kept, so nothing
        from the previous version survives the update.

        Raises:
            ResourceNotFoundError: if no entry has this id
        """
        entry = self.find_by_id(log_id)
        if entry is None:
            raise ResourceNotFoundError("Log", log_id)

        for name, value in _field_values(fields).items():
            setattr(entry, name, value)

        # Timestamps must strictly advance even when the clock has not ticked
        now = utcnow()
        if entry.timestamp is not None and now <= entry.timestamp:
            now = entry.timestamp + timedelta(microseconds=1)
        entry.timestamp = now

        self._commit()
        self.db.refresh(entry)
        logger.info("Updated log %s: %s %s -> %s", entry.id, entry.method, entry.url, entry.status_code)
        return entry

    def list_page(self, page: int, limit: int) -> tuple[list[LogEntry], int]:
        """
        Get one page of entries, most recent first.

        Args:
            page: 1-indexed page number; values below 1 are treated as 1
            limit: Page size, clamped to [1, 100]

        Returns:
            Tuple of (entries on the page, total entry count). A page past
            the end yields an empty list.
        """
        page = max(1, page)
        limit = clamp_limit(limit)

        total = self.db.query(LogEntry).count()
        offset = (page - 1) * limit
        if offset >= total:
            return [], total

        entries = (
            self.db.query(LogEntry)
            .order_by(LogEntry.timestamp.desc(), LogEntry.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return entries, total

    def delete_all(self) -> int:
        """
        Remove every entry. Irreversible.

        Returns:
            Number of entries present before deletion
        """
        count = self.db.query(LogEntry).count()
        self.db.query(LogEntry).delete(synchronize_session=False)
        self._commit()
        logger.info("Cleared %d log entries", count)
        return count
