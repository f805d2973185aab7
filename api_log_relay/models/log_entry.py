"""
LogEntry model for storing tested request/response pairs.

Each relayed request (or direct log save) produces one row; a later save
carrying the row's id as clientId overwrites it in place.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import String, Text, JSON, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching what SQLite returns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class LogEntry(Base):
    """
    SQLAlchemy model for a request log entry.

    Attributes:
        id: Store-assigned identifier, also handed to clients as clientId
        method: HTTP method of the tested request
        url: Target URL of the tested request
        headers: Headers sent with the request
        request_body: JSON document sent with the request
        response_body: JSON value received (or an error payload)
        status_code: Remote status code, 500 when the relay failed
        timestamp: Creation time, refreshed on every update
        response_time: Relay duration in milliseconds
        error: Failure description, only set when the relay failed
    """
    __tablename__ = "request_logs"
    # AUTOINCREMENT keeps SQLite from reusing ids after a clear-all
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    method: Mapped[str] = mapped_column(String(10))
    url: Mapped[str] = mapped_column(Text)
    headers: Mapped[dict] = mapped_column(JSON, default=dict)
    request_body: Mapped[Any] = mapped_column(JSON(none_as_null=True), nullable=True)
    response_body: Mapped[Any] = mapped_column(JSON(none_as_null=True), nullable=True)
    status_code: Mapped[int] = mapped_column(Integer)
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    response_time: Mapped[int] = mapped_column(Integer, default=0)
    error: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
