"""
Models package for API Log Relay.

Exports all SQLAlchemy models for database operations.
"""

from .log_entry import LogEntry, utcnow

__all__ = [
    "LogEntry",
    "utcnow",
]
