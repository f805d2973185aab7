"""
Upsert resolver for log saves.

A save carrying the id of an existing entry as its clientId overwrites
that entry; any other save (no clientId, an unparsable one, or one that
matches nothing) creates a new entry.
"""

from dataclasses import dataclass
from typing import Any

from ..models.log_entry import LogEntry
from .log_store import LogStore


@dataclass
class UpsertResult:
    """Outcome of a save: the stored entry and whether it was newly created."""
    entry: LogEntry
    created: bool

    @property
    def client_id(self) -> int:
        return self.entry.id


def parse_client_id(value: Any) -> int | None:
    """
    Interpret a client-supplied id.

    Accepts integers and decimal strings; returns None for anything that
    is not a positive integer.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        text = value.strip()
        if text.isdecimal():
            parsed = int(text)
            return parsed if parsed > 0 else None
    return None


def upsert_log(store: LogStore, client_id: Any, fields: dict[str, Any]) -> UpsertResult:
    """
    Save a log entry, updating in place when client_id resolves.

    Args:
        store: Log store to write through
        client_id: Raw clientId from the caller, may be None
        fields: Full field set for the entry

    Returns:
        UpsertResult with the stored entry
    """
    log_id = parse_client_id(client_id)
    if log_id is not None and store.find_by_id(log_id) is not None:
        return UpsertResult(entry=store.update_by_id(log_id, fields), created=False)
    return UpsertResult(entry=store.create(fields), created=True)
