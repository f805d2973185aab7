# Services package

from .log_store import LogStore, clamp_limit
from .log_upsert import UpsertResult, parse_client_id, upsert_log
from .relay_executor import execute_relay
from .log_query import get_log_page

__all__ = [
    "LogStore",
    "clamp_limit",
    "UpsertResult",
    "parse_client_id",
    "upsert_log",
    "execute_relay",
    "get_log_page",
]
