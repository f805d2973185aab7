"""
Shared FastAPI dependencies.

Routes receive their log store and relay transport through these
functions so tests can swap them with dependency_overrides.
"""

import httpx
from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.log_store import LogStore


def get_log_store(db: Session = Depends(get_db)) -> LogStore:
    """Log store bound to the request's database session."""
    return LogStore(db)


def get_relay_transport() -> httpx.AsyncBaseTransport | None:
    """Transport for outbound relay calls; None means the real network."""
    return None
