"""
Pydantic schemas for relaying requests to target servers.

Defines the relay request payload, the normalized relay outcome, and
the responses returned to the caller of the relay endpoint.
"""

from typing import Literal

from pydantic import JsonValue

from .base import AbsoluteUrl, CamelModel, HttpMethod, JsonDocument
from .log import LogEntryResponse


class RelayRequest(CamelModel):
    """Schema for a request to perform against a target server and log."""
    # Any JSON value; only a positive integer (or its digits) resolves
    client_id: JsonValue = None
    method: HttpMethod
    url: AbsoluteUrl
    headers: dict[str, str] = {}
    request_body: JsonDocument | None = None


class RelayOutcome(CamelModel):
    """
    Normalized result of a relay attempt.

    A transport failure still yields an outcome: status_code falls back
    to 500 and error carries the failure description.
    """
    status_code: int
    response_body: JsonValue = None
    response_time: int
    error: str | None = None
    error_type: Literal["network_error", "timeout", "invalid_url", "unknown"] | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class RelayResponse(CamelModel):
    """Schema returned when the target server answered."""
    message: str
    response: JsonValue = None
    client_id: int
    log: LogEntryResponse


class RelayErrorResponse(CamelModel):
    """Schema returned when the relay failed; the attempt is still logged."""
    message: str
    error: JsonValue = None
    client_id: int
    log: LogEntryResponse
