"""
Relay API route.

Performs a request against a target server on the caller's behalf and
logs the attempt. Relay failures are logged like any other outcome and
reported with an error body instead of being raised.
"""

import httpx
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..schemas.log import LogEntryResponse
from ..schemas.relay import RelayErrorResponse, RelayRequest, RelayResponse
from ..services.log_store import LogStore
from ..services.log_upsert import upsert_log
from ..services.relay_executor import execute_relay
from .dependencies import get_log_store, get_relay_transport


router = APIRouter(prefix="/api/request", tags=["relay"])


def mirrored_status(status_code: int) -> int:
    """
    Status to answer the caller with for a given remote status.

    Statuses that cannot carry a JSON body (1xx, 204, 304) become 200;
    the log entry keeps the real value.
    """
    if status_code < 200 or status_code in (204, 304):
        return status.HTTP_200_OK
    return status_code


@router.post(
    "",
    response_model=RelayResponse,
    responses={
        200: {"model": RelayResponse, "description": "Target answered; status mirrors the target's"},
        500: {"model": RelayErrorResponse, "description": "Relay failed; the attempt was still logged"},
    }
)
async def relay_request(
    relay_data: RelayRequest,
    store: LogStore = Depends(get_log_store),
    transport: httpx.AsyncBaseTransport | None = Depends(get_relay_transport)
):
    """
    Relay a request to its target and log the attempt.

    The log entry is created, or overwritten when clientId names an
    existing entry. The response carries the clientId to reuse.
    """
    outcome = await execute_relay(relay_data, transport=transport)

    result = upsert_log(store, relay_data.client_id, {
        "method": relay_data.method,
        "url": relay_data.url,
        "headers": relay_data.headers,
        "request_body": relay_data.request_body,
        "response_body": outcome.response_body,
        "status_code": outcome.status_code,
        "response_time": outcome.response_time,
        "error": outcome.error,
    })
    log = LogEntryResponse.model_validate(result.entry)

    if outcome.failed:
        body = RelayErrorResponse(
            message="Request failed and logged!",
            error=outcome.error,
            client_id=result.client_id,
            log=log
        )
    else:
        body = RelayResponse(
            message="Request successful and logged!",
            response=outcome.response_body,
            client_id=result.client_id,
            log=log
        )

    return JSONResponse(
        status_code=mirrored_status(outcome.status_code),
        content=body.model_dump(mode="json", by_alias=True)
    )
