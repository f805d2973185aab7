"""
Relay service for sending HTTP requests to target servers.

This service performs the outbound call with httpx, times it, and
normalizes both answers and transport failures into a RelayOutcome.
Persisting the outcome is the caller's job.
"""

import json
import logging
import time
from typing import Any

import httpx

from ..config import settings
from ..schemas.relay import RelayRequest, RelayOutcome


logger = logging.getLogger(__name__)

# Status recorded when the target never produced a response
RELAY_FAILURE_STATUS = 500


def elapsed_ms(start: float) -> int:
    """Milliseconds since a time.perf_counter() reading, rounded and never negative."""
    return max(0, round((time.perf_counter() - start) * 1000))


def decode_body(response: httpx.Response) -> Any | None:
    """
    Decode a response body into a JSON value.

    JSON content types are parsed (falling back to text when the body is
    not valid JSON), anything else is returned as text, and an empty body
    becomes None.
    """
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" in content_type.lower():
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return response.text

    return response.text


def _failure(error: str, error_type: str, details: str, start: float) -> RelayOutcome:
    message = f"{error}: {details}" if details else error
    logger.warning("Relay failed (%s): %s", error_type, message)
    return RelayOutcome(
        status_code=RELAY_FAILURE_STATUS,
        response_body={"error": message},
        response_time=elapsed_ms(start),
        error=message,
        error_type=error_type,
    )


async def execute_relay(
    request: RelayRequest,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None
) -> RelayOutcome:
    """
    Perform an HTTP request against its target and return the outcome.

    Any response, whatever its status code, counts as a success. Only
    transport-level failures (timeouts, connection errors, invalid URLs)
    and errors raised while building the request (such as header values
    httpx cannot encode) produce an outcome with error set.

    Args:
        request: The request to perform
        timeout: Timeout in seconds, defaults to RELAY_TIMEOUT from settings
        transport: Optional httpx transport, used to stub the network

    Returns:
        RelayOutcome describing the response or the failure
    """
    if timeout is None:
        timeout = settings.RELAY_TIMEOUT

    start = time.perf_counter()
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                json=request.request_body
            )
        response_time = elapsed_ms(start)

    except httpx.TimeoutException as e:
        return _failure("Request timed out", "timeout", str(e) or f"exceeded {timeout} seconds", start)
    except httpx.ConnectError as e:
        return _failure("Failed to connect to server", "network_error", str(e), start)
    except httpx.InvalidURL as e:
        return _failure("Invalid URL", "invalid_url", str(e), start)
    except httpx.HTTPError as e:
        return _failure("HTTP error occurred", "network_error", str(e), start)
    except Exception as e:
        return _failure("An unexpected error occurred", "unknown", str(e), start)

    logger.debug("Relayed %s %s -> %s in %d ms", request.method, request.url, response.status_code, response_time)
    return RelayOutcome(
        status_code=response.status_code,
        response_body=decode_body(response),
        response_time=response_time,
    )
