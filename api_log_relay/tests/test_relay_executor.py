"""
Tests for the relay executor.

The network is replaced by httpx.MockTransport so both answered and
failed relays can be produced deterministically.
"""

import asyncio
import json

import httpx
import pytest
from hypothesis import given, strategies as st, settings

from api_log_relay.schemas.relay import RelayRequest
from api_log_relay.services.relay_executor import (
    RELAY_FAILURE_STATUS,
    decode_body,
    execute_relay,
)


def run_relay(handler, **request_fields):
    request_fields.setdefault("method", "GET")
    request_fields.setdefault("url", "https://api.example.com/items")
    request = RelayRequest(**request_fields)
    return asyncio.run(execute_relay(request, transport=httpx.MockTransport(handler)))


def raising(exc_type, message="boom"):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type(message, request=request)
    return handler


class TestAnsweredRelay:
    """Any answer from the target counts as a successful relay."""

    def test_json_response_is_decoded(self):
        def handler(request):
            return httpx.Response(200, json={"items": [1, 2, 3]})

        outcome = run_relay(handler)
        assert outcome.status_code == 200
        assert outcome.response_body == {"items": [1, 2, 3]}
        assert outcome.error is None
        assert not outcome.failed
        assert outcome.response_time >= 0

    @given(status_code=st.integers(min_value=200, max_value=599))
    @settings(max_examples=30, deadline=None)
    def test_any_status_is_passed_through(self, status_code):
        """Property: non-2xx answers are still answers, not failures."""
        def handler(request):
            return httpx.Response(status_code, json={"status": status_code})

        outcome = run_relay(handler)
        assert outcome.status_code == status_code
        assert outcome.error is None

    def test_request_parts_are_forwarded(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"ok": True})

        outcome = run_relay(
            handler,
            method="PATCH",
            url="https://api.example.com/items/7?expand=true",
            headers={"Authorization": "Bearer token"},
            request_body={"name": "widget"}
        )
        assert outcome.status_code == 201
        assert seen == {
            "method": "PATCH",
            "url": "https://api.example.com/items/7?expand=true",
            "auth": "Bearer token",
            "body": {"name": "widget"},
        }

    def test_no_body_sent_without_request_body(self):
        def handler(request):
            assert request.content == b""
            return httpx.Response(204)

        outcome = run_relay(handler)
        assert outcome.status_code == 204
        assert outcome.response_body is None

    def test_text_response_kept_as_text(self):
        def handler(request):
            return httpx.Response(200, text="plain answer", headers={"content-type": "text/plain"})

        assert run_relay(handler).response_body == "plain answer"


class TestFailedRelay:
    """Transport failures become outcomes with error set."""

    @pytest.mark.parametrize("exc_type,error_type", [
        (httpx.ConnectError, "network_error"),
        (httpx.ConnectTimeout, "timeout"),
        (httpx.ReadTimeout, "timeout"),
        (httpx.ReadError, "network_error"),
        (httpx.RemoteProtocolError, "network_error"),
    ])
    def test_transport_failures_are_normalized(self, exc_type, error_type):
        outcome = run_relay(raising(exc_type, "target went away"), url="https://unreachable.invalid")

        assert outcome.failed
        assert outcome.error_type == error_type
        assert outcome.status_code == RELAY_FAILURE_STATUS
        assert "target went away" in outcome.error
        assert outcome.response_body == {"error": outcome.error}
        assert outcome.response_time >= 0

    def test_timeout_without_message_mentions_limit(self):
        def handler(request):
            raise httpx.ReadTimeout("", request=request)

        request = RelayRequest(method="GET", url="https://slow.example.com")
        outcome = asyncio.run(execute_relay(request, timeout=2.5, transport=httpx.MockTransport(handler)))
        assert outcome.error_type == "timeout"
        assert "2.5" in outcome.error

    def test_unexpected_errors_are_normalized(self):
        def handler(request):
            raise RuntimeError("transport exploded")

        outcome = run_relay(handler)
        assert outcome.failed
        assert outcome.error_type == "unknown"
        assert outcome.status_code == RELAY_FAILURE_STATUS
        assert "transport exploded" in outcome.error

    def test_unencodable_header_value_is_normalized(self):
        def handler(request):
            return httpx.Response(200)

        outcome = run_relay(handler, headers={"X-Name": "café"})
        assert outcome.failed
        assert outcome.error_type == "unknown"
        assert outcome.response_body == {"error": outcome.error}


class TestDecodeBody:
    """Tests for response body decoding."""

    def test_invalid_json_falls_back_to_text(self):
        response = httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})
        assert decode_body(response) == "{not json"

    def test_vendor_json_content_type_is_parsed(self):
        response = httpx.Response(200, content=b'{"a": 1}', headers={"content-type": "application/problem+json"})
        assert decode_body(response) == {"a": 1}

    def test_empty_body_is_none(self):
        assert decode_body(httpx.Response(200, content=b"")) is None
