r"""End-to-end tests of OPTIONS invocations through the httpx
transport."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from apioptions import OptionsAction, RequestConfig, Signal, options_async
from apioptions.auth import BasicAuth
from apioptions.slots import OutputSlots
from apioptions.transport import HttpxTransport
from tests.helpers import mock_client

#####################################################
#     Tests for options_async     #
#####################################################


@pytest.mark.asyncio
async def test_options_async_cors_preflight(mock_asleep: Mock) -> None:
    """Test a CORS preflight exchange end to end."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            204,
            headers=[
                ("Allow", "GET, POST, OPTIONS"),
                ("Access-Control-Allow-Headers", "Authorization, Content-Type"),
                ("Access-Control-Max-Age", "600"),
            ],
        )

    outputs = OutputSlots.bind_all()
    emitter = Mock()
    async with mock_client(handler) as client:
        result = await options_async(
            transport=HttpxTransport(client),
            outputs=outputs,
            emitter=emitter,
            base_url="https://api.example.com/",
            endpoint_path="/v1/things",
            query_parameters="a=1\nb=2",
            custom_headers="Origin: https://app.example.com\nAccess-Control-Request-Method: POST",
            auth_type="basic_auth",
            username="user",
            password="pass",
        )

    assert result.signal is Signal.SUCCESS
    emitter.assert_called_once_with("success")
    request = requests[0]
    assert request.method == "OPTIONS"
    assert str(request.url) == "https://api.example.com/v1/things?a=1&b=2"
    assert request.headers["Authorization"] == "Basic dXNlcjpwYXNz"
    assert request.headers["Origin"] == "https://app.example.com"
    assert request.headers["Accept"] == "application/json"
    assert outputs.snapshot() == {
        "status_code": 204,
        "status_message": "No Content",
        "response_body": "",
        "response_headers": (
            "Allow: GET, POST, OPTIONS\n"
            "Access-Control-Allow-Headers: Authorization, Content-Type\n"
            "Access-Control-Max-Age: 600"
        ),
        "error_message": None,
        "response_time": result.elapsed_ms,
        "allowed_methods": "GET, POST, OPTIONS",
        "allowed_headers": "Authorization, Content-Type",
        "max_age": "600",
    }


@pytest.mark.asyncio
async def test_options_async_retry_then_success(mock_asleep: Mock) -> None:
    """Test that a transient timeout is retried through httpx."""
    attempts = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        if len(attempts) == 1:
            msg = "timed out"
            raise httpx.ReadTimeout(msg, request=request)
        return httpx.Response(200, headers=[("Allow", "GET")])

    async with mock_client(handler) as client:
        result = await options_async(
            "https://api.example.com/things",
            transport=HttpxTransport(client),
            max_retries=2,
            retry_delay=0.5,
        )

    assert result.signal is Signal.SUCCESS
    assert result.retries == 1
    assert len(attempts) == 2
    mock_asleep.assert_called_once_with(0.5)


@pytest.mark.asyncio
async def test_options_async_connect_error_exhausted(mock_asleep: Mock) -> None:
    """Test that persistent connection failures fire network_error."""

    def handler(request: httpx.Request) -> httpx.Response:
        msg = "Connection refused"
        raise httpx.ConnectError(msg, request=request)

    outputs = OutputSlots.bind_all()
    async with mock_client(handler) as client:
        result = await options_async(
            "https://api.example.com/things",
            transport=HttpxTransport(client),
            outputs=outputs,
            max_retries=3,
        )

    assert result.signal is Signal.NETWORK_ERROR
    assert result.retries == 3
    assert outputs.error_message.value == "Network Error: Connection refused"
    assert outputs.status_code.value is None
    assert mock_asleep.call_count == 3


@pytest.mark.asyncio
async def test_options_async_method_not_allowed(mock_asleep: Mock) -> None:
    """Test that a 405 is a client error with its reason phrase."""
    outputs = OutputSlots.bind_all()
    async with mock_client(lambda request: httpx.Response(405, text="no")) as client:
        result = await options_async(
            "https://api.example.com/things",
            transport=HttpxTransport(client),
            outputs=outputs,
            max_retries=3,
        )

    assert result.signal is Signal.CLIENT_ERROR
    assert result.retries == 0
    assert outputs.error_message.value == "Client Error 405: Method Not Allowed"
    assert outputs.response_body.value == "no"
    mock_asleep.assert_not_called()


@pytest.mark.asyncio
async def test_options_action_redirect_disabled(mock_asleep: Mock) -> None:
    """Test that a redirect response with redirects disabled is not
    retried."""
    emitter = Mock()

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(307, headers={"Location": "https://api.example.com/other"})

    async with mock_client(handler) as client:
        action = OptionsAction(
            RequestConfig(
                url="https://api.example.com/things",
                follow_redirects=False,
                max_retries=2,
                auth=BasicAuth(username="user"),
            ),
            emitter=emitter,
            transport=HttpxTransport(client),
        )
        result = await action.on_enter()

    assert result.signal is Signal.NETWORK_ERROR
    assert result.outcome.message == "Error: HTTP 307"
    emitter.assert_called_once_with("network_error")
    mock_asleep.assert_not_called()
