r"""Unit tests for callback invocation helpers."""

from __future__ import annotations

from unittest.mock import Mock

from apioptions.callbacks import (
    FailureInfo,
    RequestInfo,
    ResponseInfo,
    RetryInfo,
    invoke_on_failure,
    invoke_on_request,
    invoke_on_retry,
    invoke_on_success,
)
from apioptions.outcome import ClientError, NetworkError, ResponseData, Timeout
from apioptions.signals import Signal

URL = "https://api.example.com"


def test_invoke_on_request() -> None:
    """Test that on_request receives the 1-indexed attempt."""
    callback = Mock()
    invoke_on_request(callback, url=URL, retry_count=0, max_retries=2)
    callback.assert_called_once_with(RequestInfo(url=URL, attempt=1, max_retries=2))


def test_invoke_on_retry() -> None:
    """Test the on_retry information."""
    callback = Mock()
    outcome = Timeout()
    invoke_on_retry(callback, url=URL, retry_count=1, max_retries=3, wait_time=0.5, outcome=outcome)
    callback.assert_called_once_with(
        RetryInfo(url=URL, retry=1, max_retries=3, wait_time=0.5, outcome=outcome)
    )


def test_invoke_on_success() -> None:
    """Test the on_success information."""
    callback = Mock()
    response = ResponseData(status_code=200)
    invoke_on_success(callback, url=URL, retry_count=2, response=response, elapsed_ms=12.0)
    callback.assert_called_once_with(
        ResponseInfo(url=URL, attempt=3, response=response, elapsed_ms=12.0)
    )


def test_invoke_on_failure_with_response() -> None:
    """Test the on_failure information of a response outcome."""
    callback = Mock()
    outcome = ClientError(
        response=ResponseData(status_code=404), message="Client Error 404: Not Found"
    )
    invoke_on_failure(callback, url=URL, retry_count=0, outcome=outcome, elapsed_ms=5.0)
    callback.assert_called_once_with(
        FailureInfo(
            url=URL,
            attempt=1,
            signal=Signal.CLIENT_ERROR,
            message="Client Error 404: Not Found",
            status_code=404,
            elapsed_ms=5.0,
        )
    )


def test_invoke_on_failure_without_response() -> None:
    """Test the on_failure information of a network error."""
    callback = Mock()
    outcome = NetworkError(message="Network Error: refused")
    invoke_on_failure(callback, url=URL, retry_count=1, outcome=outcome, elapsed_ms=5.0)
    info = callback.call_args.args[0]
    assert info.signal is Signal.NETWORK_ERROR
    assert info.status_code is None
    assert info.attempt == 2


def test_invoke_callbacks_none() -> None:
    """Test that missing callbacks are skipped."""
    invoke_on_request(None, url=URL, retry_count=0, max_retries=0)
    invoke_on_retry(None, url=URL, retry_count=1, max_retries=1, wait_time=0.0, outcome=Timeout())
    invoke_on_success(
        None, url=URL, retry_count=0, response=ResponseData(status_code=200), elapsed_ms=0.0
    )
    invoke_on_failure(None, url=URL, retry_count=0, outcome=Timeout(), elapsed_ms=0.0)
