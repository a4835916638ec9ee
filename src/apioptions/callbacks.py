r"""Callback types and data structures for observability.

Callbacks hook into the lifecycle of an OPTIONS invocation for logging,
metrics or alerting. They never change the outcome of the invocation.

- on_request: called before each attempt
- on_retry: called before each retry delay
- on_success: called when the invocation ends with a success outcome
- on_failure: called when the invocation ends with any other outcome

Example:
    ```pycon
    >>> from apioptions.callbacks import CallbackConfig, RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"Retry {info.retry}/{info.max_retries} in {info.wait_time}s")
    ...
    >>> callbacks = CallbackConfig(on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = [
    "CallbackConfig",
    "FailureInfo",
    "RequestInfo",
    "ResponseInfo",
    "RetryInfo",
    "invoke_on_failure",
    "invoke_on_request",
    "invoke_on_retry",
    "invoke_on_success",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from apioptions.outcome import Outcome, ResponseData
    from apioptions.signals import Signal


@dataclass
class RequestInfo:
    """Information passed to the on_request callback.

    Attributes:
        url: The URL being requested.
        attempt: The attempt number (1-indexed).
        max_retries: Maximum number of retries configured.
    """

    url: str
    attempt: int
    max_retries: int


@dataclass
class RetryInfo:
    """Information passed to the on_retry callback.

    Attributes:
        url: The URL of the failed attempt.
        retry: The retry about to be performed (1-indexed).
        max_retries: Maximum number of retries configured.
        wait_time: The delay in seconds before the retry.
        outcome: The retryable outcome that triggered the retry.
    """

    url: str
    retry: int
    max_retries: int
    wait_time: float
    outcome: Outcome


@dataclass
class ResponseInfo:
    """Information passed to the on_success callback.

    Attributes:
        url: The URL that was requested.
        attempt: The attempt number that succeeded (1-indexed).
        response: The received response.
        elapsed_ms: Milliseconds since activation.
    """

    url: str
    attempt: int
    response: ResponseData
    elapsed_ms: float


@dataclass
class FailureInfo:
    """Information passed to the on_failure callback.

    Attributes:
        url: The URL that was requested.
        attempt: The final attempt number (1-indexed).
        signal: The terminal signal of the invocation.
        message: The error message written to the output slots.
        status_code: The status code, if a response was received.
        elapsed_ms: Milliseconds since activation.
    """

    url: str
    attempt: int
    signal: Signal
    message: str
    status_code: int | None
    elapsed_ms: float


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_request: Optional callback invoked before each attempt.
        on_retry: Optional callback invoked before each retry delay.
        on_success: Optional callback invoked on a success outcome.
        on_failure: Optional callback invoked on any other terminal outcome.
    """

    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None


def invoke_on_request(
    on_request: Callable[[RequestInfo], None] | None,
    *,
    url: str,
    retry_count: int,
    max_retries: int,
) -> None:
    """Invoke the on_request callback if provided.

    Args:
        on_request: Optional callback.
        url: The URL being requested.
        retry_count: Retries performed so far. The callback receives the
            1-indexed attempt number (retry_count + 1).
        max_retries: Maximum number of retries.
    """
    if on_request is not None:
        on_request(RequestInfo(url=url, attempt=retry_count + 1, max_retries=max_retries))


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    url: str,
    retry_count: int,
    max_retries: int,
    wait_time: float,
    outcome: Outcome,
) -> None:
    """Invoke the on_retry callback if provided.

    Args:
        on_retry: Optional callback.
        url: The URL of the failed attempt.
        retry_count: Retries performed, including the one about to start.
        max_retries: Maximum number of retries.
        wait_time: The delay before the retry.
        outcome: The retryable outcome.
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                url=url,
                retry=retry_count,
                max_retries=max_retries,
                wait_time=wait_time,
                outcome=outcome,
            )
        )


def invoke_on_success(
    on_success: Callable[[ResponseInfo], None] | None,
    *,
    url: str,
    retry_count: int,
    response: ResponseData,
    elapsed_ms: float,
) -> None:
    """Invoke the on_success callback if provided."""
    if on_success is not None:
        on_success(
            ResponseInfo(
                url=url, attempt=retry_count + 1, response=response, elapsed_ms=elapsed_ms
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    url: str,
    retry_count: int,
    outcome: Outcome,
    elapsed_ms: float,
) -> None:
    """Invoke the on_failure callback if provided."""
    if on_failure is not None:
        on_failure(
            FailureInfo(
                url=url,
                attempt=retry_count + 1,
                signal=outcome.signal,
                message=outcome.message or "",
                status_code=outcome.response.status_code if outcome.response else None,
                elapsed_ms=elapsed_ms,
            )
        )
