r"""Shared test helpers for the OPTIONS invocation tests."""

from __future__ import annotations

__all__ = [
    "API_URL",
    "FakeTransport",
    "connection_error",
    "mock_client",
    "response_result",
    "timeout_error",
]

from typing import TYPE_CHECKING, Any

import httpx

from apioptions.transport import ResultKind, TransportResult

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

API_URL = "https://api.example.com/v1/things"


class FakeTransport:
    """Transport returning queued results and recording the requests.

    The last result is repeated once the queue holds a single item.
    """

    def __init__(self, *results: TransportResult) -> None:
        self.results = list(results)
        self.calls: list[dict[str, Any]] = []

    async def issue(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        timeout: float | None,
        follow_redirects: bool,
        max_redirects: int,
    ) -> TransportResult:
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers),
                "timeout": timeout,
                "follow_redirects": follow_redirects,
                "max_redirects": max_redirects,
            }
        )
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


def response_result(
    status_code: int = 200,
    body: str = "",
    headers: dict[str, str] | None = None,
    error_text: str = "",
) -> TransportResult:
    """Create the result of an exchange that received a response."""
    return TransportResult(
        kind=ResultKind.PROTOCOL_ERROR if status_code >= 400 else ResultKind.SUCCESS,
        status_code=status_code,
        body=body,
        headers=headers or {},
        error_text=error_text,
    )


def connection_error(error_text: str = "Connection refused") -> TransportResult:
    """Create the result of a failed connection."""
    return TransportResult(kind=ResultKind.CONNECTION_ERROR, error_text=error_text)


def timeout_error(error_text: str = "timed out") -> TransportResult:
    """Create the result of a timed out exchange."""
    return TransportResult(kind=ResultKind.CONNECTION_ERROR, error_text=error_text, timed_out=True)


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` answering requests with ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
