r"""HTTP transport used to issue OPTIONS requests.

The executor only depends on the ``HttpTransport`` protocol: issue a
request and await a ``TransportResult``. ``HttpxTransport`` implements it
on top of ``httpx.AsyncClient`` and converts every httpx failure into a
result, so no transport exception escapes an attempt.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_REDIRECTS",
    "HttpTransport",
    "HttpxTransport",
    "ResultKind",
    "TransportResult",
]

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)

# Redirects followed when follow_redirects is enabled
DEFAULT_MAX_REDIRECTS = 32


class ResultKind(str, enum.Enum):
    r"""How a transport exchange completed."""

    SUCCESS = "success"
    PROTOCOL_ERROR = "protocol_error"
    CONNECTION_ERROR = "connection_error"
    OTHER_ERROR = "other_error"


@dataclass(frozen=True)
class TransportResult:
    """The result of one transport exchange.

    Attributes:
        kind: How the exchange completed.
        status_code: The HTTP status code, 0 when no response was received.
        body: The decoded response body.
        headers: The response headers, in the order the server sent them.
        error_text: Description of the failure. For responses with a status
            >= 300 it is the reason phrase.
        timed_out: ``True`` if the transport gave up waiting.
    """

    kind: ResultKind
    status_code: int = 0
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    error_text: str = ""
    timed_out: bool = False

    @property
    def has_response(self) -> bool:
        return self.kind in (ResultKind.SUCCESS, ResultKind.PROTOCOL_ERROR)


class HttpTransport(Protocol):
    r"""Capability to issue one HTTP request and await its result."""

    async def issue(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        timeout: float | None,
        follow_redirects: bool,
        max_redirects: int,
    ) -> TransportResult: ...


def _response_headers(response: httpx.Response) -> dict[str, str]:
    r"""Return the response headers with their original case.

    Repeated headers are joined with ``", "`` at the position of their
    first occurrence.
    """
    headers: dict[str, str] = {}
    names: dict[str, str] = {}
    encoding = response.headers.encoding
    for raw_name, raw_value in response.headers.raw:
        name = raw_name.decode(encoding)
        value = raw_value.decode(encoding)
        key = names.setdefault(name.lower(), name)
        headers[key] = f"{headers[key]}, {value}" if key in headers else value
    return headers


def _result_from_response(response: httpx.Response) -> TransportResult:
    status_code = response.status_code
    return TransportResult(
        kind=ResultKind.PROTOCOL_ERROR if status_code >= 400 else ResultKind.SUCCESS,
        status_code=status_code,
        body=response.text,
        headers=_response_headers(response),
        error_text=response.reason_phrase if status_code >= 300 else "",
    )


class HttpxTransport:
    """``HttpTransport`` backed by ``httpx.AsyncClient``.

    Args:
        client: An optional client to issue the requests with. It is left
            open. If ``None``, every request opens its own client and closes
            it before returning, whatever the result. An injected client
            keeps its own ``max_redirects`` (20 for a default
            ``httpx.AsyncClient``), so the ``max_redirects`` argument of
            ``issue`` has no effect on it.

    Example:
        ```pycon
        >>> import asyncio
        >>> from apioptions.transport import HttpxTransport
        >>> async def example():
        ...     transport = HttpxTransport()
        ...     return await transport.issue(
        ...         "OPTIONS",
        ...         "https://api.example.com/things",
        ...         headers={"Accept": "application/json"},
        ...         timeout=10.0,
        ...         follow_redirects=True,
        ...         max_redirects=32,
        ...     )
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(client={self._client!r})"

    async def issue(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        timeout: float | None,
        follow_redirects: bool,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ) -> TransportResult:
        """Issue a request and convert its completion into a result.

        Args:
            method: The HTTP method.
            url: The request URL.
            headers: The request headers.
            timeout: Timeout in seconds, or ``None`` to wait indefinitely.
            follow_redirects: Whether redirects are followed.
            max_redirects: Maximum number of redirects followed. Only used
                when this transport opens its own client.

        Returns:
            The transport result.
        """
        owns_client = self._client is None
        client = self._client or httpx.AsyncClient(max_redirects=max_redirects)
        try:
            response = await client.request(
                method,
                url,
                headers=dict(headers),
                timeout=httpx.Timeout(timeout),
                follow_redirects=follow_redirects,
            )
        except httpx.TimeoutException as exc:
            logger.debug(f"{method} request to {url} timed out: {exc!r}")
            return TransportResult(
                kind=ResultKind.CONNECTION_ERROR,
                error_text=str(exc) or type(exc).__name__,
                timed_out=True,
            )
        except httpx.TransportError as exc:
            logger.debug(f"{method} request to {url} encountered {type(exc).__name__}: {exc}")
            return TransportResult(
                kind=ResultKind.CONNECTION_ERROR,
                error_text=str(exc) or type(exc).__name__,
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            # httpx encodes header names and values as ASCII when it builds the request
            logger.debug(f"{method} request to {url} failed with {type(exc).__name__}: {exc}")
            return TransportResult(
                kind=ResultKind.OTHER_ERROR,
                error_text=str(exc) or type(exc).__name__,
            )
        finally:
            if owns_client:
                await client.aclose()
        return _result_from_response(response)
