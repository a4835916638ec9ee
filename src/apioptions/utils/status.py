r"""Formatting helpers for status codes and response headers."""

from __future__ import annotations

__all__ = ["STATUS_MESSAGES", "format_headers", "get_header", "get_status_message"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

STATUS_MESSAGES: dict[int, str] = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


def get_status_message(status_code: int) -> str:
    r"""Return the human-readable text of a status code.

    Example:
        ```pycon
        >>> from apioptions.utils.status import get_status_message
        >>> get_status_message(204)
        'No Content'
        >>> get_status_message(418)
        'HTTP 418'

        ```
    """
    return STATUS_MESSAGES.get(status_code, f"HTTP {status_code}")


def format_headers(headers: Mapping[str, str] | None) -> str:
    r"""Serialize headers as ``Name: Value`` lines, in mapping order.

    Example:
        ```pycon
        >>> from apioptions.utils.status import format_headers
        >>> print(format_headers({"Allow": "GET, OPTIONS", "Content-Length": "0"}))
        Allow: GET, OPTIONS
        Content-Length: 0
        >>> format_headers({})
        ''

        ```
    """
    if not headers:
        return ""
    return "\n".join(f"{name}: {value}" for name, value in headers.items())


def get_header(headers: Mapping[str, str] | None, name: str) -> str | None:
    r"""Look up a header by name, ignoring case.

    Returns:
        The header value, or ``None`` if it is absent.

    Example:
        ```pycon
        >>> from apioptions.utils.status import get_header
        >>> get_header({"allow": "GET"}, "Allow")
        'GET'
        >>> get_header({"allow": "GET"}, "Access-Control-Max-Age")

        ```
    """
    if not headers:
        return None
    if name in headers:
        return headers[name]
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None
