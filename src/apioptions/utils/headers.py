r"""Compose the request headers: fixed headers, custom headers and the
authentication header, in this order."""

from __future__ import annotations

__all__ = ["build_headers", "parse_custom_headers", "set_header"]

from typing import TYPE_CHECKING

from apioptions.auth import NoAuth, auth_header
from apioptions.utils.url import split_lines

if TYPE_CHECKING:
    from apioptions.auth import AuthScheme


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    r"""Set a header, replacing any header with the same name regardless
    of its case.

    Args:
        headers: The headers to update in place.
        name: The header name.
        value: The header value.

    Example:
        ```pycon
        >>> from apioptions.utils.headers import set_header
        >>> headers = {"accept": "text/plain"}
        >>> set_header(headers, "Accept", "application/json")
        >>> headers
        {'Accept': 'application/json'}

        ```
    """
    for existing in [key for key in headers if key.lower() == name.lower()]:
        del headers[existing]
    headers[name] = value


def parse_custom_headers(text: str | None) -> list[tuple[str, str]]:
    r"""Parse ``Key:Value`` lines into header pairs.

    Each line is split on its first ``:``; name and value are stripped but
    not encoded. Lines without ``:`` are skipped.

    Args:
        text: The custom headers block.

    Returns:
        The header pairs in input order.

    Example:
        ```pycon
        >>> from apioptions.utils.headers import parse_custom_headers
        >>> parse_custom_headers("X-Trace: abc\nOrigin: https://a.io:8443\nbroken")
        [('X-Trace', 'abc'), ('Origin', 'https://a.io:8443')]

        ```
    """
    pairs = []
    for line in split_lines(text):
        if ":" not in line:
            continue
        name, value = line.split(":", 1)
        pairs.append((name.strip(), value.strip()))
    return pairs


def build_headers(
    *,
    accept_header: str | None = None,
    user_agent: str | None = None,
    custom_headers: str | None = None,
    auth: AuthScheme | None = None,
) -> dict[str, str]:
    r"""Build the header set of an OPTIONS request.

    ``Accept`` and ``User-Agent`` come first (only if non-empty), then the
    custom headers, then the authentication header. A later header
    replaces an earlier one with the same name.

    Args:
        accept_header: Value of the ``Accept`` header.
        user_agent: Value of the ``User-Agent`` header.
        custom_headers: ``Key:Value`` lines.
        auth: The active authentication scheme.

    Returns:
        The headers, in application order.

    Example:
        ```pycon
        >>> from apioptions.auth import ApiKey
        >>> from apioptions.utils.headers import build_headers
        >>> build_headers(
        ...     accept_header="application/json",
        ...     custom_headers="X-Env: test",
        ...     auth=ApiKey(token="k"),
        ... )
        {'Accept': 'application/json', 'X-Env': 'test', 'X-API-Key': 'k'}

        ```
    """
    headers: dict[str, str] = {}
    if accept_header:
        set_header(headers, "Accept", accept_header)
    if user_agent:
        set_header(headers, "User-Agent", user_agent)
    for name, value in parse_custom_headers(custom_headers):
        set_header(headers, name, value)
    header = auth_header(auth if auth is not None else NoAuth())
    if header is not None:
        set_header(headers, *header)
    return headers
