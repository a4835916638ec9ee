r"""Compose the final request URL from the configuration fields.

The URL is either the direct URL or the base URL joined with the
endpoint path, followed by an optional query string built from
``Key=Value`` lines.
"""

from __future__ import annotations

__all__ = ["build_query_string", "build_url", "split_lines"]

import re
from urllib.parse import quote_plus

_LINE_SEPARATORS = re.compile(r"[\r\n]")


def split_lines(text: str | None) -> list[str]:
    r"""Split a freeform text block into stripped, non-empty lines.

    Both ``\n`` and ``\r`` separate lines.

    Args:
        text: The text block, possibly ``None``.

    Returns:
        The stripped lines, without the empty ones.

    Example:
        ```pycon
        >>> from apioptions.utils.url import split_lines
        >>> split_lines("a=1\r\n\n  b=2  \r")
        ['a=1', 'b=2']
        >>> split_lines(None)
        []

        ```
    """
    if not text:
        return []
    lines = (line.strip() for line in _LINE_SEPARATORS.split(text))
    return [line for line in lines if line]


def build_query_string(text: str | None) -> str:
    r"""Build an encoded query string from ``Key=Value`` lines.

    Each line is split on its first ``=``. Key and value are stripped and
    percent-encoded with form encoding. Lines without ``=`` are skipped.

    Args:
        text: The query parameters block.

    Returns:
        The ``&``-joined ``key=value`` pairs, possibly empty.

    Example:
        ```pycon
        >>> from apioptions.utils.url import build_query_string
        >>> build_query_string("q=a b\nfilter=x=y\ninvalid")
        'q=a+b&filter=x%3Dy'

        ```
    """
    pairs = []
    for line in split_lines(text):
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        pairs.append(f"{quote_plus(key.strip(), safe='')}={quote_plus(value.strip(), safe='')}")
    return "&".join(pairs)


def build_url(
    url: str | None = None,
    base_url: str | None = None,
    endpoint_path: str | None = None,
    query_parameters: str | None = None,
) -> str:
    r"""Build the final request URL.

    A non-empty direct ``url`` is used verbatim. Otherwise ``base_url``
    (trailing ``/`` stripped) and ``endpoint_path`` (leading ``/``
    stripped) are joined with a single ``/``. The query string is
    appended with ``?``, or ``&`` if the URL already has a query.

    Args:
        url: The direct URL.
        base_url: The base URL, used when ``url`` is empty.
        endpoint_path: The path appended to ``base_url``.
        query_parameters: ``Key=Value`` lines to encode in the query.

    Returns:
        The final URL. It is empty when no URL field is set.

    Example:
        ```pycon
        >>> from apioptions.utils.url import build_url
        >>> build_url(
        ...     base_url="https://api.example.com/",
        ...     endpoint_path="/v1/things",
        ...     query_parameters="a=1\nb=2",
        ... )
        'https://api.example.com/v1/things?a=1&b=2'
        >>> build_url(url="https://x.org/?page=2", query_parameters="size=10")
        'https://x.org/?page=2&size=10'

        ```
    """
    if url:
        final_url = url
    else:
        base = (base_url or "").rstrip("/")
        path = (endpoint_path or "").lstrip("/")
        final_url = f"{base}/{path}" if base and path else base or path

    query = build_query_string(query_parameters)
    if query:
        separator = "&" if "?" in final_url else "?"
        final_url = f"{final_url}{separator}{query}"
    return final_url
