r"""Pure helpers used to compose OPTIONS requests and format their
responses."""

from __future__ import annotations

__all__ = [
    "build_headers",
    "build_query_string",
    "build_url",
    "format_headers",
    "get_header",
    "get_status_message",
    "parse_custom_headers",
    "split_lines",
]

from apioptions.utils.headers import build_headers, parse_custom_headers
from apioptions.utils.status import format_headers, get_header, get_status_message
from apioptions.utils.url import build_query_string, build_url, split_lines
