r"""Unit tests for header composition."""

from __future__ import annotations

from apioptions.auth import ApiKey, BasicAuth, BearerToken, CustomHeader, NoAuth
from apioptions.utils.headers import build_headers, parse_custom_headers, set_header

################################
#     Tests for set_header     #
################################


def test_set_header_adds_new_header() -> None:
    """Test that a new header is appended."""
    headers = {"Accept": "application/json"}
    set_header(headers, "X-Trace", "1")
    assert headers == {"Accept": "application/json", "X-Trace": "1"}


def test_set_header_replaces_case_insensitive() -> None:
    """Test that a header with the same name in another case is
    replaced."""
    headers = {"authorization": "Bearer old", "Accept": "*/*"}
    set_header(headers, "Authorization", "Bearer new")
    assert headers == {"Accept": "*/*", "Authorization": "Bearer new"}


##########################################
#     Tests for parse_custom_headers     #
##########################################


def test_parse_custom_headers_splits_on_first_colon() -> None:
    """Test that only the first ':' separates name and value."""
    assert parse_custom_headers("Origin: https://app.example.com:8443") == [
        ("Origin", "https://app.example.com:8443")
    ]


def test_parse_custom_headers_skips_lines_without_colon() -> None:
    """Test that malformed lines are skipped."""
    assert parse_custom_headers("X-A: 1\nbroken\r\nX-B:2") == [("X-A", "1"), ("X-B", "2")]


def test_parse_custom_headers_value_not_encoded() -> None:
    """Test that values are passed through without encoding."""
    assert parse_custom_headers("X-Query: a b&c=d") == [("X-Query", "a b&c=d")]


def test_parse_custom_headers_empty() -> None:
    """Test that an empty block gives no headers."""
    assert parse_custom_headers(None) == []


###################################
#     Tests for build_headers     #
###################################


def test_build_headers_defaults_order() -> None:
    """Test that Accept and User-Agent come first."""
    headers = build_headers(accept_header="application/json", user_agent="agent/1.0")
    assert list(headers.items()) == [("Accept", "application/json"), ("User-Agent", "agent/1.0")]


def test_build_headers_skips_empty_accept_and_user_agent() -> None:
    """Test that empty Accept and User-Agent are not sent."""
    assert build_headers(accept_header="", user_agent=None) == {}


def test_build_headers_order_custom_then_auth() -> None:
    """Test that custom headers come before the auth header."""
    headers = build_headers(
        accept_header="application/json",
        custom_headers="X-Env: test",
        auth=BearerToken(token="abc"),
    )
    assert list(headers) == ["Accept", "X-Env", "Authorization"]
    assert headers["Authorization"] == "Bearer abc"


def test_build_headers_custom_overrides_accept() -> None:
    """Test that a custom header replaces the Accept header."""
    headers = build_headers(accept_header="application/json", custom_headers="accept: text/plain")
    assert headers == {"accept": "text/plain"}


def test_build_headers_auth_overrides_custom() -> None:
    """Test that the auth header replaces a custom header with the same
    name."""
    headers = build_headers(custom_headers="X-API-Key: old", auth=ApiKey(token="new"))
    assert headers == {"X-API-Key": "new"}


def test_build_headers_basic_auth() -> None:
    """Test the basic authentication header."""
    headers = build_headers(auth=BasicAuth(username="user", password="pass"))
    assert headers == {"Authorization": "Basic dXNlcjpwYXNz"}


def test_build_headers_custom_header_auth() -> None:
    """Test the custom header authentication scheme."""
    headers = build_headers(auth=CustomHeader(header_name="X-Token", token="t"))
    assert headers == {"X-Token": "t"}


def test_build_headers_no_auth() -> None:
    """Test that no auth adds nothing."""
    assert build_headers(auth=NoAuth()) == {}
    assert build_headers() == {}
