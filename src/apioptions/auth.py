r"""Authentication schemes injected into the OPTIONS request headers.

The scheme is a closed union of five variants. Exactly one is active per
invocation and ``auth_header`` is the only place that turns a variant into
a header.

Example:
    ```pycon
    >>> from apioptions.auth import BasicAuth, BearerToken, auth_header
    >>> auth_header(BearerToken(token="abc"))
    ('Authorization', 'Bearer abc')
    >>> auth_header(BasicAuth(username="user", password="pass"))
    ('Authorization', 'Basic dXNlcjpwYXNz')

    ```
"""

from __future__ import annotations

__all__ = [
    "ApiKey",
    "AuthScheme",
    "AuthType",
    "BasicAuth",
    "BearerToken",
    "CustomHeader",
    "NoAuth",
    "auth_from_type",
    "auth_header",
]

import base64
import enum
from dataclasses import dataclass
from typing import Union


class AuthType(str, enum.Enum):
    r"""Names of the supported authentication schemes."""

    NONE = "none"
    BEARER_TOKEN = "bearer_token"
    API_KEY = "api_key"
    BASIC_AUTH = "basic_auth"
    CUSTOM_HEADER = "custom_header"


@dataclass(frozen=True)
class NoAuth:
    """No authentication header is added."""


@dataclass(frozen=True)
class BearerToken:
    """``Authorization: Bearer <token>``.

    Attributes:
        token: The bearer token. Nothing is sent if it is empty.
    """

    token: str | None = None


@dataclass(frozen=True)
class ApiKey:
    """``X-API-Key: <token>``.

    Attributes:
        token: The API key. Nothing is sent if it is empty.
    """

    token: str | None = None


@dataclass(frozen=True)
class BasicAuth:
    """``Authorization: Basic base64(username:password)``.

    Attributes:
        username: The user name. Nothing is sent if it is empty.
        password: The password. May be empty.
    """

    username: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class CustomHeader:
    """``<header_name>: <token>``.

    Attributes:
        header_name: The name of the header carrying the token.
        token: The token. Nothing is sent unless both fields are set.
    """

    header_name: str | None = None
    token: str | None = None


AuthScheme = Union[NoAuth, BearerToken, ApiKey, BasicAuth, CustomHeader]


def auth_from_type(
    auth_type: AuthType | str = AuthType.NONE,
    *,
    auth_token: str | None = None,
    username: str | None = None,
    password: str | None = None,
    custom_auth_header: str | None = None,
) -> AuthScheme:
    r"""Build the scheme selected by ``auth_type`` from flat credential
    fields.

    Credentials that do not belong to the selected scheme are ignored.

    Args:
        auth_type: The scheme to build, as an ``AuthType`` or its value.
        auth_token: Token used by the bearer, API key and custom header
            schemes.
        username: User name used by basic authentication.
        password: Password used by basic authentication.
        custom_auth_header: Header name used by the custom header scheme.

    Returns:
        The authentication scheme.

    Raises:
        ValueError: If ``auth_type`` is not a known scheme.

    Example:
        ```pycon
        >>> from apioptions.auth import auth_from_type
        >>> auth_from_type("api_key", auth_token="k-123")
        ApiKey(token='k-123')
        >>> auth_from_type()
        NoAuth()

        ```
    """
    auth_type = AuthType(auth_type)
    if auth_type is AuthType.BEARER_TOKEN:
        return BearerToken(token=auth_token)
    if auth_type is AuthType.API_KEY:
        return ApiKey(token=auth_token)
    if auth_type is AuthType.BASIC_AUTH:
        return BasicAuth(username=username, password=password)
    if auth_type is AuthType.CUSTOM_HEADER:
        return CustomHeader(header_name=custom_auth_header, token=auth_token)
    return NoAuth()


def auth_header(scheme: AuthScheme) -> tuple[str, str] | None:
    r"""Return the header injected by an authentication scheme.

    Args:
        scheme: The active authentication scheme.

    Returns:
        A ``(name, value)`` pair, or ``None`` if the scheme adds nothing
        (``NoAuth`` or missing credentials).

    Raises:
        TypeError: If ``scheme`` is not one of the known variants.

    Example:
        ```pycon
        >>> from apioptions.auth import ApiKey, CustomHeader, NoAuth, auth_header
        >>> auth_header(ApiKey(token="k-123"))
        ('X-API-Key', 'k-123')
        >>> auth_header(CustomHeader(header_name="X-Token", token=""))
        >>> auth_header(NoAuth())

        ```
    """
    if isinstance(scheme, NoAuth):
        return None
    if isinstance(scheme, BearerToken):
        return ("Authorization", f"Bearer {scheme.token}") if scheme.token else None
    if isinstance(scheme, ApiKey):
        return ("X-API-Key", scheme.token) if scheme.token else None
    if isinstance(scheme, BasicAuth):
        if not scheme.username:
            return None
        credentials = f"{scheme.username}:{scheme.password or ''}".encode()
        return ("Authorization", f"Basic {base64.b64encode(credentials).decode('ascii')}")
    if isinstance(scheme, CustomHeader):
        if scheme.header_name and scheme.token:
            return (scheme.header_name, scheme.token)
        return None
    msg = f"Unsupported authentication scheme: {scheme!r}"
    raise TypeError(msg)
