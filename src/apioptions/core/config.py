r"""Configuration dataclass and defaults of an OPTIONS invocation.

A ``RequestConfig`` is a read-only snapshot of the designer-supplied
fields. It is taken once when the action is activated and used unchanged
by every attempt of the invocation, retries included.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ACCEPT",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "FIELD_NAMES",
    "REDIRECT_LIMIT",
    "RequestConfig",
]

from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any

from apioptions.auth import AuthType, NoAuth, auth_from_type
from apioptions.backoff import ConstantBackoff
from apioptions.core.validation import validate_retry_params, validate_timeout
from apioptions.transport import DEFAULT_MAX_REDIRECTS

if TYPE_CHECKING:
    from apioptions.auth import AuthScheme
    from apioptions.backoff import BaseBackoffStrategy

# Default timeout in seconds, 0 disables the timeout
DEFAULT_TIMEOUT = 30.0

# Default maximum number of retries on timeout or network error
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 0

# Default delay in seconds before each retry
DEFAULT_RETRY_DELAY = 1.0

DEFAULT_ACCEPT = "application/json"

DEFAULT_USER_AGENT = "apioptions OPTIONS action"

# Redirects followed when follow_redirects is enabled
REDIRECT_LIMIT = DEFAULT_MAX_REDIRECTS


@dataclass(frozen=True)
class RequestConfig:
    """Snapshot of the fields configuring an OPTIONS invocation.

    Text fields set to ``None`` behave like empty strings.

    Args:
        url: The full request URL. When set, it wins over ``base_url`` and
            ``endpoint_path``.
        base_url: The base URL, used when ``url`` is empty.
        endpoint_path: The path appended to ``base_url``.
        auth: The authentication scheme.
        custom_headers: Extra headers, one ``Key:Value`` per line.
        query_parameters: Query parameters, one ``Key=Value`` per line.
        accept_header: Value of the ``Accept`` header.
        user_agent: Value of the ``User-Agent`` header.
        timeout: Request timeout in seconds. ``0`` disables it. Must be >= 0.
            Fractional values are kept as is and are not rounded to whole
            seconds, so ``0.4`` enforces a 0.4 s timeout.
        follow_redirects: Whether redirects are followed automatically.
        max_retries: Maximum number of retries on timeout or network error.
            Must be >= 0.
        retry_delay: Delay in seconds before each retry. Must be >= 0.
            Ignored if ``backoff_strategy`` is provided.
        backoff_strategy: Optional custom delay strategy.
        log_request: Log the request at INFO level.
        log_response: Log the response or failure at INFO level or above.
        debug_mode: Log request details and retries.

    Example:
        ```pycon
        >>> from apioptions.core.config import RequestConfig
        >>> config = RequestConfig(url="https://api.example.com/things")
        >>> config.timeout
        30.0
        >>> config.merge(max_retries=2, timeout=None).max_retries
        2

        ```
    """

    url: str | None = None
    base_url: str | None = None
    endpoint_path: str | None = None
    auth: AuthScheme = field(default_factory=NoAuth)
    custom_headers: str | None = None
    query_parameters: str | None = None
    accept_header: str | None = DEFAULT_ACCEPT
    user_agent: str | None = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    backoff_strategy: BaseBackoffStrategy | None = None
    log_request: bool = False
    log_response: bool = False
    debug_mode: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_timeout(self.timeout)
        validate_retry_params(max_retries=self.max_retries, retry_delay=self.retry_delay)

    @classmethod
    def from_fields(
        cls,
        *,
        auth_type: AuthType | str = AuthType.NONE,
        auth_token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        custom_auth_header: str | None = None,
        **kwargs: Any,
    ) -> RequestConfig:
        """Build a configuration from the flat fields of the host.

        Args:
            auth_type: The authentication scheme name.
            auth_token: Bearer token, API key or custom header token.
            username: User name for basic authentication.
            password: Password for basic authentication.
            custom_auth_header: Header name for the custom header scheme.
            **kwargs: The other ``RequestConfig`` fields.

        Returns:
            The configuration.

        Example:
            ```pycon
            >>> from apioptions.core.config import RequestConfig
            >>> config = RequestConfig.from_fields(
            ...     url="https://api.example.com",
            ...     auth_type="bearer_token",
            ...     auth_token="abc",
            ... )
            >>> config.auth
            BearerToken(token='abc')

            ```
        """
        auth = auth_from_type(
            auth_type,
            auth_token=auth_token,
            username=username,
            password=password,
            custom_auth_header=custom_auth_header,
        )
        return cls(auth=auth, **kwargs)

    @property
    def redirect_limit(self) -> int:
        """Number of redirects followed, 0 when redirects are disabled."""
        return REDIRECT_LIMIT if self.follow_redirects else 0

    @property
    def effective_timeout(self) -> float | None:
        """Timeout passed to the transport, ``None`` when disabled."""
        return self.timeout if self.timeout > 0 else None

    @property
    def effective_backoff(self) -> BaseBackoffStrategy:
        """The delay strategy used between retries."""
        if self.backoff_strategy is not None:
            return self.backoff_strategy
        return ConstantBackoff(delay=self.retry_delay)

    def merge(self, **overrides: Any) -> RequestConfig:
        """Create a new config with the non-None overrides applied.

        Args:
            **overrides: Fields to override. ``None`` values are ignored.

        Returns:
            A new ``RequestConfig``; this one is unchanged.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a dictionary.

        The authentication scheme and the backoff strategy are returned
        as objects, not converted.
        """
        return {name: getattr(self, name) for name in FIELD_NAMES}


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(RequestConfig))
