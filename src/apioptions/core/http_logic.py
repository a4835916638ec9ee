r"""Execute one OPTIONS attempt.

An attempt composes the URL and the headers from the configuration,
issues the request through the transport, awaits its completion and
classifies the result. Awaiting the transport is the only suspension
point of an attempt.
"""

from __future__ import annotations

__all__ = [
    "METHOD",
    "AttemptResult",
    "AttemptState",
    "compose_request",
    "execute_options_attempt",
]

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from apioptions.core.classifier import classify
from apioptions.utils.headers import build_headers
from apioptions.utils.structured_logging import log_structured
from apioptions.utils.url import build_url

if TYPE_CHECKING:
    from apioptions.core.config import RequestConfig
    from apioptions.outcome import Outcome
    from apioptions.slots import OutputSlots
    from apioptions.transport import HttpTransport

logger: logging.Logger = logging.getLogger(__name__)

METHOD = "OPTIONS"


@dataclass
class AttemptState:
    """Mutable counters of one invocation.

    Created once per activation and shared by all its attempts.

    Attributes:
        start_time: ``time.monotonic()`` at activation.
        retry_count: Number of retries performed so far (0-based).
    """

    start_time: float = field(default_factory=time.monotonic)
    retry_count: int = 0

    def elapsed_ms(self) -> float:
        """Milliseconds elapsed since activation."""
        return (time.monotonic() - self.start_time) * 1000.0


@dataclass(frozen=True)
class AttemptResult:
    """The result of one attempt.

    Attributes:
        url: The URL the request was sent to.
        outcome: The classified outcome.
        elapsed_ms: Milliseconds since activation when the attempt completed.
        attempt_ms: Duration of this attempt in milliseconds.
    """

    url: str
    outcome: Outcome
    elapsed_ms: float
    attempt_ms: float


def _log_request_details(config: RequestConfig, url: str, headers: dict[str, str]) -> None:
    logger.info("=== API OPTIONS Request Details ===")
    logger.info(f"Method: {METHOD}")
    logger.info(f"URL: {url}")
    logger.info(f"Timeout: {config.effective_timeout}s")
    logger.info(f"Redirect limit: {config.redirect_limit}")
    logger.info(f"Headers: {', '.join(headers)}")


def compose_request(config: RequestConfig) -> tuple[str, dict[str, str]]:
    r"""Compose the URL and the headers of an OPTIONS request.

    Example:
        ```pycon
        >>> from apioptions.core.config import RequestConfig
        >>> from apioptions.core.http_logic import compose_request
        >>> url, headers = compose_request(
        ...     RequestConfig(
        ...         base_url="https://api.example.com/",
        ...         endpoint_path="/v1/things",
        ...         query_parameters="a=1\nb=2",
        ...     )
        ... )
        >>> url
        'https://api.example.com/v1/things?a=1&b=2'

        ```
    """
    url = build_url(
        url=config.url,
        base_url=config.base_url,
        endpoint_path=config.endpoint_path,
        query_parameters=config.query_parameters,
    )
    headers = build_headers(
        accept_header=config.accept_header,
        user_agent=config.user_agent,
        custom_headers=config.custom_headers,
        auth=config.auth,
    )
    return url, headers


async def execute_options_attempt(
    config: RequestConfig,
    transport: HttpTransport,
    state: AttemptState,
    *,
    outputs: OutputSlots | None = None,
) -> AttemptResult:
    r"""Issue one OPTIONS request and classify its result.

    The URL and the headers are rebuilt from ``config`` on every call, so
    a retry repeats the whole attempt.

    Args:
        config: The invocation configuration.
        transport: The HTTP transport.
        state: The invocation counters; only read here.
        outputs: Optional output slots. The elapsed time is written to
            ``response_time`` when the attempt completes.

    Returns:
        The attempt result.
    """
    url, headers = compose_request(config)

    if config.log_request or config.debug_mode:
        log_structured(
            logger,
            logging.INFO,
            f"[API OPTIONS] Request to: {url}",
            url=url,
            attempt=state.retry_count + 1,
        )
    if config.debug_mode:
        _log_request_details(config, url, headers)

    attempt_start = time.monotonic()
    result = await transport.issue(
        METHOD,
        url,
        headers=headers,
        timeout=config.effective_timeout,
        follow_redirects=config.follow_redirects,
        max_redirects=config.redirect_limit,
    )
    attempt_ms = (time.monotonic() - attempt_start) * 1000.0
    elapsed_ms = state.elapsed_ms()
    if outputs is not None:
        outputs.write("response_time", elapsed_ms)

    outcome = classify(result)
    logger.debug(
        f"{METHOD} request to {url} completed as {result.kind.value} "
        f"({outcome.signal.value}) in {attempt_ms:.1f}ms"
    )
    return AttemptResult(url=url, outcome=outcome, elapsed_ms=elapsed_ms, attempt_ms=attempt_ms)
