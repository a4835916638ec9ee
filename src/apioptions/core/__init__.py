r"""Core logic of an OPTIONS invocation: configuration, validation,
single attempt execution and outcome classification."""

from __future__ import annotations

__all__ = [
    "DEFAULT_ACCEPT",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "REDIRECT_LIMIT",
    "AttemptResult",
    "AttemptState",
    "RequestConfig",
    "classify",
    "compose_request",
    "execute_options_attempt",
    "record_outcome",
    "record_response",
    "validate_max_retries",
    "validate_retry_params",
    "validate_timeout",
]

from apioptions.core.classifier import classify, record_outcome, record_response
from apioptions.core.config import (
    DEFAULT_ACCEPT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    REDIRECT_LIMIT,
    RequestConfig,
)
from apioptions.core.http_logic import (
    AttemptResult,
    AttemptState,
    compose_request,
    execute_options_attempt,
)
from apioptions.core.validation import (
    validate_max_retries,
    validate_retry_params,
    validate_timeout,
)
