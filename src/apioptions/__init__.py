r"""apioptions - Single-shot HTTP OPTIONS requests with retry logic.

This package issues one HTTP OPTIONS request per activation, built on top
of the httpx library. It composes the URL and the headers from loosely
structured input, injects the authentication header, retries timeouts and
network errors, and reports the outcome through optional output slots and
exactly one terminal signal.

Key Features:
    - URL composition from a base URL, an endpoint path and query lines
    - Bearer token, API key, basic and custom header authentication
    - Classification into success, client error, server error, network
      error and timeout outcomes
    - Bounded retries of timeouts and network errors with a configurable
      backoff
    - Allow and CORS preflight headers exposed as dedicated outputs
    - Callback system and structured logging for observability

Example:
    ```pycon
    >>> from apioptions import OutputSlots, options
    >>> outputs = OutputSlots.bind_all()
    >>> result = options(
    ...     "https://api.example.com/things", outputs=outputs
    ... )  # doctest: +SKIP
    >>> outputs.allowed_methods.value  # doctest: +SKIP
    'GET, POST, OPTIONS'

    ```
"""

from __future__ import annotations

__all__ = [
    "ApiOptionsError",
    "InvocationInProgressError",
    "InvocationResult",
    "OptionsAction",
    "OutputSlots",
    "RequestConfig",
    "Signal",
    "Slot",
    "TerminalEvents",
    "__version__",
    "options",
    "options_async",
]

from importlib.metadata import PackageNotFoundError, version

from apioptions.action import InvocationResult, OptionsAction
from apioptions.core.config import RequestConfig
from apioptions.exceptions import ApiOptionsError, InvocationInProgressError
from apioptions.options import options
from apioptions.options_async import options_async
from apioptions.signals import Signal, TerminalEvents
from apioptions.slots import OutputSlots, Slot

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
