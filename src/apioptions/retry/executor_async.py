r"""Asynchronous retry executor for OPTIONS invocations.

This module provides the AsyncRetryExecutor class that runs the attempts
of one invocation, records every outcome in the output slots and retries
timeouts and network errors until the retry budget is spent.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING

from apioptions.callbacks import CallbackConfig
from apioptions.core.classifier import record_outcome
from apioptions.core.http_logic import AttemptState, compose_request, execute_options_attempt
from apioptions.outcome import Timeout
from apioptions.retry.decider import RetryDecider
from apioptions.retry.manager import CallbackManager
from apioptions.retry.strategy import RetryStrategy
from apioptions.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from apioptions.core.config import RequestConfig
    from apioptions.core.http_logic import AttemptResult
    from apioptions.retry.config import RetryConfig
    from apioptions.slots import OutputSlots
    from apioptions.transport import HttpTransport

logger: logging.Logger = logging.getLogger(__name__)


def _log_outcome(result: AttemptResult) -> None:
    outcome = result.outcome
    if outcome.response is not None:
        log_structured(
            logger,
            logging.INFO,
            f"[API OPTIONS] Response {outcome.response.status_code} in "
            f"{result.elapsed_ms:.0f}ms",
            url=result.url,
            status_code=outcome.response.status_code,
            elapsed_ms=result.elapsed_ms,
        )
    if isinstance(outcome, Timeout):
        log_structured(
            logger,
            logging.WARNING,
            f"[API OPTIONS] Request timeout after {result.elapsed_ms:.0f}ms",
            url=result.url,
            elapsed_ms=result.elapsed_ms,
        )
    elif outcome.message is not None:
        log_structured(
            logger,
            logging.ERROR,
            f"[API OPTIONS] {outcome.message}",
            url=result.url,
            signal=outcome.signal.value,
        )


class AsyncRetryExecutor:
    """Runs the attempts of an OPTIONS invocation with retry logic.

    The executor orchestrates the following components:
    - RetryStrategy: Calculates the delay before each retry
    - RetryDecider: Determines whether an outcome is retried
    - CallbackManager: Invokes user-defined callbacks at lifecycle events

    Attributes:
        config: Retry configuration.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from apioptions.core.config import RequestConfig
        >>> from apioptions.retry import AsyncRetryExecutor, RetryConfig
        >>> from apioptions.transport import HttpxTransport
        >>> async def main():
        ...     config = RequestConfig(url="https://api.example.com/things", max_retries=2)
        ...     executor = AsyncRetryExecutor(RetryConfig.from_request_config(config))
        ...     return await executor.execute(config, HttpxTransport())
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        retry_config: RetryConfig,
        callback_config: CallbackConfig | None = None,
    ) -> None:
        self.config = retry_config
        self.strategy: RetryStrategy = RetryStrategy(retry_config.backoff_strategy)
        self.decider: RetryDecider = RetryDecider(retry_config.max_retries)
        self.callbacks: CallbackManager = CallbackManager(callback_config or CallbackConfig())

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self.config!r})"

    async def execute(
        self,
        request_config: RequestConfig,
        transport: HttpTransport,
        *,
        outputs: OutputSlots | None = None,
        state: AttemptState | None = None,
    ) -> AttemptResult:
        """Run attempts until one yields a terminal outcome.

        Every outcome is written to ``outputs`` before the retry decision,
        so a retried failure leaves its error message in place until the
        next attempt completes. Retries are bounded: at most
        ``max_retries + 1`` attempts are made and ``state.retry_count``
        never exceeds ``max_retries``.

        Args:
            request_config: The invocation configuration.
            transport: The HTTP transport.
            outputs: Optional output slots.
            state: The invocation counters. A fresh state is created if
                ``None``.

        Returns:
            The result of the last attempt.
        """
        state = state if state is not None else AttemptState()
        max_retries = self.config.max_retries
        url, _ = compose_request(request_config)
        while True:
            self.callbacks.on_request(url, state.retry_count, max_retries)
            result = await execute_options_attempt(
                request_config, transport, state, outputs=outputs
            )
            outcome = result.outcome
            if outputs is not None:
                record_outcome(outcome, outputs)
            if request_config.log_response or request_config.debug_mode:
                _log_outcome(result)

            should_retry, reason = self.decider.should_retry(outcome, state.retry_count)
            if not should_retry:
                logger.debug(f"OPTIONS {result.url}: stopping ({reason})")
                return result

            state.retry_count += 1
            delay = self.strategy.calculate_delay(state.retry_count)
            if request_config.debug_mode:
                logger.info(f"Retrying... Attempt {state.retry_count}/{max_retries}")
            self.callbacks.on_retry(result.url, state.retry_count, max_retries, delay, outcome)
            await asyncio.sleep(delay)
