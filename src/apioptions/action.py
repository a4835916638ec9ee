r"""Contain the OPTIONS action: one activation, one terminal signal.

The action owns the configuration snapshot, the optional output slots and
the terminal event bindings. Each activation runs a single invocation on
the event loop: it makes the attempts, records their outcomes, then fires
exactly one terminal event. Retries in between fire nothing.

Example:
    ```pycon
    >>> import asyncio
    >>> from apioptions.action import OptionsAction
    >>> from apioptions.core.config import RequestConfig
    >>> from apioptions.slots import OutputSlots
    >>> async def main():
    ...     action = OptionsAction(
    ...         RequestConfig(url="https://api.example.com/things"),
    ...         outputs=OutputSlots.bind_all(),
    ...         emitter=print,
    ...     )
    ...     task = action.on_enter()
    ...     return await task
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["InvocationResult", "OptionsAction"]

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apioptions.callbacks import CallbackConfig
from apioptions.core.http_logic import AttemptState, compose_request
from apioptions.exceptions import InvocationInProgressError
from apioptions.retry import AsyncRetryExecutor, RetryConfig
from apioptions.signals import TerminalEvents
from apioptions.transport import HttpxTransport
from apioptions.utils.structured_logging import correlation_scope, log_structured

if TYPE_CHECKING:
    from apioptions.core.config import RequestConfig
    from apioptions.outcome import Outcome
    from apioptions.signals import Signal, SignalEmitter
    from apioptions.slots import OutputSlots
    from apioptions.transport import HttpTransport

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvocationResult:
    """Summary of a finished invocation.

    Attributes:
        signal: The terminal signal.
        outcome: The outcome of the last attempt.
        url: The request URL.
        retries: Number of retries performed.
        elapsed_ms: Milliseconds between activation and the last
            attempt's completion.
        event: The event name that was fired, or ``None`` if the signal
            was unbound.
    """

    signal: Signal
    outcome: Outcome
    url: str
    retries: int
    elapsed_ms: float
    event: str | None = None


class OptionsAction:
    """Issue an OPTIONS request and fire one terminal event.

    Args:
        config: The configuration snapshot used by every invocation.
        outputs: The output slots. If ``None``, nothing is written.
        events: Event names fired for each terminal signal. Defaults to
            each signal's own name.
        emitter: Host callable receiving the terminal event name. If
            ``None``, no event is fired.
        transport: The HTTP transport. Defaults to ``HttpxTransport()``.
        callbacks: Optional lifecycle callbacks.
    """

    def __init__(
        self,
        config: RequestConfig,
        *,
        outputs: OutputSlots | None = None,
        events: TerminalEvents | None = None,
        emitter: SignalEmitter | None = None,
        transport: HttpTransport | None = None,
        callbacks: CallbackConfig | None = None,
    ) -> None:
        self.config = config
        self.outputs = outputs
        self.events = events or TerminalEvents()
        self.emitter = emitter
        self.transport: HttpTransport = transport or HttpxTransport()
        self.callbacks = callbacks or CallbackConfig()
        self._running = False
        self._task: asyncio.Task[InvocationResult] | None = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(config={self.config!r}, "
            f"transport={self.transport!r})"
        )

    @property
    def running(self) -> bool:
        """``True`` while an invocation has not fired its terminal event."""
        return self._running or (self._task is not None and not self._task.done())

    def on_enter(self) -> asyncio.Task[InvocationResult]:
        """Activate the action without blocking the caller.

        The invocation is scheduled on the running event loop.

        Returns:
            The task running the invocation.

        Raises:
            InvocationInProgressError: If a previous invocation is still
                running.
            RuntimeError: If no event loop is running.
        """
        if self.running:
            raise InvocationInProgressError(self.config.url)
        self._task = asyncio.get_running_loop().create_task(self.run())
        return self._task

    async def run(self) -> InvocationResult:
        """Run one invocation to its terminal signal.

        Returns:
            The invocation summary.

        Raises:
            InvocationInProgressError: If another invocation of this action
                is running.
        """
        if self._running:
            raise InvocationInProgressError(self.config.url)
        self._running = True
        try:
            with correlation_scope(uuid.uuid4().hex):
                return await self._invoke()
        finally:
            self._running = False

    async def _invoke(self) -> InvocationResult:
        state = AttemptState()
        url, _ = compose_request(self.config)
        logger.debug(f"Starting OPTIONS invocation to {url}")
        executor = AsyncRetryExecutor(RetryConfig.from_request_config(self.config), self.callbacks)
        result = await executor.execute(
            self.config, self.transport, outputs=self.outputs, state=state
        )
        outcome = result.outcome

        fired = self.events.fire(self.emitter, outcome.signal)
        event = self.events.event_for(outcome.signal) if fired else None
        log_structured(
            logger,
            logging.DEBUG,
            f"OPTIONS invocation finished with {outcome.signal.value}",
            url=result.url,
            retries=state.retry_count,
            elapsed_ms=result.elapsed_ms,
            event=event,
        )
        executor.callbacks.on_terminal(result.url, state.retry_count, outcome, result.elapsed_ms)
        return InvocationResult(
            signal=outcome.signal,
            outcome=outcome,
            url=result.url,
            retries=state.retry_count,
            elapsed_ms=result.elapsed_ms,
            event=event,
        )
