r"""Contain the blocking functional entry point of an OPTIONS
invocation."""

from __future__ import annotations

__all__ = ["options"]

import asyncio
from typing import TYPE_CHECKING, Any

from apioptions.options_async import options_async

if TYPE_CHECKING:
    from apioptions.action import InvocationResult
    from apioptions.callbacks import CallbackConfig
    from apioptions.core.config import RequestConfig
    from apioptions.signals import SignalEmitter, TerminalEvents
    from apioptions.slots import OutputSlots
    from apioptions.transport import HttpTransport


def options(
    url: str | None = None,
    *,
    config: RequestConfig | None = None,
    transport: HttpTransport | None = None,
    outputs: OutputSlots | None = None,
    events: TerminalEvents | None = None,
    emitter: SignalEmitter | None = None,
    callbacks: CallbackConfig | None = None,
    **fields: Any,
) -> InvocationResult:
    r"""Send an HTTP OPTIONS request and block until its terminal
    outcome.

    This runs ``options_async`` in a new event loop, so it cannot be
    called from a running loop.

    Args:
        url: The full request URL.
        config: An optional configuration.
        transport: An optional HTTP transport.
        outputs: Optional output slots.
        events: Optional event names fired for each terminal signal.
        emitter: Optional host callable receiving the terminal event.
        callbacks: Optional lifecycle callbacks.
        **fields: ``RequestConfig`` fields and flat authentication fields.

    Returns:
        The invocation summary.

    Example:
        ```pycon
        >>> from apioptions import options
        >>> result = options(
        ...     base_url="https://api.example.com",
        ...     endpoint_path="/things",
        ...     auth_type="bearer_token",
        ...     auth_token="abc",
        ... )  # doctest: +SKIP

        ```
    """
    return asyncio.run(
        options_async(
            url,
            config=config,
            transport=transport,
            outputs=outputs,
            events=events,
            emitter=emitter,
            callbacks=callbacks,
            **fields,
        )
    )
