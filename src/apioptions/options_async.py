r"""Contain the asynchronous functional entry point of an OPTIONS
invocation."""

from __future__ import annotations

__all__ = ["options_async"]

from typing import TYPE_CHECKING, Any

from apioptions.action import OptionsAction
from apioptions.core.config import RequestConfig

if TYPE_CHECKING:
    from apioptions.action import InvocationResult
    from apioptions.callbacks import CallbackConfig
    from apioptions.signals import SignalEmitter, TerminalEvents
    from apioptions.slots import OutputSlots
    from apioptions.transport import HttpTransport

_AUTH_FIELDS = ("auth_type", "auth_token", "username", "password", "custom_auth_header")


def _resolve_config(url: str | None, config: RequestConfig | None, **fields: Any) -> RequestConfig:
    if config is None:
        return RequestConfig.from_fields(url=url, **fields)
    if any(fields.get(name) is not None for name in _AUTH_FIELDS):
        auth_fields = {name: fields.pop(name) for name in _AUTH_FIELDS if name in fields}
        fields["auth"] = RequestConfig.from_fields(**auth_fields).auth
    else:
        for name in _AUTH_FIELDS:
            fields.pop(name, None)
    return config.merge(url=url, **fields)


async def options_async(
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
    r"""Send an HTTP OPTIONS request and report its terminal outcome.

    Timeouts and network errors are retried up to ``max_retries`` times.
    Failures of the exchange are never raised: they are written to the
    output slots and reported by the terminal signal of the result.

    Args:
        url: The full request URL. Overrides ``config.url`` when set.
        config: An optional configuration. If None, it is built from
            ``url`` and ``fields``.
        transport: An optional HTTP transport. Defaults to
            ``HttpxTransport()``.
        outputs: Optional output slots.
        events: Optional event names fired for each terminal signal.
        emitter: Optional host callable receiving the terminal event.
        callbacks: Optional lifecycle callbacks.
        **fields: ``RequestConfig`` fields, plus the flat authentication
            fields accepted by ``RequestConfig.from_fields``. When
            ``config`` is given, non-None fields override it.

    Returns:
        The invocation summary.

    Raises:
        ValueError: If a configuration value is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from apioptions import options_async
        >>> result = asyncio.run(
        ...     options_async("https://api.example.com/things", max_retries=2)
        ... )  # doctest: +SKIP
        >>> result.signal  # doctest: +SKIP
        <Signal.SUCCESS: 'success'>

        ```
    """
    action = OptionsAction(
        _resolve_config(url, config, **fields),
        outputs=outputs,
        events=events,
        emitter=emitter,
        transport=transport,
        callbacks=callbacks,
    )
    return await action.run()
