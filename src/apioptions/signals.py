r"""Terminal signals fired at the end of an OPTIONS invocation."""

from __future__ import annotations

__all__ = ["Signal", "SignalEmitter", "TerminalEvents"]

import enum
from dataclasses import dataclass
from typing import Protocol


class Signal(str, enum.Enum):
    r"""The five terminal outcome categories."""

    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"


class SignalEmitter(Protocol):
    r"""Host capability that receives the terminal event of an
    invocation."""

    def __call__(self, name: str) -> None: ...


@dataclass(frozen=True)
class TerminalEvents:
    """Event names fired for each terminal signal.

    A ``None`` event is unbound: the signal is silently not fired.

    Example:
        ```pycon
        >>> from apioptions.signals import Signal, TerminalEvents
        >>> events = TerminalEvents(success="FINISHED", timeout=None)
        >>> events.event_for(Signal.SUCCESS)
        'FINISHED'
        >>> events.event_for(Signal.TIMEOUT)
        >>> events.event_for(Signal.CLIENT_ERROR)
        'client_error'

        ```
    """

    success: str | None = Signal.SUCCESS.value
    client_error: str | None = Signal.CLIENT_ERROR.value
    server_error: str | None = Signal.SERVER_ERROR.value
    network_error: str | None = Signal.NETWORK_ERROR.value
    timeout: str | None = Signal.TIMEOUT.value

    def event_for(self, signal: Signal) -> str | None:
        """Return the event name bound to a signal, if any."""
        return getattr(self, signal.value)

    def fire(self, emitter: SignalEmitter | None, signal: Signal) -> bool:
        """Fire the event bound to ``signal``.

        Args:
            emitter: The host emitter. Nothing is fired if it is ``None``.
            signal: The terminal signal.

        Returns:
            ``True`` if an event was emitted.
        """
        event = self.event_for(signal)
        if emitter is None or not event:
            return False
        emitter(event)
        return True
