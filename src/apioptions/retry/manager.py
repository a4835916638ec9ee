r"""Callback manager for the invocation lifecycle events."""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING

from apioptions.callbacks import (
    invoke_on_failure,
    invoke_on_request,
    invoke_on_retry,
    invoke_on_success,
)
from apioptions.outcome import Success

if TYPE_CHECKING:
    from apioptions.callbacks import CallbackConfig
    from apioptions.outcome import Outcome


class CallbackManager:
    """Invokes the user-defined callbacks of an invocation.

    Attributes:
        callbacks: The callback configuration.
    """

    def __init__(self, callbacks: CallbackConfig) -> None:
        self.callbacks = callbacks

    def on_request(self, url: str, retry_count: int, max_retries: int) -> None:
        invoke_on_request(
            self.callbacks.on_request, url=url, retry_count=retry_count, max_retries=max_retries
        )

    def on_retry(
        self,
        url: str,
        retry_count: int,
        max_retries: int,
        wait_time: float,
        outcome: Outcome,
    ) -> None:
        invoke_on_retry(
            self.callbacks.on_retry,
            url=url,
            retry_count=retry_count,
            max_retries=max_retries,
            wait_time=wait_time,
            outcome=outcome,
        )

    def on_terminal(self, url: str, retry_count: int, outcome: Outcome, elapsed_ms: float) -> None:
        """Invoke on_success for a success outcome, on_failure otherwise."""
        if isinstance(outcome, Success):
            invoke_on_success(
                self.callbacks.on_success,
                url=url,
                retry_count=retry_count,
                response=outcome.response,
                elapsed_ms=elapsed_ms,
            )
        else:
            invoke_on_failure(
                self.callbacks.on_failure,
                url=url,
                retry_count=retry_count,
                outcome=outcome,
                elapsed_ms=elapsed_ms,
            )
