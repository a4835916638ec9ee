r"""Retry decision logic."""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apioptions.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether an attempt outcome should be retried.

    Only timeouts and network errors are retryable, and only while fewer
    than ``max_retries`` retries were performed.

    Args:
        max_retries: Maximum number of retries.
    """

    def __init__(self, max_retries: int) -> None:
        self.max_retries = max_retries

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_retries={self.max_retries})"

    def should_retry(self, outcome: Outcome, retry_count: int) -> tuple[bool, str]:
        """Determine if an outcome should trigger a retry.

        Args:
            outcome: The outcome of the last attempt.
            retry_count: Retries performed so far.

        Returns:
            Tuple of (should_retry, reason).
        """
        if not outcome.retryable:
            return (False, f"{outcome.signal.value} is terminal")
        if retry_count >= self.max_retries:
            logger.debug(f"Retries exhausted ({retry_count}/{self.max_retries})")
            return (False, "max retries exhausted")
        return (True, outcome.signal.value)
