r"""Retry strategy for calculating the delay before a retry."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from apioptions.backoff import ConstantBackoff

if TYPE_CHECKING:
    from apioptions.backoff import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Calculates the delay before each retry.

    Args:
        backoff_strategy: Backoff strategy instance. Defaults to
            ``ConstantBackoff()``.
    """

    def __init__(self, backoff_strategy: BaseBackoffStrategy | None = None) -> None:
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy if backoff_strategy is not None else ConstantBackoff()
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(backoff_strategy={self.backoff_strategy!r})"

    def calculate_delay(self, retry_count: int) -> float:
        """Calculate the delay before a retry.

        Args:
            retry_count: The retry about to be performed (1-indexed).

        Returns:
            Sleep time in seconds.
        """
        delay = self.backoff_strategy.calculate(retry_count - 1)
        logger.debug(f"Waiting {delay:.2f}s before retry {retry_count}")
        return delay
