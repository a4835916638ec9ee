r"""Abstract base class for retry delay strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long the retry controller waits
    before re-issuing a failed OPTIONS attempt.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay before a given retry.

        Args:
            attempt: The retry number (0-indexed). ``attempt=0`` is the
                delay before the first retry.

        Returns:
            The delay in seconds.
        """
