r"""Configuration dataclasses for retry behavior."""

from __future__ import annotations

__all__ = ["CallbackConfig", "RetryConfig"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from apioptions.backoff import ConstantBackoff
from apioptions.callbacks import CallbackConfig
from apioptions.core.config import DEFAULT_MAX_RETRIES
from apioptions.core.validation import validate_max_retries

if TYPE_CHECKING:
    from apioptions.backoff import BaseBackoffStrategy
    from apioptions.core.config import RequestConfig


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    Attributes:
        max_retries: Maximum number of retries after the initial attempt.
        backoff_strategy: Strategy computing the delay before each retry.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    backoff_strategy: BaseBackoffStrategy = field(default_factory=ConstantBackoff)

    def __post_init__(self) -> None:
        validate_max_retries(self.max_retries)

    @classmethod
    def from_request_config(cls, config: RequestConfig) -> RetryConfig:
        """Extract the retry settings of a request configuration.

        Example:
            ```pycon
            >>> from apioptions.core.config import RequestConfig
            >>> from apioptions.retry import RetryConfig
            >>> RetryConfig.from_request_config(RequestConfig(max_retries=2, retry_delay=0.5))
            RetryConfig(max_retries=2, backoff_strategy=ConstantBackoff(delay=0.5))

            ```
        """
        return cls(max_retries=config.max_retries, backoff_strategy=config.effective_backoff)
