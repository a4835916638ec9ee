r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryConfig: Configuration for retry behavior
    - CallbackConfig: Configuration for callbacks
    - RetryStrategy: Strategy for calculating retry delays
    - RetryDecider: Logic for deciding whether to retry
    - CallbackManager: Manager for callback invocations
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackConfig",
    "CallbackManager",
    "RetryConfig",
    "RetryDecider",
    "RetryStrategy",
]

from apioptions.retry.config import CallbackConfig, RetryConfig
from apioptions.retry.decider import RetryDecider
from apioptions.retry.executor_async import AsyncRetryExecutor
from apioptions.retry.manager import CallbackManager
from apioptions.retry.strategy import RetryStrategy
