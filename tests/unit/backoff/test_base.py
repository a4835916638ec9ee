r"""Unit tests for the backoff strategy base class."""

from __future__ import annotations

import pytest

from apioptions.backoff import BaseBackoffStrategy
from apioptions.retry import RetryStrategy


class LinearBackoff(BaseBackoffStrategy):
    def calculate(self, attempt: int) -> float:
        return 0.1 * (attempt + 1)


def test_base_backoff_strategy_is_abstract() -> None:
    """Test that the base class cannot be instantiated."""
    with pytest.raises(TypeError):
        BaseBackoffStrategy()


def test_custom_backoff_strategy() -> None:
    """Test that a custom strategy drives the retry delays."""
    strategy = RetryStrategy(LinearBackoff())
    assert strategy.calculate_delay(1) == pytest.approx(0.1)
    assert strategy.calculate_delay(3) == pytest.approx(0.3)
