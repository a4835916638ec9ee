r"""Delay strategies used between retry attempts."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]

from apioptions.backoff.base import BaseBackoffStrategy
from apioptions.backoff.constant import ConstantBackoff
from apioptions.backoff.exponential import ExponentialBackoff
