r"""Unit tests for package exceptions."""

from __future__ import annotations

from apioptions.exceptions import ApiOptionsError, InvocationInProgressError


def test_invocation_in_progress_error_with_url() -> None:
    """Test the message with a target URL."""
    error = InvocationInProgressError("https://api.example.com")
    assert isinstance(error, ApiOptionsError)
    assert error.url == "https://api.example.com"
    assert str(error) == "An OPTIONS invocation to https://api.example.com is already in progress"


def test_invocation_in_progress_error_without_url() -> None:
    """Test the message without target URL."""
    error = InvocationInProgressError()
    assert error.url is None
    assert str(error) == "An OPTIONS invocation is already in progress"
