r"""Parameter validation for the OPTIONS request configuration."""

from __future__ import annotations

__all__ = ["validate_max_retries", "validate_retry_params", "validate_timeout"]


def validate_timeout(timeout: float) -> None:
    """Validate the request timeout.

    Args:
        timeout: Seconds to wait for the response. ``0`` disables the
            timeout.

    Raises:
        ValueError: If ``timeout`` is negative.

    Example:
        ```pycon
        >>> from apioptions.core.validation import validate_timeout
        >>> validate_timeout(30.0)
        >>> validate_timeout(0)
        >>> validate_timeout(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be >= 0, got -1

        ```
    """
    if timeout < 0:
        msg = f"timeout must be >= 0, got {timeout}"
        raise ValueError(msg)


def validate_max_retries(max_retries: int) -> None:
    """Validate the maximum number of retries.

    Raises:
        ValueError: If ``max_retries`` is negative.
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)


def validate_retry_params(max_retries: int, retry_delay: float) -> None:
    """Validate the retry parameters.

    Args:
        max_retries: Maximum number of retries. ``0`` means a single
            attempt.
        retry_delay: Seconds to wait before each retry.

    Raises:
        ValueError: If ``max_retries`` or ``retry_delay`` is negative.

    Example:
        ```pycon
        >>> from apioptions.core.validation import validate_retry_params
        >>> validate_retry_params(max_retries=3, retry_delay=1.0)
        >>> validate_retry_params(max_retries=-1, retry_delay=1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    validate_max_retries(max_retries)
    if retry_delay < 0:
        msg = f"retry_delay must be >= 0, got {retry_delay}"
        raise ValueError(msg)
