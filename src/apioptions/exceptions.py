r"""Define the exceptions raised by the apioptions package.

Failures of the HTTP exchange itself are never raised: they are reported
through the output slots and the terminal signal of the invocation. The
exceptions below only signal misuse of the API.
"""

from __future__ import annotations

__all__ = ["ApiOptionsError", "InvocationInProgressError"]


class ApiOptionsError(Exception):
    r"""Base class of all the exceptions raised by apioptions."""


class InvocationInProgressError(ApiOptionsError):
    r"""Raised when an action is activated while its previous invocation
    has not fired its terminal signal yet.

    Args:
        url: The URL targeted by the running invocation, if known.

    Example:
        ```pycon
        >>> from apioptions.exceptions import InvocationInProgressError
        >>> err = InvocationInProgressError("https://api.example.com")
        >>> str(err)
        'An OPTIONS invocation to https://api.example.com is already in progress'

        ```
    """

    def __init__(self, url: str | None = None) -> None:
        target = f" to {url}" if url else ""
        super().__init__(f"An OPTIONS invocation{target} is already in progress")
        self.url = url
