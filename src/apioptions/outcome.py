r"""Outcome of a single OPTIONS attempt.

Each attempt resolves to exactly one outcome. Outcomes with a response
(success, client error, server error) are terminal; timeouts and network
errors are retryable; unclassified failures are terminal and never
retried.
"""

from __future__ import annotations

__all__ = [
    "ClientError",
    "NetworkError",
    "Outcome",
    "ResponseData",
    "ServerError",
    "Success",
    "Timeout",
    "UnclassifiedFailure",
]

from dataclasses import dataclass, field
from typing import ClassVar, Union

from apioptions.signals import Signal


@dataclass(frozen=True)
class ResponseData:
    """The HTTP response received by an attempt.

    Attributes:
        status_code: The HTTP status code.
        body: The decoded response body.
        headers: The response headers, in transport order.
    """

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Success:
    response: ResponseData

    signal: ClassVar[Signal] = Signal.SUCCESS
    retryable: ClassVar[bool] = False
    message: ClassVar[str | None] = None


@dataclass(frozen=True)
class ClientError:
    response: ResponseData
    message: str

    signal: ClassVar[Signal] = Signal.CLIENT_ERROR
    retryable: ClassVar[bool] = False


@dataclass(frozen=True)
class ServerError:
    response: ResponseData
    message: str

    signal: ClassVar[Signal] = Signal.SERVER_ERROR
    retryable: ClassVar[bool] = False


@dataclass(frozen=True)
class NetworkError:
    message: str

    signal: ClassVar[Signal] = Signal.NETWORK_ERROR
    retryable: ClassVar[bool] = True
    response: ClassVar[None] = None


@dataclass(frozen=True)
class Timeout:
    message: str = "Request timeout"

    signal: ClassVar[Signal] = Signal.TIMEOUT
    retryable: ClassVar[bool] = True
    response: ClassVar[None] = None


@dataclass(frozen=True)
class UnclassifiedFailure:
    """A failure outside the other categories.

    It fires the network-error signal but is never retried.
    """

    message: str
    response: ResponseData | None = None

    signal: ClassVar[Signal] = Signal.NETWORK_ERROR
    retryable: ClassVar[bool] = False


Outcome = Union[Success, ClientError, ServerError, NetworkError, Timeout, UnclassifiedFailure]
