r"""Classify transport results into outcomes and record them in the
output slots."""

from __future__ import annotations

__all__ = ["classify", "record_outcome", "record_response"]

import logging
from typing import TYPE_CHECKING

from apioptions.outcome import (
    ClientError,
    NetworkError,
    ResponseData,
    ServerError,
    Success,
    Timeout,
    UnclassifiedFailure,
)
from apioptions.transport import ResultKind
from apioptions.utils.status import format_headers, get_header, get_status_message

if TYPE_CHECKING:
    from apioptions.outcome import Outcome
    from apioptions.slots import OutputSlots
    from apioptions.transport import TransportResult

logger: logging.Logger = logging.getLogger(__name__)

# Response headers copied to dedicated output slots
OPTIONS_HEADER_SLOTS: tuple[tuple[str, str], ...] = (
    ("Allow", "allowed_methods"),
    ("Access-Control-Allow-Headers", "allowed_headers"),
    ("Access-Control-Max-Age", "max_age"),
)


def _is_timeout(result: TransportResult) -> bool:
    return result.timed_out or "timeout" in result.error_text


def classify(result: TransportResult) -> Outcome:
    r"""Map a transport result to exactly one outcome.

    Precedence: a received response is classified by its status code;
    then timeouts, then other connection errors; any other failure is
    unclassified.

    Args:
        result: The transport result of one attempt.

    Returns:
        The outcome of the attempt.

    Example:
        ```pycon
        >>> from apioptions.core.classifier import classify
        >>> from apioptions.transport import ResultKind, TransportResult
        >>> classify(
        ...     TransportResult(ResultKind.PROTOCOL_ERROR, status_code=403, error_text="Forbidden")
        ... ).message
        'Client Error 403: Forbidden'
        >>> classify(
        ...     TransportResult(
        ...         ResultKind.CONNECTION_ERROR, error_text="Connection timeout after 30000ms"
        ...     )
        ... )
        Timeout(message='Request timeout')

        ```
    """
    if result.has_response:
        code = result.status_code
        response = ResponseData(status_code=code, body=result.body, headers=dict(result.headers))
        if 200 <= code < 300:
            return Success(response=response)
        if 400 <= code < 500:
            return ClientError(
                response=response, message=f"Client Error {code}: {result.error_text}"
            )
        if code >= 500:
            return ServerError(
                response=response, message=f"Server Error {code}: {result.error_text}"
            )
        return UnclassifiedFailure(message=f"Error: {get_status_message(code)}", response=response)
    if result.kind is ResultKind.CONNECTION_ERROR:
        if _is_timeout(result):
            return Timeout()
        return NetworkError(message=f"Network Error: {result.error_text}")
    return UnclassifiedFailure(message=f"Error: {result.error_text}")


def record_response(response: ResponseData, outputs: OutputSlots) -> None:
    r"""Write a received response to the output slots.

    Status code, status message, body and headers text are always
    written; the OPTIONS-specific slots only when their header is
    present.

    Args:
        response: The received response.
        outputs: The output slots. Unbound slots are skipped.
    """
    outputs.write("status_code", response.status_code)
    outputs.write("status_message", get_status_message(response.status_code))
    outputs.write("response_body", response.body)
    outputs.write("response_headers", format_headers(response.headers))
    for header, slot in OPTIONS_HEADER_SLOTS:
        value = get_header(response.headers, header)
        if value is not None:
            outputs.write(slot, value)


def record_outcome(outcome: Outcome, outputs: OutputSlots) -> None:
    r"""Write an outcome to the output slots.

    Response data is recorded before the error message. Timeouts and
    network errors have no response and only set the error message.

    Args:
        outcome: The outcome of an attempt.
        outputs: The output slots. Unbound slots are skipped.
    """
    if outcome.response is not None:
        record_response(outcome.response, outputs)
    if outcome.message is not None:
        outputs.write("error_message", outcome.message)
    logger.debug(f"Recorded {outcome.signal.value} outcome")
